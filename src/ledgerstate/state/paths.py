"""Generic get/set at a path over nested mappings.

Snapshots are treated as immutable. ``set_in`` copies only the mappings
along the written path; every other branch is shared with the input
snapshot, so old references stay valid and unchanged.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from typing import Any

Path = tuple[Hashable, ...]
KeyLike = str | Sequence[Hashable]


def split_key(key: KeyLike) -> Path:
    """Turn a dotted key (``"info.balance"``) or a key sequence into a path."""
    if isinstance(key, str):
        return tuple(part for part in key.split(".") if part)
    return tuple(key)


def get_in(tree: Any, path: Path, default: Any = None) -> Any:
    node = tree
    for key in path:
        if not isinstance(node, Mapping) or key not in node:
            return default
        node = node[key]
    return node


def set_in(tree: Any, path: Path, value: Any) -> dict[Any, Any]:
    """Return a copy of *tree* with *value* stored at *path*.

    Missing or non-mapping intermediates are replaced by empty mappings.
    """
    base: dict[Any, Any] = dict(tree) if isinstance(tree, Mapping) else {}
    if not path:
        raise ValueError("path must be non-empty")
    head, *rest = path
    if rest:
        base[head] = set_in(base.get(head), tuple(rest), value)
    else:
        base[head] = value
    return base

def deep_merge(base: Any, patch: Mapping[Any, Any]) -> dict[Any, Any]:
    """Merge *patch* over *base*, recursing into nested mappings.

    Leaf values from *patch* win. Keys only present in *base* are kept.
    Neither input is modified.
    """
    merged: dict[Any, Any] = dict(base) if isinstance(base, Mapping) else {}
    for key, value in patch.items():
        current = merged.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = thaw(value)
    return merged


def thaw(value: Any) -> Any:
    """Convert nested mappings/sequences from a payload into plain dicts/lists."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [thaw(item) for item in value]
    return value
