"""Accessors for values under the ``ledger`` root of the application state."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ledgerstate._constants import BALANCE_PATH, LEDGER_ROOT
from ledgerstate.normalize import safe_float
from ledgerstate.state.paths import KeyLike, get_in, set_in, split_key


def set_ledger_value(state: Mapping[str, Any], key: KeyLike | None = None, value: Any = None) -> Mapping[str, Any]:
    """Return *state* with ``ledger[key] = value``.

    A falsy *key* returns *state* itself. Dotted keys address nested values
    (``"info.balance"``).
    """
    if not key:
        return state
    path = split_key(key)
    if not path:
        return state
    return set_in(state, (LEDGER_ROOT, *path), value)


def get_ledger_value(state: Mapping[str, Any], key: KeyLike | None = None) -> Any:
    if not key:
        return None
    path = split_key(key)
    if not path:
        return None
    return get_in(state, (LEDGER_ROOT, *path))


def get_wallet_balance(state: Mapping[str, Any]) -> float:
    """Wallet balance from ``ledger.info.balance``; ``0.0`` when absent or unparsable."""
    balance = safe_float(get_in(state, BALANCE_PATH))
    return 0.0 if balance is None else balance
