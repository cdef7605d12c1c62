"""Collaborators consumed by the promotion state operations.

The state operations never reach for a global settings store, action bus or
clock. Callers bundle those collaborators into a :class:`LedgerContext` and
pass it per call.
"""

from __future__ import annotations

import dataclasses
import time
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from ledgerstate._constants import PAYMENTS_ENABLED
from ledgerstate.config import LedgerConfig

Clock = Callable[[], int]
"""Returns the current time in epoch milliseconds."""


@runtime_checkable
class SettingsProvider(Protocol):
    def get_setting(self, key: str) -> Any: ...


@runtime_checkable
class NotificationDispatcher(Protocol):
    def hide_notification(self, message: str) -> None: ...


def system_clock() -> int:
    return int(time.time() * 1000)


@dataclasses.dataclass(frozen=True)
class LedgerContext:
    """Injected collaborators for one call into the state layer.

    Parameters
    ----------
    settings : SettingsProvider or None
        Source of the payments-enabled flag. When ``None`` the classifier
        falls back to ``config.payments_enabled_default``.
    dispatcher : NotificationDispatcher or None
        Receives notification-hide effects from ``save_promotion``. When
        ``None`` effects are dropped (and logged).
    clock : Clock
        Epoch-milliseconds time source.
    config : LedgerConfig
        Library configuration.
    """

    settings: SettingsProvider | None = None
    dispatcher: NotificationDispatcher | None = None
    clock: Clock = system_clock
    config: LedgerConfig = dataclasses.field(default_factory=LedgerConfig)

    def now(self) -> int:
        return int(self.clock())

    def payments_enabled(self) -> bool:
        """Resolve the payments flag from settings, or the configured default."""
        if self.settings is None:
            return self.config.payments_enabled_default
        return bool(self.settings.get_setting(PAYMENTS_ENABLED))


DEFAULT_CONTEXT = LedgerContext()


def resolve_context(context: LedgerContext | None) -> LedgerContext:
    return DEFAULT_CONTEXT if context is None else context
