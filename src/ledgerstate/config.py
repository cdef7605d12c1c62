"""Library configuration for ledgerstate."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from ledgerstate._constants import DEFAULT_REMIND_LATER_SECONDS
from ledgerstate.exceptions import LedgerConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class LedgerConfig:
    """Ledger state configuration.

    Parameters
    ----------
    remind_later_seconds : int
        Window applied by ``remind_me_later`` when no explicit offset is
        given. Defaults to 24 hours.
    payments_enabled_default : bool
        Payments flag assumed by the active-state classifier when neither an
        explicit flag nor a settings provider is available.
    """

    remind_later_seconds: int = DEFAULT_REMIND_LATER_SECONDS
    payments_enabled_default: bool = True

    def __post_init__(self) -> None:
        if self.remind_later_seconds < 0:
            raise LedgerConfigError(
                "remind_later_seconds must be non-negative",
                field="remind_later_seconds",
            )

    @classmethod
    def from_env(cls, **overrides: Any) -> LedgerConfig:
        """Create configuration from ``LEDGER_*`` environment variables.

        Reads ``LEDGER_REMIND_LATER_SECONDS`` and
        ``LEDGER_PAYMENTS_ENABLED_DEFAULT``. Explicit keyword arguments
        override environment values.

        Raises
        ------
        LedgerConfigError
            If an environment value cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        remind_env = env.get("LEDGER_REMIND_LATER_SECONDS")
        if remind_env is not None and "remind_later_seconds" not in overrides:
            try:
                config_kwargs["remind_later_seconds"] = int(remind_env)
            except ValueError as exc:
                raise LedgerConfigError(
                    f"LEDGER_REMIND_LATER_SECONDS is not an integer: {remind_env!r}",
                    field="remind_later_seconds",
                ) from exc

        if "payments_enabled_default" not in overrides:
            config_kwargs["payments_enabled_default"] = _env_bool(
                env.get("LEDGER_PAYMENTS_ENABLED_DEFAULT"),
                True,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
