"""Typed read-only views of a promotion record.

The state tree stores promotions as plain camelCase mappings. These models
give callers (UI, reminder scheduling) a validated snapshot:

* ``alias_generator=to_camel`` maps ``promotionId`` to ``promotion_id`` etc.
* unknown keys are ignored, so new server fields never break parsing.
* wallet-state labels without a mapped member are kept as plain strings.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ledgerstate._constants import NO_REMINDER
from ledgerstate.normalize import safe_int
from ledgerstate.state.events import WalletState


class LedgerBaseModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class Notification(LedgerBaseModel):
    message: str | None = None
    buttons: list[dict[str, Any]] = Field(default_factory=list)
    options: dict[str, Any] = Field(default_factory=dict)


class StateSlice(LedgerBaseModel):
    notification: Notification | None = None


class Promotion(LedgerBaseModel):
    """Snapshot of ``ledger.promotion``."""

    promotion_id: str | None = None
    active_state: WalletState | str | None = Field(default=None, union_mode="left_to_right")
    remind_timestamp: int = NO_REMINDER
    claimed_timestamp: int | None = None
    state_wallet: dict[str, StateSlice] = Field(default_factory=dict)

    @field_validator("remind_timestamp", mode="before")
    @classmethod
    def _coerce_remind(cls, value: Any) -> int:
        parsed = safe_int(value)
        return NO_REMINDER if parsed is None else parsed

    @field_validator("claimed_timestamp", mode="before")
    @classmethod
    def _coerce_claimed(cls, value: Any) -> int | None:
        return safe_int(value)

    @property
    def is_empty(self) -> bool:
        return self.promotion_id is None and not self.state_wallet

    @property
    def is_claimed(self) -> bool:
        return self.claimed_timestamp is not None

    def active_slice(self) -> StateSlice:
        if self.active_state is None:
            return StateSlice()
        return self.state_wallet.get(str(self.active_state), StateSlice())
