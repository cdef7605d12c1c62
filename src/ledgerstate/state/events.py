"""Wallet-state labels and the effects emitted by promotion merges.

Merging stays pure: instead of calling the notification dispatcher, the
merge returns a :class:`HideNotification` describing what to hide, and the
caller decides when to perform it.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WalletState(StrEnum):
    DISABLED = "disabledWallet"
    EMPTY = "emptyWallet"
    FUNDED = "fundedWallet"


class HideNotification(BaseModel):
    """Request to hide a notification that is currently on screen."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Message of the notification to hide")

    @field_validator("message")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must be non-empty")
        return value


class PromotionMerge(BaseModel):
    """Outcome of merging a promotion payload into a state snapshot."""

    model_config = ConfigDict(frozen=True)

    state: Any
    hide: HideNotification | None = None
    replaced: bool = Field(default=False, description="A different promotion was discarded")
