"""Promotion lifecycle under ``ledger.promotion``.

A promotion record looks like::

    {
        "promotionId": "1",
        "activeState": "emptyWallet",
        "remindTimestamp": -1,
        "claimedTimestamp": 1514764800000,
        "stateWallet": {
            "emptyWallet": {"notification": {"message": "..."}},
        },
    }

``activeState`` is only ever derived by :func:`set_active_promotion`.
``remindTimestamp`` and ``claimedTimestamp`` are user-specific and survive
re-saving the same promotion.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from ledgerstate._constants import NO_REMINDER, PROMOTION_PATH
from ledgerstate.context import LedgerContext, resolve_context
from ledgerstate.models import Promotion
from ledgerstate.normalize import is_meaningful, safe_int
from ledgerstate.state.events import HideNotification, PromotionMerge
from ledgerstate.state.ledger import get_wallet_balance
from ledgerstate.state.paths import deep_merge, get_in, set_in, thaw
from ledgerstate.state.policy import classify_wallet

_logger = logging.getLogger(__name__)

AppState = Mapping[str, Any]


def _payload_to_dict(promotion: Any) -> dict[str, Any] | None:
    if isinstance(promotion, BaseModel):
        return promotion.model_dump(by_alias=True, exclude_unset=True)
    if isinstance(promotion, Mapping):
        return thaw(promotion)
    return None


def _active_message(promotion: Mapping[str, Any]) -> str | None:
    active = promotion.get("activeState")
    if not active:
        return None
    message = get_in(promotion, ("stateWallet", active, "notification", "message"))
    if isinstance(message, str) and is_meaningful(message):
        return message
    return None


# ---------------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------------


def merge_promotion(
    state: AppState,
    promotion: Any = None,
    *,
    context: LedgerContext | None = None,
) -> PromotionMerge:
    """Merge an incoming promotion payload into ``ledger.promotion``.

    Pure: the notification that has to be hidden (if any) is returned as
    ``PromotionMerge.hide`` instead of being dispatched.

    - Same promotion (equal ``promotionId``, or no prior id): the payload is
      deep-merged over the existing record and an existing
      ``remindTimestamp`` is kept (``-1`` otherwise).
    - Different promotion: the existing record is discarded, the reminder
      resets to ``-1``, and the old active-state notification message (if
      any) is reported for hiding.

    The active state is re-derived afterwards in both cases.
    """
    if promotion is None:
        return PromotionMerge(state=state)

    incoming = _payload_to_dict(promotion)
    if incoming is None:
        _logger.debug("Ignoring promotion payload of type %s", type(promotion).__name__)
        return PromotionMerge(state=state)

    ctx = resolve_context(context)
    existing = get_promotion(state)
    existing_id = existing.get("promotionId")
    same = not is_meaningful(existing_id) or existing_id == incoming.get("promotionId")

    hide: HideNotification | None = None
    if same:
        record = deep_merge(existing, incoming)
        record["remindTimestamp"] = existing.get("remindTimestamp", NO_REMINDER)
    else:
        message = _active_message(existing)
        if message is not None:
            hide = HideNotification(message=message)
        _logger.debug(
            "Promotion replaced old=%s new=%s hide=%s",
            existing_id,
            incoming.get("promotionId"),
            message is not None,
        )
        record = incoming
        record["remindTimestamp"] = NO_REMINDER

    new_state = set_in(state, PROMOTION_PATH, record)
    new_state = set_active_promotion(new_state, context=ctx)
    return PromotionMerge(state=new_state, hide=hide, replaced=not same)


def save_promotion(
    state: AppState,
    promotion: Any = None,
    *,
    context: LedgerContext | None = None,
) -> AppState:
    """Merge *promotion* and dispatch the resulting notification-hide, if any."""
    ctx = resolve_context(context)
    merge = merge_promotion(state, promotion, context=ctx)
    if merge.hide is not None:
        if ctx.dispatcher is None:
            _logger.debug("No dispatcher; dropping hide for message=%r", merge.hide.message)
        else:
            _logger.debug("Hiding promotion notification message=%r", merge.hide.message)
            ctx.dispatcher.hide_notification(merge.hide.message)
    return merge.state


# ---------------------------------------------------------------------------
# Active state
# ---------------------------------------------------------------------------


def set_active_promotion(
    state: AppState,
    payments_enabled: bool | None = None,
    *,
    context: LedgerContext | None = None,
) -> AppState:
    """Derive ``activeState`` from the payments flag and the wallet balance.

    The flag is read from the context's settings provider when not given.
    Without a promotion the state is returned unchanged.
    """
    if not get_promotion(state):
        return state

    if payments_enabled is None:
        payments_enabled = resolve_context(context).payments_enabled()

    label = classify_wallet(payments_enabled=bool(payments_enabled), balance=get_wallet_balance(state))
    _logger.debug("Promotion active state=%s", label.value)
    return set_promotion_prop(state, "activeState", label.value)


def get_active_promotion(state: AppState) -> Mapping[str, Any]:
    """State slice of the current active state; empty mapping when unknown."""
    active = get_promotion(state).get("activeState")
    if not active:
        return {}
    found = get_in(get_promotion(state), ("stateWallet", active))
    return found if isinstance(found, Mapping) else {}


# ---------------------------------------------------------------------------
# Promotion props
# ---------------------------------------------------------------------------


def get_promotion(state: AppState) -> Mapping[str, Any]:
    found = get_in(state, PROMOTION_PATH)
    return found if isinstance(found, Mapping) else {}


def set_promotion_prop(state: AppState, key: str | None = None, value: Any = None) -> AppState:
    if not key:
        return state
    return set_in(state, (*PROMOTION_PATH, key), value)


def get_promotion_prop(state: AppState, key: str | None = None) -> Any:
    if not key:
        return None
    return get_promotion(state).get(key)


def remove_promotion(state: AppState) -> AppState:
    """Reset the promotion to an empty record."""
    return set_in(state, PROMOTION_PATH, {})


def remind_me_later(
    state: AppState,
    offset: int | None = None,
    *,
    context: LedgerContext | None = None,
) -> AppState:
    """Schedule the next promotion reminder.

    Without *offset* the reminder lands ``config.remind_later_seconds`` from
    now. An explicit *offset* is added to the clock as milliseconds; a
    non-numeric offset falls back to the default window.
    """
    ctx = resolve_context(context)
    now = ctx.now()
    parsed = safe_int(offset)
    if parsed is None:
        timestamp = now + ctx.config.remind_later_seconds * 1000
    else:
        timestamp = now + parsed
    _logger.debug("Promotion reminder scheduled at=%d", timestamp)
    return set_promotion_prop(state, "remindTimestamp", timestamp)


# ---------------------------------------------------------------------------
# Notification
# ---------------------------------------------------------------------------


def get_promotion_notification(state: AppState) -> Mapping[str, Any]:
    notification = get_active_promotion(state).get("notification")
    return notification if isinstance(notification, Mapping) else {}


def set_promotion_notification_prop(state: AppState, key: str | None = None, value: Any = None) -> AppState:
    """Set a notification field on the active state slice.

    No-op without *key* or without a known active state.
    """
    if not key:
        return state
    active = get_promotion(state).get("activeState")
    if not active:
        return state
    return set_in(state, (*PROMOTION_PATH, "stateWallet", active, "notification", key), value)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def get_about_promotion(state: AppState) -> Mapping[str, Any]:
    """Active state slice for the about page, with ``claimedTimestamp`` copied in."""
    promotion = get_promotion(state)
    if not promotion.get("activeState"):
        return {}
    view = dict(get_active_promotion(state))
    claimed = promotion.get("claimedTimestamp")
    if claimed is not None:
        view["claimedTimestamp"] = claimed
    return view


def is_reminder_due(state: AppState, *, context: LedgerContext | None = None) -> bool:
    """Whether the promotion notification may be shown again now."""
    promotion = get_promotion(state)
    if not promotion:
        return False
    timestamp = safe_int(promotion.get("remindTimestamp"))
    if timestamp is None or timestamp == NO_REMINDER:
        return True
    return timestamp <= resolve_context(context).now()


def read_promotion(state: AppState) -> Promotion:
    return Promotion.model_validate(dict(get_promotion(state)))
