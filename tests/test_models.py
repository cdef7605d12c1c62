from __future__ import annotations

import pytest
from pydantic import ValidationError

from ledgerstate.models import Promotion, StateSlice
from ledgerstate.state.events import HideNotification, WalletState
from ledgerstate.state.policy import classify_wallet


def test_promotion_defaults_from_empty_record() -> None:
    promotion = Promotion.model_validate({})

    assert promotion.is_empty
    assert promotion.remind_timestamp == -1
    assert promotion.active_slice() == StateSlice()


def test_promotion_active_state_maps_known_labels() -> None:
    known = Promotion.model_validate({"activeState": "emptyWallet"})
    unknown = Promotion.model_validate({"activeState": "futureWallet"})

    assert known.active_state is WalletState.EMPTY
    assert unknown.active_state == "futureWallet"


def test_promotion_timestamps_are_coerced() -> None:
    promotion = Promotion.model_validate({"remindTimestamp": "1500", "claimedTimestamp": ""})

    assert promotion.remind_timestamp == 1500
    assert promotion.claimed_timestamp is None
    assert not promotion.is_claimed


def test_promotion_dump_uses_camel_case() -> None:
    promotion = Promotion(promotion_id="1", claimed_timestamp=10)

    dumped = promotion.model_dump(by_alias=True, exclude_unset=True)

    assert dumped == {"promotionId": "1", "claimedTimestamp": 10}


def test_hide_notification_rejects_blank_message() -> None:
    with pytest.raises(ValidationError):
        HideNotification(message="  ")


def test_classify_wallet() -> None:
    assert classify_wallet(payments_enabled=False, balance=5) is WalletState.DISABLED
    assert classify_wallet(payments_enabled=True, balance=None) is WalletState.EMPTY
    assert classify_wallet(payments_enabled=True, balance=-1) is WalletState.EMPTY
    assert classify_wallet(payments_enabled=True, balance=0.01) is WalletState.FUNDED
