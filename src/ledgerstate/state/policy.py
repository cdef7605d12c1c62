"""Active-state classification rule.

This module contains only the decision; reading the flag and the balance
out of the state tree is done by the caller.
"""

from __future__ import annotations

from ledgerstate.state.events import WalletState


def classify_wallet(*, payments_enabled: bool, balance: float | None) -> WalletState:
    """Map the payments flag and wallet balance to a wallet state.

    - payments disabled -> ``disabledWallet``
    - enabled, balance absent or not positive -> ``emptyWallet``
    - enabled, positive balance -> ``fundedWallet``
    """
    if not payments_enabled:
        return WalletState.DISABLED
    if balance is None or balance <= 0:
        return WalletState.EMPTY
    return WalletState.FUNDED
