"""Setting keys, state-tree keys and defaults shared across ledgerstate."""

from __future__ import annotations

# Settings key consulted when the payments flag is not passed explicitly.
PAYMENTS_ENABLED = "payments.enabled"

LEDGER_ROOT = "ledger"
PROMOTION_PATH: tuple[str, ...] = (LEDGER_ROOT, "promotion")
BALANCE_PATH: tuple[str, ...] = (LEDGER_ROOT, "info", "balance")

# Reminder timestamp for a promotion with no reminder set.
NO_REMINDER = -1

# Default "remind me later" window (24 hours).
DEFAULT_REMIND_LATER_SECONDS = 24 * 3600
