"""ledgerstate - Promotion state for the ledger sub-tree of an application state."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ledgerstate")
except PackageNotFoundError:
    __version__ = "0+local"
from ledgerstate._constants import NO_REMINDER, PAYMENTS_ENABLED
from ledgerstate.config import LedgerConfig
from ledgerstate.context import LedgerContext, NotificationDispatcher, SettingsProvider, system_clock
from ledgerstate.exceptions import LedgerConfigError, LedgerError
from ledgerstate.models import Notification, Promotion, StateSlice
from ledgerstate.state.events import HideNotification, PromotionMerge, WalletState
from ledgerstate.state.ledger import get_ledger_value, get_wallet_balance, set_ledger_value
from ledgerstate.state.promotion import (
    get_about_promotion,
    get_active_promotion,
    get_promotion,
    get_promotion_notification,
    get_promotion_prop,
    is_reminder_due,
    merge_promotion,
    read_promotion,
    remind_me_later,
    remove_promotion,
    save_promotion,
    set_active_promotion,
    set_promotion_notification_prop,
    set_promotion_prop,
)

__all__ = [
    "__version__",
    "HideNotification",
    "LedgerConfig",
    "LedgerConfigError",
    "LedgerContext",
    "LedgerError",
    "NO_REMINDER",
    "Notification",
    "NotificationDispatcher",
    "PAYMENTS_ENABLED",
    "Promotion",
    "PromotionMerge",
    "SettingsProvider",
    "StateSlice",
    "WalletState",
    "get_about_promotion",
    "get_active_promotion",
    "get_ledger_value",
    "get_promotion",
    "get_promotion_notification",
    "get_promotion_prop",
    "get_wallet_balance",
    "is_reminder_due",
    "merge_promotion",
    "read_promotion",
    "remind_me_later",
    "remove_promotion",
    "save_promotion",
    "set_active_promotion",
    "set_ledger_value",
    "set_promotion_notification_prop",
    "set_promotion_prop",
    "system_clock",
]
