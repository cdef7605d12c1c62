"""Custom exception hierarchy for ledgerstate."""

from __future__ import annotations


class LedgerError(Exception):
    """Base exception for all ledgerstate errors."""


class LedgerConfigError(LedgerError):
    """Invalid or missing configuration."""

    def __init__(self, message: str, *, field: str = "") -> None:
        self.field = field
        super().__init__(message)
