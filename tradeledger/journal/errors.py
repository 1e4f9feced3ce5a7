"""Ledger exceptions."""


class LedgerError(Exception):
    """Base class for ledger errors."""


class InvalidTradeError(LedgerError, ValueError):
    """Submitted trade fields cannot form a valid trade record."""

    def __init__(self, field_name: str, value=None, reason: str = "is required"):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Trade field '{field_name}' {reason} (got {value!r})")
