from decimal import Decimal


class SettlementError(Exception):
    """Base class for everything the settlement engine raises."""

    kind = "settlement"


class InputError(SettlementError):
    """An amount or participant that can never enter the ledger.

    Raised for non-numeric, non-finite (NaN / Infinity) or negative amounts
    and for empty participant ids.
    """

    kind = "input"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class ValidationError(SettlementError):
    """The shares of an expense do not add up to its total."""

    kind = "validation"

    def __init__(self, shares_total: Decimal, expected_total: Decimal):
        self.shares_total = shares_total
        self.expected_total = expected_total
        super().__init__(
            f"Split total ({shares_total}) must equal expense amount ({expected_total})"
        )
