import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple
from splito.core.errors import InputError, ValidationError
from splito.core.money import (
    BALANCED_TOLERANCE,
    SHARE_TOLERANCE,
    ZERO,
    ensure_amount,
    qround,
)
from splito.schemas.expense import ExpenseShare
from splito.schemas.settlements import SettlementSummary

logger = logging.getLogger(__name__)


def _ensure_participant(value, field: str) -> str:
    if not isinstance(value, str) or not value:
        raise InputError(f"{field} must be a non-empty participant id", field=field)
    return value


class ExpenseLedger:
    """
    Running net balance per participant for one settlement computation.

    balance > 0 : participant is owed money
    balance < 0 : participant owes money

    Participants keep the order in which they were first seen, the solver's
    pairing depends on it.
    """

    def __init__(self):
        self._balances: Dict[str, Decimal] = {}

    def __len__(self):
        return len(self._balances)

    def __contains__(self, participant):
        return participant in self._balances

    def add_expense(self, payer: str, total_amount, shares: Iterable[ExpenseShare]) -> None:
        payer = _ensure_participant(payer, "payer")
        total = ensure_amount(total_amount, "total_amount")

        # Validate everything before touching the balances
        parsed: List[Tuple[str, Decimal]] = []
        for pos, share in enumerate(shares):
            participant = _ensure_participant(share.participant, f"shares[{pos}].participant")
            parsed.append((participant, ensure_amount(share.amount, f"shares[{pos}].amount")))

        shares_total = sum((amount for _, amount in parsed), ZERO)
        if abs(shares_total - total) > SHARE_TOLERANCE:
            raise ValidationError(shares_total=shares_total, expected_total=total)

        for participant, amount in parsed:
            self._balances[participant] = self._balances.get(participant, ZERO) - amount

        self._balances[payer] = self._balances.get(payer, ZERO) + total

        logger.debug(
            "Expense added | payer=%s total=%s shares=%d balances=%s",
            payer, total, len(parsed), self._balances,
        )

    def get_balances(self) -> Dict[str, Decimal]:
        return {name: qround(bal) for name, bal in self._balances.items()}

    def raw_balances(self) -> Dict[str, Decimal]:
        return dict(self._balances)

    def summary(self) -> SettlementSummary:
        total_debt = ZERO
        total_credit = ZERO

        for bal in self._balances.values():
            if bal < 0:
                total_debt += -bal
            elif bal > 0:
                total_credit += bal

        return SettlementSummary(
            total_debt=qround(total_debt),
            total_credit=qround(total_credit),
            is_balanced=abs(total_debt - total_credit) < BALANCED_TOLERANCE,
            participant_count=len(self._balances),
        )

    def reset(self) -> None:
        self._balances.clear()
