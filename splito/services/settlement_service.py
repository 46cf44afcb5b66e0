from decimal import Decimal
from typing import List, Mapping
from splito.core.config import settings
from splito.core.errors import InputError
from splito.core.money import BALANCE_EPSILON, format_amount, qround, to_decimal
from splito.schemas.settlements import Transaction


def describe_payment(debtor: str, creditor: str, amount: Decimal) -> str:
    return f"{debtor} pays {settings.CURRENCY_SYMBOL}{format_amount(amount)} to {creditor}"


class SettlementSolver:
    """
    Greedy two-pointer matching of debtors against creditors.

    Debtors and creditors are walked in the balance map's own order, not
    sorted by size. Every step settles at least one side, so the result has
    at most (debtors + creditors - 1) transactions.

    No validation happens here: a map that doesn't sum to zero simply leaves
    the surplus unmatched.
    """

    def __init__(self, epsilon: Decimal = BALANCE_EPSILON):
        self.epsilon = epsilon

    def solve(self, balances: Mapping[str, Decimal]) -> List[Transaction]:
        # Step 1: Split into payers / receivers, amounts stored as positive
        debtors = []
        creditors = []

        for name, value in balances.items():
            bal = to_decimal(value, f"balances[{name}]")
            if not bal.is_finite():
                raise InputError(f"balance of {name} must be finite, got {bal}", field=name)

            if bal < -self.epsilon:
                debtors.append([name, -bal])
            elif bal > self.epsilon:
                creditors.append([name, bal])

        # Step 2: Greedy settlement matching
        transactions: List[Transaction] = []
        i = 0
        j = 0

        while i < len(debtors) and j < len(creditors):
            debtor, owe = debtors[i]
            creditor, recv = creditors[j]

            pay = min(owe, recv)
            amount = qround(pay)

            # sub-cent leftovers still close out the pair, they just aren't paid
            if amount > 0:
                transactions.append(Transaction(
                    from_=debtor,
                    to=creditor,
                    amount=amount,
                    description=describe_payment(debtor, creditor, amount),
                ))

            debtors[i][1] -= pay
            creditors[j][1] -= pay

            if debtors[i][1] < self.epsilon:
                i += 1
            if creditors[j][1] < self.epsilon:
                j += 1

        return transactions


def simplify_debts(balances: Mapping[str, Decimal]) -> List[Transaction]:
    return SettlementSolver().solve(balances)
