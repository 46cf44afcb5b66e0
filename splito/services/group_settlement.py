import logging
from typing import Iterable, List
from splito.core.errors import SettlementError, ValidationError
from splito.schemas.expense import ExpenseRecord
from splito.schemas.settlements import RecordError, SettlementResult, Transaction
from splito.services.ledger import ExpenseLedger
from splito.services.settlement_service import SettlementSolver

logger = logging.getLogger(__name__)


def _record_error(index: int, record: ExpenseRecord, exc: SettlementError) -> RecordError:
    err = RecordError(
        index=index,
        payer=record.payer,
        kind=exc.kind,
        message=str(exc),
    )

    if isinstance(exc, ValidationError):
        err.shares_total = exc.shares_total
        err.expected_total = exc.expected_total

    return err


class GroupSettlementCalculator:
    def __init__(self, solver: SettlementSolver | None = None):
        self.solver = solver or SettlementSolver()

    def calculate(self, records: Iterable[ExpenseRecord]) -> SettlementResult:
        """
        Settle a whole group's expense history.

        A bad record is skipped, logged and reported in `errors`; the rest of
        the group is still settled and the result is flagged `is_partial`.
        """
        # never shared between calls
        ledger = ExpenseLedger()
        errors: List[RecordError] = []

        for index, record in enumerate(records):
            try:
                ledger.add_expense(record.payer, record.total_amount, record.shares)
            except SettlementError as exc:
                logger.warning("Expense record %d rejected (%s): %s", index, exc.kind, exc)
                errors.append(_record_error(index, record, exc))

        balances = ledger.get_balances()
        transactions = self.solver.solve(balances)

        return SettlementResult(
            transactions=transactions,
            balances=balances,
            summary=ledger.summary(),
            errors=errors,
            is_partial=bool(errors),
        )


def calculate_group_settlement(records: Iterable[ExpenseRecord]) -> SettlementResult:
    return GroupSettlementCalculator().calculate(records)


def transactions_for(result: SettlementResult, participant: str) -> List[Transaction]:
    return [t for t in result.transactions if participant in (t.from_, t.to)]
