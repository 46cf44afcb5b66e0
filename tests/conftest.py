import pytest
from splito.services.ledger import ExpenseLedger
from splito.services.settlement_service import SettlementSolver


@pytest.fixture
def ledger():
    return ExpenseLedger()


@pytest.fixture
def solver():
    return SettlementSolver()
