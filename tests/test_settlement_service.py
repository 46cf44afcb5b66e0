from decimal import Decimal
import pytest
from splito.core.errors import InputError
from splito.services.ledger import ExpenseLedger
from splito.services.settlement_service import simplify_debts
from helpers import apply_transactions, random_records


def pairs(transactions):
    return [(t.from_, t.to, t.amount) for t in transactions]


def test_triangle(solver):
    balances = {"Alice": Decimal("20"), "Bob": Decimal("-10"), "Carol": Decimal("-10")}

    transactions = solver.solve(balances)

    assert pairs(transactions) == [("Bob", "Alice", Decimal("10")), ("Carol", "Alice", Decimal("10"))]
    assert transactions[0].description == "Bob pays $10.00 to Alice"


def test_chained_debt(solver):
    balances = {"Alice": Decimal("-5"), "Bob": Decimal("-5"), "Carol": Decimal("10")}

    assert pairs(solver.solve(balances)) == [
        ("Alice", "Carol", Decimal("5")),
        ("Bob", "Carol", Decimal("5")),
    ]


def test_map_order_decides_pairing(solver):
    # Sorting by size would give two payments; insertion order gives three
    balances = {"A": Decimal("-10"), "B": Decimal("-20"), "C": Decimal("20"), "D": Decimal("10")}

    assert pairs(solver.solve(balances)) == [
        ("A", "C", Decimal("10")),
        ("B", "C", Decimal("10")),
        ("B", "D", Decimal("10")),
    ]


def test_settled_participants_are_skipped(solver):
    balances = {"A": Decimal("0"), "B": Decimal("1e-10"), "C": Decimal("-3"), "D": Decimal("3")}

    assert pairs(solver.solve(balances)) == [("C", "D", Decimal("3"))]


def test_empty_and_settled_maps(solver):
    assert solver.solve({}) == []
    assert solver.solve({"A": Decimal("0")}) == []


def test_unbalanced_map_leaves_residual(solver):
    transactions = solver.solve({"A": Decimal("-10"), "B": Decimal("5")})

    assert pairs(transactions) == [("A", "B", Decimal("5"))]


def test_sub_cent_remainder_is_not_paid(solver):
    assert solver.solve({"A": Decimal("-0.004"), "B": Decimal("0.004")}) == []


def test_amount_is_rounded(solver):
    transactions = solver.solve({"A": Decimal("-3.335"), "B": Decimal("3.335")})

    assert transactions[0].amount == Decimal("3.34")
    assert transactions[0].description == "A pays $3.34 to B"


def test_plain_numbers_accepted():
    assert pairs(simplify_debts({"A": -7.5, "B": 7.5})) == [("A", "B", Decimal("7.5"))]


def test_non_finite_balance_rejected(solver):
    with pytest.raises(InputError):
        solver.solve({"A": Decimal("NaN"), "B": Decimal("1")})


@pytest.mark.parametrize("seed", range(25))
def test_settlement_properties(solver, seed):
    ledger = ExpenseLedger()
    for r in random_records(seed):
        ledger.add_expense(r.payer, r.total_amount, r.shares)
    balances = ledger.get_balances()

    transactions = solver.solve(balances)

    debtors = sum(1 for b in balances.values() if b < 0)
    creditors = sum(1 for b in balances.values() if b > 0)
    assert len(transactions) <= max(debtors + creditors - 1, 0)

    for t in transactions:
        assert t.amount > 0
        assert t.from_ != t.to

    after = apply_transactions(balances, transactions)
    assert all(abs(b) < Decimal("1e-9") for b in after.values())

    assert solver.solve(balances) == transactions
