import random
from decimal import Decimal
from splito.schemas.expense import ExpenseRecord, ExpenseShare


def shares(*pairs):
    return [ExpenseShare(participant=p, amount=Decimal(str(a))) for p, a in pairs]


def record(payer, total, *pairs):
    return ExpenseRecord(payer=payer, total_amount=Decimal(str(total)), shares=shares(*pairs))


def random_records(seed, people=("Alice", "Bob", "Carol", "Dave", "Erin", "Frank")):
    """Expense records whose shares add up exactly to the total (whole cents)."""
    rng = random.Random(seed)
    records = []

    for _ in range(rng.randint(1, 8)):
        payer = rng.choice(people)
        total_cents = rng.randint(1, 50000)
        involved = rng.sample(people, rng.randint(1, len(people)))

        base, rest = divmod(total_cents, len(involved))
        parts = [base + (1 if k < rest else 0) for k in range(len(involved))]

        records.append(ExpenseRecord(
            payer=payer,
            total_amount=Decimal(total_cents) / 100,
            shares=[
                ExpenseShare(participant=p, amount=Decimal(c) / 100)
                for p, c in zip(involved, parts)
            ],
        ))

    return records


def apply_transactions(balances, transactions):
    after = dict(balances)
    for t in transactions:
        after[t.from_] += t.amount
        after[t.to] -= t.amount
    return after
