from typing import Iterable, List
from splito.schemas.expense import ExpenseRecord, ExpenseShare
from splito.schemas.splits import SplitData, SplitMember

UNKNOWN = "Unknown"


def member_label(member: SplitMember) -> str:
    """First non-empty of user name, name, user wallet, wallet id."""
    for value in (member.user_name, member.name, member.user_wallet, member.wallet_id):
        if value:
            return value
    return UNKNOWN


def resolve_payer(split: SplitData) -> str:
    # Prefer the member row matching paid_by so the payer is labelled
    # the same way as their own share
    if split.paid_by:
        for member in split.members:
            if split.paid_by in (member.user_wallet, member.wallet_id):
                return member_label(member)

    return split.paid_by_name or split.paid_by or UNKNOWN


def record_from_split(split: SplitData) -> ExpenseRecord:
    return ExpenseRecord(
        payer=resolve_payer(split),
        total_amount=split.total_amount,
        shares=[
            ExpenseShare(participant=member_label(m), amount=m.amount)
            for m in split.members
        ],
    )


def records_from_splits(splits: Iterable[SplitData], include_settled: bool = False) -> List[ExpenseRecord]:
    return [
        record_from_split(s)
        for s in splits
        if include_settled or not s.is_settled
    ]
