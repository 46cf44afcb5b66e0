import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Set
from splito.core.errors import InputError
from splito.core.money import ZERO, ensure_amount, qround
from splito.schemas.dues import GroupDues, UserDues
from splito.schemas.settlements import Transaction
from splito.schemas.splits import SplitData, SplitMember
from splito.services.group_settlement import calculate_group_settlement
from splito.services.split_adapter import member_label, records_from_splits, resolve_payer

logger = logging.getLogger(__name__)


def _is_member(member: SplitMember, participant: str) -> bool:
    return participant in (member_label(member), member.user_wallet, member.wallet_id)


def _is_payer(split: SplitData, participant: str) -> bool:
    return participant in (split.paid_by, resolve_payer(split))


def _member_amount(split: SplitData, member: SplitMember) -> Decimal:
    try:
        return ensure_amount(member.amount, "members.amount")
    except InputError as exc:
        # the same row fails the settlement, which flags the result as partial
        logger.warning("Split %s member %s ignored for dues: %s", split.id, member_label(member), exc)
        return ZERO


def _labels(splits: List[SplitData], participant: str) -> Set[str]:
    """Every label the settlement may use for `participant`."""
    labels = {participant}
    for split in splits:
        if split.paid_by == participant:
            labels.add(resolve_payer(split))
        for member in split.members:
            if _is_member(member, participant):
                labels.add(member_label(member))
    return labels


def _involving(transactions: List[Transaction], labels: Set[str]) -> List[Transaction]:
    return [t for t in transactions if t.from_ in labels or t.to in labels]


def user_dues(splits: Iterable[SplitData], participant: str) -> UserDues:
    """
    What `participant` owes and is owed across every group in `splits`.

    Only unpaid member rows of unsettled splits count. Each pending group
    gets its own settlement; the global settlement nets all groups together.
    Both are narrowed to the transactions that involve `participant`.
    """
    pending = [s for s in splits if not s.is_settled]
    labels = _labels(pending, participant)

    total_owed = ZERO
    total_owed_to_user = ZERO
    groups: Dict[str | None, dict] = {}
    group_splits: Dict[str | None, List[SplitData]] = {}

    for split in pending:
        group_splits.setdefault(split.group_id, []).append(split)

        mine = [m for m in split.members if _is_member(m, participant)]
        paid_by_me = _is_payer(split, participant)

        if not mine and not paid_by_me:
            continue

        group = groups.setdefault(split.group_id, {
            "group_id": split.group_id,
            "group_name": split.group_name,
            "amount_owed": ZERO,
            "amount_owed_to_user": ZERO,
        })

        for member in mine:
            if not member.is_paid:
                amount = _member_amount(split, member)
                total_owed += amount
                group["amount_owed"] += amount

        if paid_by_me:
            owed_to_me = sum(
                (_member_amount(split, m) for m in split.members
                 if not m.is_paid and not _is_member(m, participant)),
                ZERO,
            )
            total_owed_to_user += owed_to_me
            group["amount_owed_to_user"] += owed_to_me

    pending_groups = []
    for group_id, group in groups.items():
        if group["amount_owed"] <= 0 and group["amount_owed_to_user"] <= 0:
            continue

        result = calculate_group_settlement(records_from_splits(group_splits[group_id]))
        pending_groups.append(GroupDues(
            group_id=group["group_id"],
            group_name=group["group_name"],
            amount_owed=qround(group["amount_owed"]),
            amount_owed_to_user=qround(group["amount_owed_to_user"]),
            net_amount=qround(group["amount_owed_to_user"] - group["amount_owed"]),
            optimal_transactions=_involving(result.transactions, labels),
        ))

    overall = calculate_group_settlement(records_from_splits(pending))

    return UserDues(
        participant=participant,
        total_owed=qround(total_owed),
        total_owed_to_user=qround(total_owed_to_user),
        net_balance=qround(total_owed_to_user - total_owed),
        pending_groups=pending_groups,
        global_optimal_transactions=_involving(overall.transactions, labels),
        is_partial=overall.is_partial,
    )
