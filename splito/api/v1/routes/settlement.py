from decimal import Decimal
from fastapi import APIRouter, HTTPException
from typing import Dict, List
from splito.core.errors import InputError
from splito.schemas.dues import UserDues
from splito.schemas.expense import ExpenseRecord
from splito.schemas.settlements import SettlementResult, Transaction
from splito.schemas.splits import SplitData
from splito.services.dues_service import user_dues
from splito.services.group_settlement import calculate_group_settlement, transactions_for
from splito.services.settlement_service import simplify_debts
from splito.services.split_adapter import records_from_splits

router = APIRouter()


@router.post("/calculate", response_model=SettlementResult)
async def calculate(records: List[ExpenseRecord], participant: str | None = None):
    result = calculate_group_settlement(records)

    if participant is not None:
        result.transactions = transactions_for(result, participant)

    return result


@router.post("/splits", response_model=SettlementResult)
async def calculate_from_splits(splits: List[SplitData], include_settled: bool = False):
    return calculate_group_settlement(records_from_splits(splits, include_settled))


@router.post("/dues", response_model=UserDues)
async def dues(splits: List[SplitData], participant: str):
    return user_dues(splits, participant)


@router.post("/simplify", response_model=List[Transaction])
async def simplify(balances: Dict[str, Decimal]):
    try:
        return simplify_debts(balances)
    except InputError as e:
        raise HTTPException(400, str(e))
