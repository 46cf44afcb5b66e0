from decimal import Decimal
from pydantic import BaseModel, Field, PlainSerializer
from typing import Annotated, Dict, List

# Decimal inside the engine, plain number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

class Transaction(BaseModel):
    from_: str = Field(alias="from")
    to: str
    amount: Money
    description: str

    class Config:
        populate_by_name = True

class SettlementSummary(BaseModel):
    total_debt: Money
    total_credit: Money
    is_balanced: bool
    participant_count: int

class RecordError(BaseModel):
    index: int
    payer: str | None = None
    kind: str
    message: str
    shares_total: Money | None = None
    expected_total: Money | None = None

class SettlementResult(BaseModel):
    transactions: List[Transaction]
    balances: Dict[str, Money]
    summary: SettlementSummary
    errors: List[RecordError] = []
    is_partial: bool = False
