from decimal import Decimal
from pydantic import BaseModel
from typing import List

class ExpenseShare(BaseModel):
    participant: str
    amount: Decimal

class ExpenseRecord(BaseModel):
    payer: str
    total_amount: Decimal
    shares: List[ExpenseShare]
