from pydantic import BaseModel
from typing import List
from splito.schemas.settlements import Money, Transaction

class GroupDues(BaseModel):
    group_id: str | None = None
    group_name: str | None = None
    amount_owed: Money
    amount_owed_to_user: Money
    net_amount: Money
    optimal_transactions: List[Transaction]

class UserDues(BaseModel):
    participant: str
    total_owed: Money
    total_owed_to_user: Money
    net_balance: Money
    pending_groups: List[GroupDues]
    global_optimal_transactions: List[Transaction]
    is_partial: bool = False
