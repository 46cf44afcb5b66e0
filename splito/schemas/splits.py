from decimal import Decimal
from pydantic import BaseModel, Field
from typing import List

class SplitMember(BaseModel):
    name: str | None = None
    user_name: str | None = Field(default=None, alias="userName")
    user_wallet: str | None = Field(default=None, alias="userWallet")
    wallet_id: str | None = Field(default=None, alias="walletId")
    amount: Decimal
    is_paid: bool = Field(default=False, alias="isPaid")

    class Config:
        populate_by_name = True

class SplitData(BaseModel):
    id: str | None = None
    group_id: str | None = Field(default=None, alias="groupId")
    group_name: str | None = Field(default=None, alias="groupName")
    title: str | None = None
    total_amount: Decimal = Field(alias="totalAmount")
    paid_by: str | None = Field(default=None, alias="paidBy")
    paid_by_name: str | None = Field(default=None, alias="paidByName")
    members: List[SplitMember]
    is_settled: bool = Field(default=False, alias="isSettled")

    class Config:
        populate_by_name = True
