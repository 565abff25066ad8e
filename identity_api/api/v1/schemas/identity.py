# api/v1/schemas/identity.py
from typing import Optional
from pydantic import BaseModel, Field
from identity_api.domain.models.user import Account, User


class UserIn(BaseModel):
    # both required; emptiness is checked by register_user so the message names both fields
    name: Optional[str] = None
    email: Optional[str] = None

class CreditIn(BaseModel):
    amount: float = Field(strict=True, allow_inf_nan=False)


class UserOut(BaseModel):
    user: User

class AccountOut(BaseModel):
    account: Account

class CreditOut(BaseModel):
    account: Account
    amount: float
