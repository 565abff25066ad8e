# identity_api/api/v1/routers/accounts.py
import logging
from typing import Optional
from fastapi import APIRouter, Depends
from identity_api.api.deps import account_repo
from identity_api.api.v1.schemas.identity import AccountOut, CreditIn, CreditOut
from identity_api.domain.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["accounts"])


@router.get("/accounts/{account_id}", response_model=AccountOut)
async def get_account(account_id: str, accounts = Depends(account_repo)):
    account = accounts.get(account_id)
    if account is None:
        raise NotFoundError("account not found")
    return {"account": account}


@router.post("/accounts/{account_id}/credit", response_model=CreditOut)
async def credit_account(
    account_id: str,
    payload: Optional[CreditIn] = None,
    accounts = Depends(account_repo),
):
    """Apply a signed amount to the balance (negative = debit)."""
    if payload is None:
        raise ValidationError("amount is required")
    account = accounts.apply_credit(account_id, payload.amount)
    if account is None:
        raise NotFoundError("account not found")
    logger.info("account credited id=%s amount=%s balance=%s", account.id, payload.amount, account.balance)
    return {"account": account, "amount": payload.amount}
