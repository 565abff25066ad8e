# catalog_api/api/v1/routers/assignments.py
from typing import Optional
from fastapi import APIRouter, Depends, Query
from catalog_api.api.deps import assignment_repo
from catalog_api.api.v1.schemas.catalog import AssignmentListOut
from catalog_api.domain.errors import ValidationError

router = APIRouter(tags=["assignments"])

@router.get("/assignments", response_model=AssignmentListOut)
async def list_assignments(
    account_id: Optional[str] = Query(None, alias="accountId"),
    assignments = Depends(assignment_repo),
):
    if not account_id:
        raise ValidationError("accountId query is required")
    return {"assignments": assignments.list_by_account(account_id)}
