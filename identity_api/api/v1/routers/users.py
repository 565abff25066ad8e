# identity_api/api/v1/routers/users.py
from typing import Optional
from fastapi import APIRouter, Depends, Query, Response
from identity_api.api.deps import account_repo, user_repo
from identity_api.api.v1.schemas.identity import UserIn, UserOut
from identity_api.domain.errors import NotFoundError, ValidationError
from identity_api.domain.services.user_svc import register_user

router = APIRouter(tags=["users"])


@router.post("/users", status_code=201)
async def create_user(
    response: Response,
    payload: Optional[UserIn] = None,
    users = Depends(user_repo),
    accounts = Depends(account_repo),
):
    """201 with the new user, or 200 with `existing: true` when the email is already registered."""
    payload = payload or UserIn()
    user, existing = register_user(users, accounts, name=payload.name, email=payload.email)
    if existing:
        response.status_code = 200
        return {"user": user, "existing": True}
    return {"user": user}


@router.get("/users/{user_id}", response_model=UserOut)
async def get_user(user_id: str, users = Depends(user_repo)):
    user = users.get_by_id(user_id)
    if user is None:
        raise NotFoundError("user not found")
    return {"user": user}


@router.get("/users", response_model=UserOut)
async def find_user_by_email(
    email: Optional[str] = Query(None),
    users = Depends(user_repo),
):
    if not email:
        raise ValidationError("email query is required")
    user = users.get_by_email(email)
    if user is None:
        raise NotFoundError("user not found")
    return {"user": user}
