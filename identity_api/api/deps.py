# identity_api/api/deps.py
from fastapi import Request
from identity_api.domain.repositories.account_repo import AccountRepo
from identity_api.domain.repositories.user_repo import UserRepo

def user_repo(request: Request) -> UserRepo:
    return request.app.state.users

def account_repo(request: Request) -> AccountRepo:
    return request.app.state.accounts
