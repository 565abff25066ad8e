# identity_api/domain/services/user_svc.py
import logging

from identity_api.domain.errors import ValidationError
from identity_api.domain.models.user import User
from identity_api.domain.repositories.account_repo import AccountRepo
from identity_api.domain.repositories.user_repo import UserRepo

logger = logging.getLogger(__name__)


def register_user(users: UserRepo, accounts: AccountRepo, *, name: str, email: str) -> tuple[User, bool]:
    """
    Create a user and its account, or return the user already registered under `email`.
    Returns (user, existing).
    """
    if not name or not email:
        raise ValidationError("name and email are required")

    user, created = users.get_or_create(name, email)
    if not created:
        logger.info("user exists id=%s", user.id)
        return user, True

    account = accounts.open_for(user)
    logger.info("user created id=%s account_id=%s", user.id, account.id)
    return user, False
