# identity_api/domain/repositories/user_repo.py

from __future__ import annotations
import threading
from typing import Optional
from identity_api.domain.models.user import User

class UserRepo:
    """
    In-memory users, indexed by id (u1, u2, ...) and by email.
    Email is the natural key: one user per email address.
    """

    def __init__(self):
        self._by_id: dict[str, User] = {}
        self._by_email: dict[str, User] = {}
        self._counter = 1
        self._lock = threading.Lock()

    def get_or_create(self, name: str, email: str) -> tuple[User, bool]:
        """Return (user, created). An already registered email returns the stored user untouched."""
        with self._lock:
            existing = self._by_email.get(email)
            if existing is not None:
                return existing, False
            user = User(id=f"u{self._counter}", name=name, email=email)
            self._counter += 1
            self._by_id[user.id] = user
            self._by_email[email] = user
        return user, True

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._by_id.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self._by_email.get(email)
