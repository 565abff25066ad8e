# identity_api/domain/repositories/account_repo.py

from __future__ import annotations
import threading
from typing import Optional
from identity_api.domain.models.user import Account, User

class AccountRepo:
    """
    One account per user, same id, balance starting at 0.
    Credits are signed: a negative amount is a debit. No overdraft limit.
    """

    def __init__(self):
        self._by_id: dict[str, Account] = {}
        self._lock = threading.Lock()

    def open_for(self, user: User) -> Account:
        with self._lock:
            account = self._by_id.get(user.id)
            if account is None:
                account = Account(id=user.id, user_id=user.id, name=user.name, email=user.email)
                self._by_id[account.id] = account
        return account

    def get(self, account_id: str) -> Optional[Account]:
        return self._by_id.get(account_id)

    def apply_credit(self, account_id: str, amount: float) -> Optional[Account]:
        """Add `amount` to the balance; None when the account does not exist."""
        with self._lock:
            account = self._by_id.get(account_id)
            if account is None:
                return None
            account = account.model_copy(update={"balance": account.balance + amount})
            self._by_id[account_id] = account
        return account
