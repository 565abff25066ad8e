# catalog_api/domain/repositories/assignment_repo.py

from __future__ import annotations
import threading
from datetime import datetime, timezone
from typing import List
from catalog_api.domain.models.assignment import Assignment
from catalog_api.domain.services.constants import ASSIGNMENT_ID_PREFIX

class AssignmentRepo:
    """
    Append-only ledger of assignments, grouped per account.
    There is no update or delete: once appended, an assignment stays.
    """

    def __init__(self):
        self._by_account: dict[str, List[Assignment]] = {}
        self._counter = 1
        self._lock = threading.Lock()

    def append(self, account_id: str, product_id: str) -> Assignment:
        with self._lock:
            assignment = Assignment(
                id=f"{ASSIGNMENT_ID_PREFIX}{self._counter}",
                account_id=account_id,
                product_id=product_id,
                created_at=datetime.now(timezone.utc),
            )
            self._counter += 1
            self._by_account.setdefault(account_id, []).append(assignment)
        return assignment

    def list_by_account(self, account_id: str) -> List[Assignment]:
        # unknown account -> empty history, not an error
        return list(self._by_account.get(account_id, ()))

    def count(self) -> int:
        return sum(len(items) for items in self._by_account.values())
