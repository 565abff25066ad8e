"""Shared fixtures: fresh stores per test, a scriptable account directory."""
import httpx
import pytest

from catalog_api.core.config import Settings
from catalog_api.domain.repositories.assignment_repo import AssignmentRepo
from catalog_api.domain.repositories.product_repo import ProductRepo
from fakes import FakeAccountDirectory


@pytest.fixture
def products():
    return ProductRepo()


@pytest.fixture
def assignments():
    return AssignmentRepo()


@pytest.fixture
def directory():
    return FakeAccountDirectory(["acct-1", "acct-2"])


class DirectoryStub:
    """
    Routes for an httpx.MockTransport imitating the identity service.
    `credit_status` / `credit_error` make POST /accounts/{id}/credit fail.
    """

    def __init__(self, account_ids=("acct-1",)):
        self.account_ids = set(account_ids)
        self.credit_status = 200
        self.credit_error = None
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")
        if parts[0] != "accounts" or len(parts) < 2:
            return httpx.Response(404, json={"error": "not found"})
        account_id = parts[1]
        if account_id not in self.account_ids:
            return httpx.Response(404, json={"error": "account not found"})
        if len(parts) == 2 and request.method == "GET":
            return httpx.Response(200, json={"account": {"id": account_id, "balance": 0}})
        if parts[2:] == ["credit"] and request.method == "POST":
            if self.credit_status >= 400:
                return httpx.Response(self.credit_status, json={"error": self.credit_error or "credit failed"})
            return httpx.Response(200, json={"account": {"id": account_id}, "amount": -10})
        return httpx.Response(405, json={"error": "method not allowed"})


@pytest.fixture
def directory_stub():
    return DirectoryStub()


@pytest.fixture
def catalog_settings():
    return Settings(_env_file=None, ACCOUNTS_BASE_URL="http://accounts.test", CHARGE_ON_ASSIGN=False)
