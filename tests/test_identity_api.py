"""HTTP tests for the identity service: users with email dedup, account credits."""

import pytest
from fastapi.testclient import TestClient

from identity_api.core.config import Settings
from identity_api.main import create_app


@pytest.fixture
def client():
    with TestClient(create_app(Settings(_env_file=None))) as client:
        yield client


def _register(client, name="Ada", email="ada@example.com"):
    return client.post("/users", json={"name": name, "email": email})


class TestUsers:

    def test_same_email_twice_returns_same_user(self, client):
        first = _register(client)
        second = _register(client, name="Ada L.")

        assert first.status_code == 201
        assert first.json() == {"user": {"id": "u1", "name": "Ada", "email": "ada@example.com"}}
        assert second.status_code == 200
        assert second.json()["existing"] is True
        assert second.json()["user"]["id"] == "u1"
        # the stored user is not overwritten
        assert second.json()["user"]["name"] == "Ada"

    def test_distinct_emails_get_sequential_ids(self, client):
        assert _register(client).json()["user"]["id"] == "u1"
        assert _register(client, email="grace@example.com").json()["user"]["id"] == "u2"

    @pytest.mark.parametrize("body", [None, {}, {"name": "Ada"}, {"email": "a@b.c"}, {"name": "", "email": "a@b.c"}])
    def test_name_and_email_are_required(self, client, body):
        resp = client.post("/users", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": "name and email are required"}

    def test_get_by_id(self, client):
        _register(client)
        assert client.get("/users/u1").json()["user"]["email"] == "ada@example.com"
        missing = client.get("/users/u2")
        assert missing.status_code == 404
        assert missing.json() == {"error": "user not found"}

    def test_find_by_email(self, client):
        _register(client)
        assert client.get("/users", params={"email": "ada@example.com"}).json()["user"]["id"] == "u1"
        assert client.get("/users", params={"email": "nobody@example.com"}).status_code == 404

    def test_find_without_email_is_400(self, client):
        resp = client.get("/users")
        assert resp.status_code == 400
        assert resp.json() == {"error": "email query is required"}


class TestAccounts:

    def test_every_user_has_an_account(self, client):
        _register(client)
        resp = client.get("/accounts/u1")
        assert resp.status_code == 200
        assert resp.json() == {
            "account": {"id": "u1", "userId": "u1", "name": "Ada", "email": "ada@example.com", "balance": 0}
        }

    def test_unknown_account_is_404(self, client):
        resp = client.get("/accounts/u9")
        assert resp.status_code == 404
        assert resp.json() == {"error": "account not found"}

    def test_credit_and_debit_adjust_balance(self, client):
        _register(client)
        client.post("/accounts/u1/credit", json={"amount": 25})
        resp = client.post("/accounts/u1/credit", json={"amount": -10})

        assert resp.status_code == 200
        assert resp.json()["amount"] == -10
        assert resp.json()["account"]["balance"] == 15
        assert client.get("/accounts/u1").json()["account"]["balance"] == 15

    def test_balance_may_go_negative(self, client):
        _register(client)
        resp = client.post("/accounts/u1/credit", json={"amount": -3.5})
        assert resp.json()["account"]["balance"] == -3.5

    @pytest.mark.parametrize(
        "body, message",
        [
            (None, "amount is required"),
            ({}, "amount is required"),
            ({"amount": "10"}, "amount must be a number"),
            ({"amount": False}, "amount must be a number"),
        ],
    )
    def test_credit_rejects_bad_amount(self, client, body, message):
        _register(client)
        resp = client.post("/accounts/u1/credit", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": message}
        assert client.get("/accounts/u1").json()["account"]["balance"] == 0

    def test_credit_unknown_account_is_404(self, client):
        resp = client.post("/accounts/u9/credit", json={"amount": 1})
        assert resp.status_code == 404


def test_health(client):
    assert client.get("/health").json() == {"status": "ok", "service": "identity-api"}
