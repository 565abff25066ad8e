"""Catalog service talking to a real identity service app over httpx.ASGITransport."""

import httpx
import pytest
from fastapi.testclient import TestClient

from catalog_api.core.config import Settings as CatalogSettings
from catalog_api.main import create_app as create_catalog
from identity_api.core.config import Settings as IdentitySettings
from identity_api.main import create_app as create_identity


@pytest.fixture
def identity():
    app = create_identity(IdentitySettings(_env_file=None))
    with TestClient(app) as client:
        yield app, client


def _catalog(identity_app, charge: bool):
    settings = CatalogSettings(_env_file=None, ACCOUNTS_BASE_URL="http://identity.test", CHARGE_ON_ASSIGN=charge)
    return create_catalog(settings, directory_transport=httpx.ASGITransport(app=identity_app))


def test_assign_and_charge_debits_the_account(identity):
    identity_app, identity_client = identity
    user_id = identity_client.post("/users", json={"name": "Ada", "email": "ada@example.com"}).json()["user"]["id"]

    with TestClient(_catalog(identity_app, charge=True)) as catalog:
        catalog.post("/products", json={"name": "Widget", "price": 10, "category": "tools"})
        resp = catalog.post("/products/p1/assign", json={"accountId": user_id})

    assert resp.status_code == 201
    assert resp.json()["charge"]["account"]["balance"] == -10
    assert identity_client.get(f"/accounts/{user_id}").json()["account"]["balance"] == -10


def test_assign_to_unregistered_account_is_404(identity):
    identity_app, _ = identity

    with TestClient(_catalog(identity_app, charge=True)) as catalog:
        catalog.post("/products", json={"name": "Widget", "price": 10})
        resp = catalog.post("/products/p1/assign", json={"accountId": "u42"})
        history = catalog.get("/assignments", params={"accountId": "u42"}).json()

    assert resp.status_code == 404
    assert history == {"assignments": []}
