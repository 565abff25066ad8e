# catalog_api/clients/account_directory.py
"""
Client for the external account directory (identity service).

Two calls only:
- GET  /accounts/{id}          -> account record, 404 when unknown
- POST /accounts/{id}/credit   -> apply a signed amount to the account balance

No retries: one failed attempt is raised to the caller as is.
Upstream HTTP statuses are carried unchanged on the raised error.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from catalog_api.domain.errors import AccountNotFoundError, TransportError, UpstreamError

logger = logging.getLogger(__name__)


def _account_path(account_id: str, *suffix: str) -> str:
    return "/".join(["/accounts", quote(account_id, safe=""), *suffix])


class AccountDirectoryClient:
    """
    Thin async wrapper over an httpx.AsyncClient whose base_url points at the directory.
    The http client is owned by the app lifespan (created at startup, closed at shutdown).
    """

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    @classmethod
    def from_base_url(
        cls,
        base_url: str,
        *,
        timeout_s: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AccountDirectoryClient":
        http = httpx.AsyncClient(base_url=base_url, timeout=timeout_s, transport=transport)
        return cls(http)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def _request_json(
        self, method: str, account_id: str, path: str, payload: Optional[dict] = None
    ) -> Dict[str, Any]:
        try:
            response = await self.http.request(method, path, json=payload)
        except httpx.HTTPError as e:
            logger.warning("directory transport error method=%s path=%s err=%r", method, path, e)
            raise TransportError(f"account directory unreachable: {e}") from e

        try:
            data = response.json() if response.content else {}
        except ValueError as e:  # JSONDecodeError, UnicodeDecodeError
            if response.is_success:
                logger.warning("directory bad body method=%s path=%s status=%s", method, path, response.status_code)
                raise TransportError("account directory returned an unreadable body") from e
            # error pages from proxies/gateways are often HTML; the status still counts
            data = {}
        if not isinstance(data, dict):
            data = {"data": data}

        if response.is_success:
            return data

        message = str(data.get("error") or response.reason_phrase or f"HTTP {response.status_code}")
        logger.info("directory non-2xx method=%s path=%s status=%s error=%s", method, path, response.status_code, message)
        if response.status_code == 404:
            raise AccountNotFoundError(account_id, message)
        raise UpstreamError(message, upstream_status=response.status_code)

    async def get_account(self, account_id: str) -> Dict[str, Any]:
        """Return the account record, unwrapped from {"account": ...} when the directory wraps it."""
        data = await self._request_json("GET", account_id, _account_path(account_id))
        return data.get("account") or data

    async def apply_credit(self, account_id: str, amount: float) -> Dict[str, Any]:
        """Apply a signed credit (negative = debit). Returns the directory's confirmation."""
        return await self._request_json(
            "POST", account_id, _account_path(account_id, "credit"), {"amount": amount}
        )
