# catalog_api/domain/errors.py
from __future__ import annotations
from typing import Optional


class CatalogError(Exception):
    """Base class for every failure the catalog service reports to a caller."""

    status_code: int = 500

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(CatalogError):
    status_code = 400


class NotFoundError(CatalogError):
    status_code = 404


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id: str):
        super().__init__("product not found")
        self.product_id = product_id


class AccountNotFoundError(NotFoundError):
    def __init__(self, account_id: str, message: str = "account not found"):
        super().__init__(message)
        self.account_id = account_id


class DependencyError(CatalogError):
    """
    The account directory could not answer.
    `upstream_status` is the directory's HTTP status when one was received,
    and becomes the status reported to our own caller.
    """

    def __init__(self, message: str, *, upstream_status: Optional[int] = None):
        super().__init__(message, status_code=upstream_status or 500)
        self.upstream_status = upstream_status


class UpstreamError(DependencyError):
    """Non-2xx answer from the account directory."""

    def __init__(self, message: str, *, upstream_status: int):
        super().__init__(message, upstream_status=upstream_status)


class TransportError(DependencyError):
    """Network failure, timeout or unreadable body; no upstream status."""

    def __init__(self, message: str):
        super().__init__(message, upstream_status=None)
