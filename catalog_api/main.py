"""
Catalog service: products, and their assignment to accounts held by the account directory.

Run with uvicorn, e.g.::

    uvicorn catalog_api.main:app --port 3003

or through the ``catalog-api`` console script.
"""
import logging
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog_api.core.config import Settings, get_settings
from catalog_api.core.lifespan import lifespan
from catalog_api.core.logging import configure_logging
from catalog_api.domain.errors import CatalogError
from catalog_api.domain.repositories.assignment_repo import AssignmentRepo
from catalog_api.domain.repositories.product_repo import ProductRepo
from catalog_api.api.v1.routers.health import router as health_router
from catalog_api.api.v1.routers.products import router as products_router
from catalog_api.api.v1.routers.assignments import router as assignments_router

logger = logging.getLogger(__name__)


def _describe_validation_error(errors) -> str:
    """Turn the first pydantic error into a short message: 'name is required', 'price must be a number'."""
    if not errors:
        return "invalid request"
    err = errors[0]
    if err.get("type") == "json_invalid":
        return "request body must be valid JSON"
    loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
    # top-level field; union members append their type tag (price.int, price.float)
    field = loc[0] if loc else "body"
    kind = err.get("type", "")
    if kind in ("missing", "string_too_short"):
        return f"{field} is required"
    if kind.startswith(("float", "int", "finite")):
        return f"{field} must be a number"
    return f"{field}: {err.get('msg')}"


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc.errors())
        logger.info("rejected request path=%s reason=%s", request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("unhandled error path=%s", request.url.path)
        return JSONResponse(status_code=500, content={"error": "internal server error"})


def create_app(
    settings: Optional[Settings] = None,
    *,
    directory_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the catalog app.

    Stores are created here, once per app, and reached by routes through app.state.
    `directory_transport` replaces the network transport of the account directory
    client (tests pass an httpx.MockTransport).
    """
    settings = settings or get_settings()
    configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO, service=settings.APP_NAME)

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.products = ProductRepo()
    app.state.assignments = AssignmentRepo()
    app.state.directory_transport = directory_transport

    _register_error_handlers(app)

    # ------- Routes -------
    app.include_router(health_router)
    app.include_router(products_router)      # catalog + assign workflow
    app.include_router(assignments_router)   # assignment history per account
    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run("catalog_api.main:app", host=settings.HOST, port=settings.PORT)


app = create_app()
