"""
Identity service: users keyed by id and email, and the accounts the catalog service debits.

    uvicorn identity_api.main:app --port 3001
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from identity_api.core.config import Settings, get_settings
from catalog_api.core.logging import configure_logging
from identity_api.domain.errors import IdentityError
from identity_api.domain.repositories.account_repo import AccountRepo
from identity_api.domain.repositories.user_repo import UserRepo
from identity_api.api.v1.routers.health import router as health_router
from identity_api.api.v1.routers.users import router as users_router
from identity_api.api.v1.routers.accounts import router as accounts_router

logger = logging.getLogger(__name__)


def _describe_validation_error(errors) -> str:
    if not errors:
        return "invalid request"
    err = errors[0]
    loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
    field = loc[-1] if loc else "body"
    kind = err.get("type", "")
    if kind == "missing":
        return f"{field} is required"
    if kind.startswith(("float", "int", "finite")):
        return f"{field} must be a number"
    return f"{field}: {err.get('msg')}"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO, service=settings.APP_NAME, quiet=())

    app = FastAPI(title=settings.APP_NAME)
    app.state.settings = settings
    app.state.users = UserRepo()
    app.state.accounts = AccountRepo()

    @app.exception_handler(IdentityError)
    async def identity_error_handler(request: Request, exc: IdentityError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _describe_validation_error(exc.errors())})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("unhandled error path=%s", request.url.path)
        return JSONResponse(status_code=500, content={"error": "internal server error"})

    # ------- Routes -------
    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(accounts_router)    # consumed by the catalog service
    logger.info("%s ready", settings.APP_NAME)
    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run("identity_api.main:app", host=settings.HOST, port=settings.PORT)


app = create_app()
