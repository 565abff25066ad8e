# catalog_api/core/lifespan.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from catalog_api.clients.account_directory import AccountDirectoryClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings

    # --- Startup ---
    app.state.directory = AccountDirectoryClient.from_base_url(
        settings.ACCOUNTS_BASE_URL,
        timeout_s=settings.ACCOUNTS_TIMEOUT_S,
        transport=app.state.directory_transport,
    )
    logger.info(
        "%s started accounts_base_url=%s charge_on_assign=%s",
        settings.APP_NAME, settings.ACCOUNTS_BASE_URL, settings.CHARGE_ON_ASSIGN,
    )

    # Application runs
    yield

    # --- Shutdown ---
    await app.state.directory.aclose()
    logger.info("%s account directory client closed", settings.APP_NAME)
