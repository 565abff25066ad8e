# catalog_api/core/logging.py
# Shared by both services: identity_api configures its logging through here too.
import logging
import sys
from typing import Iterable
import colorlog

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

# outbound HTTP clients log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level=logging.INFO, *, service: str = "catalog-api", quiet: Iterable[str] = NOISY_LOGGERS):
    """
    One coloured stdout handler on the root logger; lines are tagged with the service
    name so the two services stay apart when run side by side.
    """
    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            f"%(log_color)s%(asctime)s %(levelname)-8s {service} [%(name)s]%(reset)s %(message)s",
            datefmt="%H:%M:%S",
            log_colors=LOG_COLORS,
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for name in ("uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level)
    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)
