"""Process bootstrap: bind the fixed listen address and run uvicorn."""

import logging
import socket
import sys

import uvicorn
from fastapi import FastAPI

from message_processor.core.config import Settings, settings
from message_processor.main import app

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StartupError(RuntimeError):
    """The service cannot start; the process is expected to exit non-zero."""


def ensure_port_available(host: str, port: int) -> None:
    """Check whether the listen address can be bound before handing it to uvicorn."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            s.bind((host, port))
        except OSError as exc:
            raise StartupError(f"Cannot listen on {host}:{port}: {exc}") from exc


def serve(application: FastAPI, app_settings: Settings) -> None:
    """Run `application` on the configured address until the server stops."""

    ensure_port_available(app_settings.HOST, app_settings.PORT)
    logger.info("Message processor listening on %s:%d", app_settings.HOST, app_settings.PORT)

    config = uvicorn.Config(
        application,
        host=app_settings.HOST,
        port=app_settings.PORT,
        log_level=app_settings.LOG_LEVEL.lower(),
    )
    uvicorn.Server(config).run()


def main() -> None:
    """Console entrypoint; any startup failure is fatal and exits with status 1."""
    try:
        logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)
        serve(app, settings)
    except KeyboardInterrupt:
        logger.info("Shutting down.")
    except StartupError as exc:
        logger.error("Startup failed: %s", exc)
        sys.exit(1)
    except Exception:
        logger.exception("Unexpected error while starting the server")
        sys.exit(1)


if __name__ == "__main__":
    main()
