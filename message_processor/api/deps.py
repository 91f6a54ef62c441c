"""Dependency providers used by FastAPI endpoints.

The settings object lives on `app.state` so each application built by
`create_application` carries its own configuration; the processor is assembled
from it per request, keeping route handlers thin.
"""

from fastapi import Depends, Request

from message_processor.core.config import Settings
from message_processor.services.processor import MessageProcessor


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""
    return request.app.state.settings


def get_message_processor(app_settings: Settings = Depends(get_app_settings)) -> MessageProcessor:
    """Build a MessageProcessor reading local wall-clock time."""
    return MessageProcessor(marker=app_settings.MESSAGE_MARKER)
