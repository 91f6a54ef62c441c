import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from message_processor.api import deps
from message_processor.core.config import Settings
from message_processor.main import create_application
from message_processor.services.processor import MessageProcessor

from tests.constants import FIXED_MOMENT, MARKER


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(MESSAGE_MARKER=MARKER, ENABLE_DOCS=False)


@pytest.fixture
def application(settings: Settings) -> FastAPI:
    return create_application(settings)


@pytest.fixture
def frozen_application(application: FastAPI) -> FastAPI:
    """Application whose processor always reads FIXED_MOMENT."""
    application.dependency_overrides[deps.get_message_processor] = lambda: MessageProcessor(
        marker=MARKER, clock=lambda: FIXED_MOMENT
    )
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(frozen_application: FastAPI):
    with TestClient(frozen_application) as test_client:
        yield test_client


@pytest.fixture
def live_client(application: FastAPI):
    """Client against the real wall clock."""
    with TestClient(application) as test_client:
        yield test_client
