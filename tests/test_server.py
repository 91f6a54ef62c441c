import socket

import pytest

from message_processor import server
from message_processor.core.config import Settings


@pytest.fixture
def occupied_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        s.listen()
        yield s.getsockname()[1]


def test_ensure_port_available_rejects_bound_port(occupied_port):
    with pytest.raises(server.StartupError):
        server.ensure_port_available("127.0.0.1", occupied_port)


def test_main_exits_non_zero_when_port_is_taken(monkeypatch, occupied_port):
    monkeypatch.setattr(server, "settings", Settings(HOST="127.0.0.1", PORT=occupied_port))

    with pytest.raises(SystemExit) as exc_info:
        server.main()

    assert exc_info.value.code == 1


def test_serve_hands_application_to_uvicorn(monkeypatch):
    started = {}

    def fake_run(self):
        started["app"] = self.config.app
        started["address"] = (self.config.host, self.config.port)

    monkeypatch.setattr(server.uvicorn.Server, "run", fake_run)
    server.serve(server.app, Settings(HOST="127.0.0.1", PORT=0))

    assert started["app"] is server.app
    assert started["address"] == ("127.0.0.1", 0)


def test_main_returns_cleanly_on_keyboard_interrupt(monkeypatch):
    def interrupted(application, app_settings):
        raise KeyboardInterrupt

    monkeypatch.setattr(server, "serve", interrupted)
    server.main()


def test_main_exits_non_zero_on_unexpected_startup_error(monkeypatch):
    def broken(application, app_settings):
        raise RuntimeError("uvicorn refused the config")

    monkeypatch.setattr(server, "serve", broken)

    with pytest.raises(SystemExit) as exc_info:
        server.main()

    assert exc_info.value.code == 1
