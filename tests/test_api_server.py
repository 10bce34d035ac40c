"""
Tests for the api_server.py startup path.
"""
import pytest

import api_server
from pool_readings.config import ConfigError


@pytest.fixture
def uvicorn_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(api_server, "setup_logging", lambda: None)
    monkeypatch.setattr(api_server.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    return calls


def _failing_build_app():
    raise ConfigError("READINGS_DB environment variable is not set")


@pytest.mark.parametrize("debug", [False, True])
def test_config_error_exits_before_serving(monkeypatch, caplog, uvicorn_calls, debug):
    monkeypatch.setattr(api_server, "DEBUG", debug)
    monkeypatch.setattr(api_server, "build_app", _failing_build_app)

    with pytest.raises(SystemExit) as exc_info:
        api_server.main()

    assert exc_info.value.code == 1
    assert uvicorn_calls == []
    assert "Failed to start webhook server: READINGS_DB environment variable is not set" in caplog.text


def test_debug_hands_factory_to_reloader(monkeypatch, uvicorn_calls, relational_backend):
    from pool_readings.server.app import create_app

    monkeypatch.setattr(api_server, "DEBUG", True)
    monkeypatch.setattr(api_server, "build_app", lambda: create_app(relational_backend))

    api_server.main()

    args, kwargs = uvicorn_calls[0]
    assert args == ("pool_readings.server.app:build_app",)
    assert kwargs["factory"] is True
    assert kwargs["reload"] is True
