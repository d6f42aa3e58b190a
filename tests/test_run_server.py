from __future__ import annotations

from typing import Any

import pytest
from fastapi import FastAPI

import ai_text_tools.server.run_server as server_mod


@pytest.fixture(autouse=True)
def _quiet(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(server_mod, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.delenv("AI_TEXT_TOOLS_CONFIG", raising=False)


def test_exits_without_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    called: list[Any] = []
    monkeypatch.setattr(server_mod.uvicorn, "run", lambda *a, **k: called.append(a))
    with pytest.raises(SystemExit) as exc_info:
        server_mod.main([])
    assert exc_info.value.code == 1
    assert called == []


def test_runs_uvicorn_on_configured_port(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    seen: dict[str, Any] = {}

    def fake_run(app: FastAPI, host: str, port: int, **kwargs: Any) -> None:
        seen.update(app=app, host=host, port=port)

    monkeypatch.setattr(server_mod.uvicorn, "run", fake_run)
    server_mod.main([])
    assert isinstance(seen["app"], FastAPI)
    assert seen["host"] == "0.0.0.0"
    assert seen["port"] == 8080
    assert seen["app"].state.settings.api_key == "sk-test"
