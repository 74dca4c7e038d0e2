"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path

import pytest

from panda_nexus.l1_entities.chat_message import ChatMessage
from panda_nexus.l1_entities.config import AppConfig
from panda_nexus.l2_use_cases.ports.llm_client import ChatResponse, CompletionRequest
from panda_nexus.l4_frameworks_and_drivers.infra_config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeLLMClient:
    """Fake LLM client for L2/L3 tests. Records every request."""

    def __init__(self, response: str = 'Fake LLM response'):
        self._response = response
        self._error: Exception | None = None
        self.requests: list[CompletionRequest] = []
        self._connectivity = (True, '')

    async def complete(self, request: CompletionRequest) -> ChatResponse:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return ChatResponse(content=self._response)

    def check_connectivity(self) -> tuple[bool, str]:
        return self._connectivity

    def set_response(self, response: str) -> None:
        self._response = response

    def set_error(self, error: Exception) -> None:
        self._error = error

    def set_connectivity(self, ok: bool, msg: str = '') -> None:
        self._connectivity = (ok, msg)


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def user_turn() -> ChatMessage:
    return ChatMessage(role='user', content='what is the capital of france')


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
models:
  by_category:
    code: "acme/coder-large"
completion:
  history_window: 3
openrouter:
  base_url: "https://llm.example.test/v1"
  timeout: 12.5
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
