"""Port: LLM chat-completion client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class CompletionRequest:
    """One chat-completions call. ``messages`` are already in wire shape."""

    model: str
    messages: list[dict[str, Any]]
    temperature: float
    max_tokens: int
    top_p: float = 1.0
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0


@dataclass(frozen=True)
class ChatResponse:
    """Response from an LLM chat call."""

    content: str


class LLMClient(Protocol):
    """Abstract LLM client. Zero framework types leak through."""

    async def complete(self, request: CompletionRequest) -> ChatResponse:
        """Single non-streaming completion. Raises on transport or upstream failure."""
        ...

    def check_connectivity(self) -> tuple[bool, str]:
        """Pre-flight connectivity check. Returns (ok, error_message)."""
        ...
