"""Pure functions for building chat-completions payloads from a conversation."""

from __future__ import annotations

from typing import Any

from panda_nexus.l1_entities.chat_message import ChatMessage
from panda_nexus.l1_entities.config import AppConfig
from panda_nexus.l1_entities.service_category import ServiceCategory
from panda_nexus.l2_use_cases.ports.llm_client import CompletionRequest
from panda_nexus.l2_use_cases.utils.text_normalizer import normalize


def trailing_window(history: list[ChatMessage], size: int) -> list[ChatMessage]:
    """Last *size* caller-authored entries. System entries are synthesized here, never taken from callers."""
    authored = [m for m in history if m.role != 'system']
    return authored[-size:]


def to_wire_message(message: ChatMessage) -> dict[str, Any]:
    """Normalized text, or a text+image part list when an image is attached."""
    text = normalize(message.content)
    if message.has_image:
        return {
            'role': message.role,
            'content': [
                {'type': 'text', 'text': text},
                {'type': 'image_url', 'image_url': {'url': message.attached_image}},
            ],
        }
    return {'role': message.role, 'content': text}


def build_completion_request(
    history: list[ChatMessage],
    category: ServiceCategory,
    model: str,
    config: AppConfig,
) -> CompletionRequest:
    """Build the single request sent for a chat turn."""
    cc = config.completion
    messages: list[dict[str, Any]] = [{'role': 'system', 'content': config.prompts.system[category]}]
    messages.extend(to_wire_message(m) for m in trailing_window(history, cc.history_window))
    return CompletionRequest(
        model=model,
        messages=messages,
        temperature=cc.temperatures[category],
        max_tokens=cc.max_tokens,
        top_p=cc.top_p,
        frequency_penalty=cc.frequency_penalty,
        presence_penalty=cc.presence_penalty,
    )


def build_spell_check_request(text: str, config: AppConfig) -> CompletionRequest:
    """Build the remote refinement request for spell check."""
    sc = config.spell_check
    return CompletionRequest(
        model=config.models.spell_check,
        messages=[
            {'role': 'system', 'content': sc.instruction},
            {'role': 'user', 'content': text},
        ],
        temperature=sc.temperature,
        max_tokens=sc.max_tokens,
    )
