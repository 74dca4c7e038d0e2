"""ChatController: the operations the chat UI calls."""

from __future__ import annotations

import logging

from panda_nexus.l1_entities.chat_message import ChatMessage
from panda_nexus.l1_entities.completion import CompletionResult
from panda_nexus.l1_entities.config import AppConfig
from panda_nexus.l1_entities.service_category import ServiceCategory
from panda_nexus.l2_use_cases.ports.llm_client import LLMClient
from panda_nexus.l2_use_cases.send_message_use_case import SendMessageUseCase
from panda_nexus.l2_use_cases.spell_check_use_case import SpellCheckUseCase

log = logging.getLogger('pnx.controller')


class ChatController:
    """Bridges the UI to the use cases.

    Conversation history stays with the caller; this object keeps no per-request state.
    """

    def __init__(self, config: AppConfig, llm_client: LLMClient) -> None:
        self._send_uc = SendMessageUseCase(llm_client, config)
        self._spell_uc = SpellCheckUseCase(llm_client, config)

    async def send_message(
        self,
        history: list[ChatMessage],
        category: ServiceCategory | str | None = ServiceCategory.AUTO,
    ) -> CompletionResult:
        result = await self._send_uc.execute(history, category)
        if result.is_offline:
            log.info('Served offline fallback for category=%s', ServiceCategory.coerce(category).value)
        return result

    async def spell_check(self, text: str) -> str:
        return await self._spell_uc.execute(text)
