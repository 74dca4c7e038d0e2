"""Use case: route one chat turn to a model, or degrade to a canned reply."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from panda_nexus.l1_entities.chat_message import ChatMessage
from panda_nexus.l1_entities.completion import CompletionResult
from panda_nexus.l1_entities.config import AppConfig
from panda_nexus.l1_entities.errors import CompletionFailedError
from panda_nexus.l1_entities.intent import Intent
from panda_nexus.l1_entities.service_category import ServiceCategory
from panda_nexus.l2_use_cases.ports.llm_client import LLMClient
from panda_nexus.l2_use_cases.utils.fallback import fallback_result, image_generation_result
from panda_nexus.l2_use_cases.utils.intent_classifier import classify
from panda_nexus.l2_use_cases.utils.model_selector import select_model
from panda_nexus.l2_use_cases.utils.prompt_builder import build_completion_request

log = logging.getLogger('pnx.llm')


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class SendMessageUseCase:
    """Classifies the latest message, then either links an image or calls the LLM.

    Never raises: every upstream failure becomes the category's fallback result.
    Holds only read-only configuration, so one instance serves concurrent calls.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        config: AppConfig,
        *,
        seed_source: Callable[[], int] = _epoch_millis,
    ) -> None:
        self._llm = llm_client
        self._config = config
        self._seed_source = seed_source

    async def execute(
        self,
        history: list[ChatMessage],
        category: ServiceCategory | str | None = ServiceCategory.AUTO,
    ) -> CompletionResult:
        cat = ServiceCategory.coerce(category)
        if not history:
            log.warning('Empty history for category=%s, returning fallback', cat.value)
            return fallback_result(cat, self._config.fallbacks)

        latest = history[-1]
        intent = classify(latest)
        if intent is Intent.IMAGE_GENERATION:
            result = image_generation_result(latest.content, self._config.image, self._seed_source())
            log.info('Image generation request routed to %s', result.model_used)
            return result

        model = select_model(cat, intent, self._config.models)
        request = build_completion_request(history, cat, model, self._config)
        log.info(
            'Completion request: category=%s intent=%s model=%s msgs=%d',
            cat.value,
            intent.value,
            model,
            len(request.messages),
        )

        try:
            resp = await self._llm.complete(request)
            content = resp.content
            log.debug('LLM raw response (%d chars): %s', len(content), content[:500])
            if not content.strip():
                raise CompletionFailedError('No content received from API')
        except CompletionFailedError as e:
            log.warning('Empty response from %s: %s', model, e)
            return fallback_result(cat, self._config.fallbacks)
        except Exception as e:
            log.error('LLM error from %s: %s: %s', model, type(e).__name__, e, exc_info=True)
            return fallback_result(cat, self._config.fallbacks)

        return CompletionResult(content=content, model_used=model)
