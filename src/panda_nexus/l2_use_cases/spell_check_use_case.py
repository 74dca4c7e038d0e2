"""Use case: spell check with local correction and optional remote refinement."""

from __future__ import annotations

import logging

from panda_nexus.l1_entities.config import AppConfig
from panda_nexus.l2_use_cases.ports.llm_client import LLMClient
from panda_nexus.l2_use_cases.utils.prompt_builder import build_spell_check_request
from panda_nexus.l2_use_cases.utils.text_normalizer import normalize

log = logging.getLogger('pnx.llm')


class SpellCheckUseCase:
    """Local normalization is always the minimum result; the LLM only refines text it left untouched."""

    def __init__(self, llm_client: LLMClient, config: AppConfig) -> None:
        self._llm = llm_client
        self._config = config

    async def execute(self, text: str) -> str:
        local = normalize(text)
        if local != text or not text.strip() or not self._config.spell_check.remote_refinement:
            return local

        try:
            resp = await self._llm.complete(build_spell_check_request(text, self._config))
        except Exception as e:
            log.error('Spell check refinement failed: %s: %s', type(e).__name__, e, exc_info=True)
            return local

        # Refinements get the same local pass.
        refined = resp.content.strip()
        return normalize(refined) if refined else local
