"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from panda_nexus.l1_entities.config import AppConfig
from panda_nexus.l2_use_cases.ports.llm_client import LLMClient
from panda_nexus.l3_interface_adapters.controllers.chat_controller import ChatController
from panda_nexus.l3_interface_adapters.gateways.openai_llm_client import OpenAICompatLLMClient
from panda_nexus.l4_frameworks_and_drivers.infra_config import InfraConfig


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        infra: InfraConfig | None = None,
        llm_client: LLMClient | None = None,
    ) -> None:
        self.config = config

        _infra = infra or InfraConfig()
        provider = _infra.openrouter
        self.llm_client: LLMClient = llm_client or OpenAICompatLLMClient(
            api_key=provider.resolved_api_key(),
            base_url=provider.base_url,
            referer=provider.referer,
            title=provider.title,
            timeout=provider.timeout,
        )
        self.controller = ChatController(config=config, llm_client=self.llm_client)
