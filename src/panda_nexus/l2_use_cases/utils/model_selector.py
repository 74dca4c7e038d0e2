"""Pure mapping from (service category, intent) to an upstream model id."""

from __future__ import annotations

from panda_nexus.l1_entities.config import ModelConfig
from panda_nexus.l1_entities.intent import Intent
from panda_nexus.l1_entities.service_category import ServiceCategory


def select_model(category: ServiceCategory | str | None, intent: Intent, models: ModelConfig) -> str:
    """Image analysis always uses the multimodal model; otherwise the category's entry."""
    if intent is Intent.IMAGE_ANALYSIS:
        return models.multimodal
    return models.by_category[ServiceCategory.coerce(category)]
