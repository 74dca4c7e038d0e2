"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from panda_nexus.l1_entities.service_category import ServiceCategory


def _require_every_category(table: dict) -> dict:
    missing = [c.value for c in ServiceCategory if c not in table]
    if missing:
        raise ValueError(f'missing entries for categories: {", ".join(missing)}')
    return table


# Keys are validated against ServiceCategory, so unknown categories are rejected too.
CategoryText = Annotated[dict[ServiceCategory, str], AfterValidator(_require_every_category)]
CategoryNumber = Annotated[dict[ServiceCategory, float], AfterValidator(_require_every_category)]


class ModelConfig(BaseModel):
    by_category: CategoryText
    multimodal: str
    spell_check: str


class CompletionConfig(BaseModel):
    history_window: int = Field(gt=0)
    max_tokens: int = Field(gt=0)
    top_p: float
    frequency_penalty: float
    presence_penalty: float
    temperatures: CategoryNumber


class PromptConfig(BaseModel):
    system: CategoryText


class FallbackConfig(BaseModel):
    messages: CategoryText


class ImageConfig(BaseModel):
    base_url: str
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    enhance: bool


class SpellCheckConfig(BaseModel):
    remote_refinement: bool
    temperature: float
    max_tokens: int = Field(gt=0)
    instruction: str


class AppConfig(BaseModel):
    models: ModelConfig
    completion: CompletionConfig
    prompts: PromptConfig
    fallbacks: FallbackConfig
    image: ImageConfig
    spell_check: SpellCheckConfig
