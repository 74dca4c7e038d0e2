"""Resilience policy: canned offline replies and the model-free image path."""

from __future__ import annotations

import re
from urllib.parse import quote

from panda_nexus.l1_entities.completion import IMAGE_SERVICE_MODEL, OFFLINE_MODEL, CompletionResult
from panda_nexus.l1_entities.config import FallbackConfig, ImageConfig
from panda_nexus.l1_entities.service_category import ServiceCategory
from panda_nexus.l2_use_cases.utils.intent_classifier import GENERATION_VERBS

_VERB_RE = re.compile(r'\b(?:' + '|'.join(GENERATION_VERBS) + r')\b', re.IGNORECASE)
# Characters encodeURIComponent leaves untouched.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def fallback_result(category: ServiceCategory | str | None, fallbacks: FallbackConfig) -> CompletionResult:
    """Canned reply for *category*, tagged with the offline sentinel model."""
    return CompletionResult(
        content=fallbacks.messages[ServiceCategory.coerce(category)],
        model_used=OFFLINE_MODEL,
    )


def clean_image_prompt(text: str) -> str:
    """Strip generation verbs and collapse whitespace. Falls back to the original text if nothing is left."""
    cleaned = ' '.join(_VERB_RE.sub(' ', text).split())
    return cleaned or text.strip()


def build_image_url(prompt: str, image: ImageConfig, seed: int) -> str:
    # Unencodable code points (lone surrogates) become an escaped '?'.
    encoded = quote(prompt, safe=_URI_COMPONENT_SAFE, errors='replace')
    enhance = 'true' if image.enhance else 'false'
    return (
        f'{image.base_url.rstrip("/")}/prompt/{encoded}'
        f'?width={image.width}&height={image.height}&seed={seed}&enhance={enhance}'
    )


def image_generation_result(text: str, image: ImageConfig, seed: int) -> CompletionResult:
    """Describe and link a generated image. Pure string formatting; cannot fail."""
    prompt = clean_image_prompt(text)
    return CompletionResult(
        content=f'I\'ve generated an image for: "{prompt}"',
        model_used=IMAGE_SERVICE_MODEL,
        generated_image=build_image_url(prompt, image, seed),
    )
