"""L1 entity: what the latest message is asking for."""

from __future__ import annotations

import enum


class Intent(enum.Enum):
    PLAIN_TEXT = 'plain_text'
    IMAGE_GENERATION = 'image_generation'
    IMAGE_ANALYSIS = 'image_analysis'
