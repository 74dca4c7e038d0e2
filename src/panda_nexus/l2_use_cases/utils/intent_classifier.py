"""Pure intent detection for the latest message in a conversation."""

from __future__ import annotations

import re

from panda_nexus.l1_entities.chat_message import ChatMessage
from panda_nexus.l1_entities.intent import Intent

GENERATION_VERBS = ('generate', 'create', 'make', 'draw')
IMAGE_NOUNS = ('picture', 'pictures', 'photo', 'photos', 'drawing', 'drawings')

IMAGE_REQUEST_RE = re.compile(r'\b(?:' + '|'.join(GENERATION_VERBS + IMAGE_NOUNS) + r')\b', re.IGNORECASE)


def classify(message: ChatMessage | None) -> Intent:
    """Attachment presence wins over any textual image request."""
    if message is None:
        return Intent.PLAIN_TEXT
    if message.has_image:
        return Intent.IMAGE_ANALYSIS
    if IMAGE_REQUEST_RE.search(message.content):
        return Intent.IMAGE_GENERATION
    return Intent.PLAIN_TEXT
