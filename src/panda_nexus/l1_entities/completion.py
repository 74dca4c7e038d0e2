"""Completion result entity returned to the UI for every request."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

OFFLINE_MODEL = 'PandaNexus Offline'
IMAGE_SERVICE_MODEL = 'Pollinations AI'


class CompletionResult(BaseModel):
    """Content shown to the user plus the model that produced it.

    ``model_used`` is OFFLINE_MODEL when the content is a canned fallback.
    """

    model_config = ConfigDict(frozen=True)

    content: str
    model_used: str
    generated_image: str | None = None

    @property
    def is_offline(self) -> bool:
        return self.model_used == OFFLINE_MODEL
