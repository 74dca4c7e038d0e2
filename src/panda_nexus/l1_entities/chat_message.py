"""Chat message entity: one turn of a conversation as supplied by the UI."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ChatMessage(BaseModel):
    """A single message in a conversation. ``attached_image`` is a URL or data URI."""

    model_config = ConfigDict(frozen=True)

    role: Literal['system', 'user', 'assistant']
    content: str
    attached_image: str | None = None

    @property
    def has_image(self) -> bool:
        return bool(self.attached_image)
