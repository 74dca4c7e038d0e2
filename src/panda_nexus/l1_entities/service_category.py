"""L1 entity: service category requested by the caller."""

from __future__ import annotations

import enum


class ServiceCategory(enum.Enum):
    AUTO = 'auto'
    CODE = 'code'
    CREATIVE = 'creative'
    KNOWLEDGE = 'knowledge'
    GENERAL = 'general'

    @classmethod
    def coerce(cls, value: ServiceCategory | str | None) -> ServiceCategory:
        """Map any caller value to a member. Unrecognized values degrade to AUTO."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.AUTO
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.AUTO
