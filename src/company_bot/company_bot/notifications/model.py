from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class MessageField:
    name: str
    value: str
    inline: bool = True


@dataclass(frozen=True)
class StructuredMessage:
    """Transport-neutral rich message (rendered as an embed on Discord)."""

    title: str
    color: int
    description: Optional[str] = None
    fields: Tuple[MessageField, ...] = field(default_factory=tuple)
    thumbnail_url: Optional[str] = None
    timestamp: Optional[datetime] = None

    def with_field(self, name: str, value: str, *, inline: bool = True) -> "StructuredMessage":
        return replace(self, fields=self.fields + (MessageField(name, value, inline),))

    def field_value(self, name: str) -> Optional[str]:
        for f in self.fields:
            if f.name == name:
                return f.value
        return None
