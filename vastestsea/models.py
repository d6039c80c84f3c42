"""Records stored by the dictionary service and their JSON shapes."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


def _format_timestamp(moment: datetime) -> str:
    """Render a timestamp as RFC 3339 with trailing fractional zeros trimmed."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset()
    if not offset:
        return text + "Z"
    total_minutes = int(offset.total_seconds()) // 60
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


@dataclass(frozen=True)
class Language:
    """A language that words can belong to."""

    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    name: str

    def to_json(self) -> dict[str, Any]:
        """Return the language as a JSON-ready mapping."""
        return {
            "id": str(self.id),
            "name": self.name,
            "created_at": _format_timestamp(self.created_at),
            "updated_at": _format_timestamp(self.updated_at),
        }


@dataclass(frozen=True)
class Word:
    """A word registered to a single language."""

    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    word: str
    font_formatted: str | None
    language_id: uuid.UUID

    def to_json(self) -> dict[str, Any]:
        """Return the word as a JSON-ready mapping; missing formatting becomes ''."""
        return {
            "id": str(self.id),
            "created_at": _format_timestamp(self.created_at),
            "updated_at": _format_timestamp(self.updated_at),
            "word": self.word,
            "font_formatted": self.font_formatted if self.font_formatted is not None else "",
            "language_id": str(self.language_id),
        }