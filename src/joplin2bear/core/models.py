"""Document model produced by the front matter parser"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Document(BaseModel):
    """One parsed note: metadata from the front matter, body, and derived tag.

    Offsets index the original text, so that
    ``text[front_matter_start_pos:front_matter_end_pos] == front_matter``.
    """
    model_config = ConfigDict(frozen=True)

    title:                  str = Field(min_length=1)
    created:                datetime
    updated:                datetime
    front_matter:           str
    front_matter_start_pos: int = Field(ge=0)
    front_matter_end_pos:   int
    body:                   str = ""
    tags:                   Optional[str] = None   # None only for an empty relative path
    relative_path:          Path

    @field_validator("created", "updated")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            raise ValueError("timestamp must be timezone-aware")
        return value.astimezone(timezone.utc)

    @model_validator(mode="after")
    def _check_offsets(self) -> "Document":
        if self.front_matter_end_pos <= self.front_matter_start_pos:
            raise ValueError("front matter end must come after its start")
        if len(self.front_matter) != self.front_matter_end_pos - self.front_matter_start_pos:
            raise ValueError("front matter does not match its offsets")
        return self
