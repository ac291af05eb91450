"""Document models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from markview.models.outline import Outline


class FileEntry(BaseModel):
    """A Markdown file found by the directory scanner."""

    name: str
    path: str
    relative_path: str = Field(serialization_alias="relativePath")
    size: int = Field(ge=0)
    modified: datetime


class UploadedFile(BaseModel):
    """An uploaded file stored under a generated name.

    `filename` is the identity key for later lookups; `original_name` is informational only.
    """

    filename: str
    original_name: str = Field(serialization_alias="originalName")
    path: str


class RenderedDocument(BaseModel):
    """A document rendered for one preview request. Never cached or persisted."""

    source_name: str
    source_path: str
    body: str
    outline: Outline = Field(default_factory=Outline)
