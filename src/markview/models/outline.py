"""Outline models."""

from __future__ import annotations

from pydantic import BaseModel, Field, RootModel


class Heading(BaseModel):
    """A single heading found in a rendered document.

    `id` is the anchor injected into the body; it is only unique within one rendered document.
    """

    level: int = Field(ge=1, le=6)
    text: str
    id: str


class Outline(RootModel[list[Heading]]):
    """Headings of a document in document order. Empty when the document has none."""

    root: list[Heading] = Field(default_factory=list)

    def __iter__(self):  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Heading:
        return self.root[index]

    @property
    def ids(self) -> list[str]:
        return [h.id for h in self.root]
