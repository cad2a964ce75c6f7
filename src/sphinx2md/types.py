"""Shared Pydantic models for sphinx2md."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ApiMetadata(BaseModel):
    """Metadata about the API entity a converted page documents."""

    model_config = ConfigDict(extra="allow")

    python_api_name: str | None = None
    python_api_type: str | None = None


class ImageRef(BaseModel):
    file_name: str
    src: str
    dest: str


class SphinxToMdResult(BaseModel):
    """A single page converted from Sphinx HTML to markdown."""

    markdown: str
    meta: ApiMetadata = Field(default_factory=ApiMetadata)
    images: list[ImageRef] = Field(default_factory=list)
    is_release_notes: bool = False

    @property
    def has_api_name(self) -> bool:
        return self.meta is not None and self.meta.python_api_name is not None
