"""Pydantic models for font listings, cache entries and upload acknowledgements."""

from pydantic import BaseModel, Field


class FontFile(BaseModel):
    """One font file found in the storage directory.

    Records are synthesized on every listing and never persisted.
    ``data_url`` is only present while the font is cache-resident.
    """

    name: str = Field(..., description="File stem")
    file_name: str = Field(..., description="Stem plus extension")
    format: str = Field(..., description="Lowercase extension without the dot")
    size_bytes: int = Field(..., ge=0, description="File size at scan time")
    path: str = Field(..., description="Absolute file path")
    data_url: str | None = Field(None, description="Cached preview data URL")


class GlyphPayload(BaseModel):
    """Listing snapshot pushed to console subscribers."""

    fonts: list[FontFile] = Field(default_factory=list)


class FontInfo(BaseModel):
    """A font held in the in-memory cache."""

    name: str
    path: str
    format: str
    size_bytes: int = Field(..., ge=0)
    data_url: str
    loaded_at: float


class MemoryEntry(BaseModel):
    """Memory used by one cached font."""

    name: str
    size_bytes: int = Field(..., ge=0)


class UploadResult(BaseModel):
    """Acknowledgement returned once an upload is written and the cache load attempted."""

    name: str
    file_name: str
    path: str
    size_bytes: int = Field(..., ge=0)
    cached: bool = False
    data_url: str | None = None
