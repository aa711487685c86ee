"""Run results returned by the bulk operations and the control API."""

from typing import List, Optional

from pydantic import BaseModel, Field


class DescriptionPreviewItem(BaseModel):
    id: int
    title: str


class DescriptionPreviewResult(BaseModel):
    """Dry run of the description rewrite: what would change, nothing written."""
    preview_count: int
    preview: List[DescriptionPreviewItem] = Field(default_factory=list)


class DescriptionApplyResult(BaseModel):
    updated: int


class HideResult(BaseModel):
    hidden: int


class RepriceResult(BaseModel):
    changed: int


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    ok: bool = True
    shop: Optional[str] = None
