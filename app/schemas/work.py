"""
Pydantic schemas for Work request/response validation.
Field names on the wire are camelCase (pixivId).
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

TagName = Annotated[str, Field(max_length=255)]


class WorkCreate(BaseModel):
    """Request body for registering a work."""

    pixiv_id: str = Field(..., alias="pixivId", max_length=64)
    title: str = Field(..., max_length=255)
    type: str = Field(..., max_length=50)
    tags: list[TagName] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("pixiv_id", mode="before")
    @classmethod
    def _coerce_pixiv_id(cls, value):
        # Source-site ids are numeric but clients may send them as numbers
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class WorkSearch(BaseModel):
    """Request body for searching works by type and tag set."""

    type: str
    tags: list[TagName] = Field(default_factory=list)


class WorkResponse(BaseModel):
    """A work with all of its tag names."""

    id: int
    pixiv_id: str = Field(alias="pixivId")
    title: str
    type: str
    tags: list[str]

    model_config = ConfigDict(populate_by_name=True)


class WorkCreated(BaseModel):
    success: bool = True
    id: int


class SuccessResponse(BaseModel):
    success: bool = True
