"""Wire shapes for the JSON chapter API and the page hydration payload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChapterRecord(BaseModel):
    title: str
    slug: str
    created_at: str


class ChapterListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chapters: list[ChapterRecord] = Field(alias="_data")


class ChapterListRequest(BaseModel):
    """Body POSTed to the API proxy; it forwards ``method`` to ``path``."""

    path: str
    query: dict[str, int]
    method: str = "get"
    headers: dict[str, str] = {"content-type": "application/json"}


class HydrationRoute(BaseModel):
    """Element of the hydration array that carries the canonical novel route."""

    path: str
