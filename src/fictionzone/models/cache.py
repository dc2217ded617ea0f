from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class NovelIdCacheEntry(BaseModel):
    """Identifier discovered on a novel's detail page."""

    novel_id: str
    cached_at: datetime
