from __future__ import annotations

from pydantic import BaseModel


class HasLikedOut(BaseModel):
    has_liked: bool
