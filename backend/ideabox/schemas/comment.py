from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    text: str = Field(min_length=1)
    # Display name the worker signs the comment with.
    name: str = Field(min_length=1, max_length=100)


class CommentOut(BaseModel):
    id: uuid.UUID
    text: str
    name: str
    created_at: datetime

    @classmethod
    def from_model(cls, c) -> "CommentOut":
        return cls(id=c.id, text=c.text, name=c.author_name, created_at=c.created_at)
