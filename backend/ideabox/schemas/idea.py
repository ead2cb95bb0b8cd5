from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class IdeaCreate(BaseModel):
    coffee_shop_id: uuid.UUID
    category_id: uuid.UUID | None = None
    title: str = Field(min_length=3, max_length=120)
    description: str = Field(min_length=1)


class IdeaOut(BaseModel):
    id: uuid.UUID
    coffee_shop_id: uuid.UUID | None = None
    category_id: uuid.UUID | None = None
    creator_id: uuid.UUID | None = None
    title: str
    description: str
    created_at: datetime

    class Config:
        from_attributes = True
