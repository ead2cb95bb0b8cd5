from __future__ import annotations

import uuid

from pydantic import BaseModel, Field


class CategoryIn(BaseModel):
    title: str = Field(min_length=3, max_length=50)
    description: str | None = None


class CategoryOut(BaseModel):
    id: uuid.UUID
    coffee_shop_id: uuid.UUID
    title: str
    description: str | None = None

    class Config:
        from_attributes = True


class CategoryCreated(BaseModel):
    id: uuid.UUID


class CategoryPage(BaseModel):
    data: list[CategoryOut]
    total: int
