from __future__ import annotations

import uuid

from pydantic import BaseModel, Field


class RewardTypeCreate(BaseModel):
    coffee_shop_id: uuid.UUID
    description: str = Field(min_length=1, max_length=1000)


class RewardTypeUpdate(BaseModel):
    description: str = Field(min_length=1, max_length=1000)


class RewardTypeOut(BaseModel):
    id: uuid.UUID
    coffee_shop_id: uuid.UUID
    description: str

    class Config:
        from_attributes = True
