from __future__ import annotations

import uuid

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    name: str | None = Field(default=None, max_length=100)
    login: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6, max_length=128)


class AdminRegisterRequest(BaseModel):
    login: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6, max_length=128)
    coffee_shop_name: str = Field(min_length=1, max_length=120)
    address: str = Field(min_length=1, max_length=255)


class LoginRequest(BaseModel):
    login: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class MeOut(BaseModel):
    id: uuid.UUID
    name: str | None = None
    login: str | None = None
    role: str | None = None
