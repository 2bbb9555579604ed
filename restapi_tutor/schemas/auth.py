"""Pydantic schemas for registration, login and the public user view."""
from datetime import datetime

from pydantic import BaseModel


class RegisterSchema(BaseModel):
    # optional here so that missing fields reach the service's own 400
    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginSchema(BaseModel):
    email: str | None = None
    password: str | None = None


class UserOutSchema(BaseModel):
    id: int
    username: str
    email: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class AuthOutSchema(BaseModel):
    token: str
    user: UserOutSchema
