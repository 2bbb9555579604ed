"""Pydantic schemas for progress reads and full-replace updates."""
from datetime import datetime

from pydantic import BaseModel


class ProgressOutSchema(BaseModel):
    current_level: int
    completed_levels: list[int]
    points: int
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class ProgressUpdateSchema(BaseModel):
    current_level: int
    completed_levels: list[int]
    points: int
