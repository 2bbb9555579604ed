"""Pydantic schemas for the lesson catalog."""
from pydantic import BaseModel


class WalkthroughStepSchema(BaseModel):
    step: int
    title: str
    detail: str
    example: str | None = None


class TutorialContentSchema(BaseModel):
    explanation: str
    key_points: list[str]
    walkthrough: list[WalkthroughStepSchema]


class LevelSummarySchema(BaseModel):
    id: int
    title: str
    description: str


class LevelOutSchema(LevelSummarySchema):
    tutorial_content: TutorialContentSchema
