"""Lesson catalog routes (read-only, no auth)."""
from fastapi import APIRouter

from restapi_tutor.schemas.level import LevelOutSchema, LevelSummarySchema
from restapi_tutor.services.catalog import get_level, list_levels

router = APIRouter(prefix="/levels", tags=["levels"])


@router.get("", response_model=list[LevelSummarySchema])
async def levels_index():
    return list_levels()


@router.get("/{level_id}", response_model=LevelOutSchema)
async def level_detail(level_id: int):
    return get_level(level_id)
