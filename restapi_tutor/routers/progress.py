"""Progress routes: read and replace the caller's own progress."""
from typing import Annotated

from fastapi import APIRouter, Depends

from restapi_tutor.core.security import SessionClaims
from restapi_tutor.routers.deps import get_current_session, get_progress_service
from restapi_tutor.schemas.progress import ProgressOutSchema, ProgressUpdateSchema
from restapi_tutor.services.progress import ProgressService

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=ProgressOutSchema)
async def get_progress(
    session: Annotated[SessionClaims, Depends(get_current_session)],
    progress: Annotated[ProgressService, Depends(get_progress_service)],
):
    """Current level, completed levels and points for the token's user."""
    return await progress.get(session.identity_id)


@router.put("", response_model=ProgressOutSchema)
async def put_progress(
    body: ProgressUpdateSchema,
    session: Annotated[SessionClaims, Depends(get_current_session)],
    progress: Annotated[ProgressService, Depends(get_progress_service)],
):
    """Replace the whole progress entry with the body."""
    return await progress.update(
        session.identity_id,
        body.current_level,
        body.completed_levels,
        body.points,
    )
