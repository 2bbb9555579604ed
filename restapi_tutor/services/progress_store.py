"""Durable record of one progress entry per user."""
from datetime import datetime, timezone
from typing import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from restapi_tutor.core.errors import NotFoundError
from restapi_tutor.db.session import commit_or_raise, storage_errors
from restapi_tutor.models.progress import DEFAULT_LEVEL, DEFAULT_POINTS, Progress


def normalize_levels(levels: Iterable[int]) -> list[int]:
    """Collapse duplicates; sorted only so the stored JSON is stable."""
    return sorted(set(levels))


class ProgressStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_default(self, identity_id: int) -> Progress:
        """Insert level 1 / no completed levels / 0 points. ConflictError if a row exists."""
        progress = Progress(
            user_id=identity_id,
            current_level=DEFAULT_LEVEL,
            completed_levels=[],
            points=DEFAULT_POINTS,
        )
        self.db.add(progress)
        await commit_or_raise(self.db, "Progress already exists")
        async with storage_errors(self.db):
            await self.db.refresh(progress)
        return progress

    async def get(self, identity_id: int) -> Progress | None:
        async with storage_errors(self.db):
            result = await self.db.execute(select(Progress).where(Progress.user_id == identity_id))
        return result.scalar_one_or_none()

    async def upsert(
        self,
        identity_id: int,
        current_level: int,
        completed_levels: Iterable[int],
        points: int,
    ) -> Progress:
        """Replace all mutable fields of an existing row and bump updated_at."""
        progress = await self.get(identity_id)
        if progress is None:
            raise NotFoundError("Progress not found")

        progress.current_level = current_level
        progress.completed_levels = normalize_levels(completed_levels)
        progress.points = points
        progress.updated_at = datetime.now(timezone.utc)
        await commit_or_raise(self.db, "Progress could not be updated")
        async with storage_errors(self.db):
            await self.db.refresh(progress)
        return progress
