"""Read and replace one user's progress."""
import logging
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from restapi_tutor.core.errors import ConflictError, NotFoundError, ValidationError
from restapi_tutor.models.progress import MAX_STORED_INT, Progress
from restapi_tutor.services.progress_store import ProgressStore

logger = logging.getLogger(__name__)


class ProgressService:
    """Progress for the identity of a verified session.

    Callers pass the session's identity id, never one taken from a request body.
    """

    def __init__(self, db: AsyncSession):
        self.store = ProgressStore(db)

    async def get(self, identity_id: int) -> Progress:
        """Return the user's progress, creating the default entry if it is missing."""
        progress = await self.store.get(identity_id)
        if progress is not None:
            return progress

        logger.info("No progress for user id=%s; creating default", identity_id)
        try:
            return await self.store.create_default(identity_id)
        except ConflictError:
            # another request created it first, or the user row is gone
            progress = await self.store.get(identity_id)
            if progress is None:
                raise NotFoundError("User not found")
            return progress

    async def update(
        self,
        identity_id: int,
        current_level: int,
        completed_levels: Iterable[int],
        points: int,
    ) -> Progress:
        """Full replace; the last committed write wins."""
        if current_level < 1:
            raise ValidationError("current_level must be at least 1")
        if points < 0:
            raise ValidationError("points must not be negative")
        if current_level > MAX_STORED_INT or points > MAX_STORED_INT:
            raise ValidationError(f"current_level and points must be at most {MAX_STORED_INT}")

        completed = list(completed_levels)
        try:
            return await self.store.upsert(identity_id, current_level, completed, points)
        except NotFoundError:
            await self.get(identity_id)
            return await self.store.upsert(identity_id, current_level, completed, points)
