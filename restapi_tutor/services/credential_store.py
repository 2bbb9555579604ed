"""Durable record of registered identities."""
from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from restapi_tutor.db.session import commit_or_raise, storage_errors
from restapi_tutor.models.progress import Progress
from restapi_tutor.models.user import User

DUPLICATE_USER_MESSAGE = "User already exists"


class CredentialStore:
    """Users table access. The unique indexes are the authority on duplicates."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, username: str, email: str, password_hash: str) -> User:
        user = User(username=username, email=email, hashed_password=password_hash)
        self.db.add(user)
        await commit_or_raise(self.db, DUPLICATE_USER_MESSAGE)
        async with storage_errors(self.db):
            await self.db.refresh(user)
        return user

    async def get(self, identity_id: int) -> User | None:
        async with storage_errors(self.db):
            result = await self.db.execute(select(User).where(User.id == identity_id))
        return result.scalar_one_or_none()

    async def find_by_email(self, email: str) -> User | None:
        async with storage_errors(self.db):
            result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def exists(self, username: str, email: str) -> bool:
        """Pre-flight duplicate check; create() still enforces uniqueness itself."""
        async with storage_errors(self.db):
            result = await self.db.execute(
                select(User.id).where(or_(User.username == username, User.email == email)).limit(1)
            )
        return result.first() is not None

    async def delete(self, identity_id: int) -> bool:
        """Remove a user and their progress row in one transaction."""
        async with storage_errors(self.db):
            await self.db.execute(delete(Progress).where(Progress.user_id == identity_id))
            result = await self.db.execute(delete(User).where(User.id == identity_id))
        await commit_or_raise(self.db, "User could not be deleted")
        return result.rowcount > 0
