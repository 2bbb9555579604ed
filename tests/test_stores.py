"""Tests for the credential and progress stores."""

import pytest
from sqlalchemy import func, select

from restapi_tutor.core.errors import ConflictError, NotFoundError
from restapi_tutor.models.progress import Progress
from restapi_tutor.models.user import User
from restapi_tutor.services.credential_store import CredentialStore
from restapi_tutor.services.progress_store import ProgressStore, normalize_levels


class TestCredentialStore:
    """Tests for CredentialStore."""

    async def test_create_and_find(self, db):
        store = CredentialStore(db)
        user = await store.create("alice", "alice@example.com", "hash")
        assert user.id is not None
        assert user.created_at is not None

        found = await store.find_by_email("alice@example.com")
        assert found is not None
        assert found.id == user.id
        assert await store.find_by_email("bob@example.com") is None

    async def test_exists_matches_username_or_email(self, db):
        store = CredentialStore(db)
        await store.create("alice", "alice@example.com", "hash")
        assert await store.exists("alice", "other@example.com") is True
        assert await store.exists("other", "alice@example.com") is True
        assert await store.exists("bob", "bob@example.com") is False

    @pytest.mark.parametrize(
        "username,email",
        [("alice", "other@example.com"), ("other", "alice@example.com")],
    )
    async def test_create_duplicate_raises_conflict(self, db, username, email):
        """The unique indexes reject duplicates even without a pre-check."""
        store = CredentialStore(db)
        await store.create("alice", "alice@example.com", "hash")
        with pytest.raises(ConflictError):
            await store.create(username, email, "hash")

        count = await db.scalar(select(func.count()).select_from(User))
        assert count == 1

    async def test_delete_removes_progress(self, db):
        store = CredentialStore(db)
        user = await store.create("alice", "alice@example.com", "hash")
        await ProgressStore(db).create_default(user.id)

        assert await store.delete(user.id) is True
        assert await store.get(user.id) is None
        assert await ProgressStore(db).get(user.id) is None
        assert await store.delete(user.id) is False


class TestProgressStore:
    """Tests for ProgressStore."""

    async def _user(self, db, name="alice") -> User:
        return await CredentialStore(db).create(name, f"{name}@example.com", "hash")

    async def test_create_default_state(self, db):
        user = await self._user(db)
        progress = await ProgressStore(db).create_default(user.id)
        assert progress.current_level == 1
        assert progress.completed_levels == []
        assert progress.points == 0
        assert progress.updated_at is not None

    async def test_create_default_twice_conflicts(self, db):
        user = await self._user(db)
        store = ProgressStore(db)
        await store.create_default(user.id)
        with pytest.raises(ConflictError):
            await store.create_default(user.id)

        count = await db.scalar(select(func.count()).select_from(Progress))
        assert count == 1

    async def test_get_missing_returns_none(self, db):
        user = await self._user(db)
        assert await ProgressStore(db).get(user.id) is None

    async def test_upsert_replaces_fields(self, db):
        user = await self._user(db)
        store = ProgressStore(db)
        created = await store.create_default(user.id)
        first_stamp = created.updated_at

        updated = await store.upsert(user.id, 3, [2, 1, 2], 80)
        assert updated.current_level == 3
        assert set(updated.completed_levels) == {1, 2}
        assert updated.points == 80
        assert updated.updated_at >= first_stamp

    async def test_upsert_without_row_raises_not_found(self, db):
        user = await self._user(db)
        with pytest.raises(NotFoundError):
            await ProgressStore(db).upsert(user.id, 2, [1], 10)


def test_normalize_levels_collapses_duplicates():
    assert normalize_levels([3, 1, 3, 2, 1]) == [1, 2, 3]
    assert normalize_levels([]) == []
