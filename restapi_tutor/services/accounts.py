"""Registration, login and account lookup/removal."""
import logging
import re

from sqlalchemy.ext.asyncio import AsyncSession

from restapi_tutor.core.errors import AuthError, ConflictError, NotFoundError, StorageError, ValidationError
from restapi_tutor.core.security import MAX_PASSWORD_BYTES, PasswordHasher, SessionIssuer
from restapi_tutor.models.user import EMAIL_MAX_LENGTH, USERNAME_MAX_LENGTH
from restapi_tutor.schemas.auth import AuthOutSchema, UserOutSchema
from restapi_tutor.services.credential_store import DUPLICATE_USER_MESSAGE, CredentialStore
from restapi_tutor.services.progress_store import ProgressStore

logger = logging.getLogger(__name__)

# Simple, practical email check
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def normalize_username(username: str | None) -> str:
    return (username or "").strip()


class AccountService:
    """Orchestrates the account lifecycle.

    register: validate -> check uniqueness -> hash -> persist identity ->
    init progress -> issue session.
    """

    def __init__(self, db: AsyncSession, issuer: SessionIssuer, hasher: PasswordHasher):
        self.credentials = CredentialStore(db)
        self.progress = ProgressStore(db)
        self.issuer = issuer
        self.hasher = hasher

    async def register(self, username: str | None, email: str | None, password: str | None) -> AuthOutSchema:
        username_norm = normalize_username(username)
        email_norm = normalize_email(email)
        pwd = password or ""

        if not username_norm or not email_norm or not pwd:
            raise ValidationError("Username, email and password are required")
        if not EMAIL_RE.match(email_norm):
            raise ValidationError("Invalid email address")
        if len(username_norm) > USERNAME_MAX_LENGTH:
            raise ValidationError(f"Username must be at most {USERNAME_MAX_LENGTH} characters")
        if len(email_norm) > EMAIL_MAX_LENGTH:
            raise ValidationError(f"Email must be at most {EMAIL_MAX_LENGTH} characters")
        if len(pwd.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

        if await self.credentials.exists(username_norm, email_norm):
            raise ConflictError(DUPLICATE_USER_MESSAGE)

        user = await self.credentials.create(username_norm, email_norm, await self.hasher.hash(pwd))
        logger.info("Registered user id=%s username=%s", user.id, user.username)

        try:
            await self.progress.create_default(user.id)
        except ConflictError:
            pass
        except StorageError:
            # account stays usable: ProgressService.get creates the row on first read
            logger.warning("Progress init failed for user id=%s; deferring to first read", user.id)

        return self._authenticated(user)

    async def login(self, email: str | None, password: str | None) -> AuthOutSchema:
        email_norm = normalize_email(email)
        pwd = password or ""
        if not email_norm or not pwd:
            raise ValidationError("Email and password are required")

        user = await self.credentials.find_by_email(email_norm)
        if user is None:
            await self.hasher.burn_check(pwd)
            logger.info("Login failed: unknown email")
            raise AuthError(INVALID_CREDENTIALS_MESSAGE)
        if not await self.hasher.verify(pwd, user.hashed_password):
            logger.info("Login failed: bad password for user id=%s", user.id)
            raise AuthError(INVALID_CREDENTIALS_MESSAGE)

        logger.info("Login user id=%s", user.id)
        return self._authenticated(user)

    async def get_identity(self, identity_id: int) -> UserOutSchema:
        user = await self.credentials.get(identity_id)
        if user is None:
            raise NotFoundError("User not found")
        return UserOutSchema.model_validate(user)

    async def delete(self, identity_id: int) -> None:
        if await self.credentials.delete(identity_id):
            logger.info("Deleted user id=%s", identity_id)

    def _authenticated(self, user) -> AuthOutSchema:
        token = self.issuer.issue(user.id, user.username)
        return AuthOutSchema(token=token, user=UserOutSchema.model_validate(user))
