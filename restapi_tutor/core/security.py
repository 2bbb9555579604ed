"""Password hashing and bearer session tokens (JWT)."""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from restapi_tutor.core.errors import AuthError

logger = logging.getLogger(__name__)

# bcrypt hard limit: 72 bytes (UTF-8)
MAX_PASSWORD_BYTES = 72
DUMMY_PASSWORD = "restapi-tutor-dummy-password"


class PasswordHasher:
    """bcrypt via passlib. Hashing is CPU-bound, so every call runs in the threadpool."""

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)
        self._dummy_hash: str | None = None

    async def hash(self, password: str) -> str:
        return await run_in_threadpool(self._context.hash, password)

    async def verify(self, plain: str, hashed: str) -> bool:
        return await run_in_threadpool(self._context.verify, plain, hashed)

    async def burn_check(self, plain: str) -> None:
        """Run one verification against a throwaway hash.

        Used when there is no stored hash to check, so an unknown account takes
        as long to reject as a wrong password.
        """
        if self._dummy_hash is None:
            self._dummy_hash = await self.hash(DUMMY_PASSWORD)
        await self.verify(plain, self._dummy_hash)


@dataclass(frozen=True)
class SessionClaims:
    identity_id: int
    username: str


class SessionIssuer:
    """Issues and verifies signed, time-limited bearer tokens.

    Holds the signing secret for the lifetime of the process; constructed once
    at app startup and shared read-only by all requests.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(days=7),
    ):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expires_in = expires_in

    def __repr__(self) -> str:
        return f"SessionIssuer(algorithm={self._algorithm!r}, expires_in={self._expires_in!r})"

    def issue(self, identity_id: int, username: str) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "id": identity_id,
            "username": username,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expires_in).timestamp()),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str | None) -> SessionClaims:
        """Return the token's claims; raise AuthError for any invalid token."""
        if not token:
            logger.debug("Session rejected: no token")
            raise AuthError()
        try:
            claims = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            logger.info("Session rejected: token expired")
            raise AuthError()
        except JWTError as exc:
            logger.info("Session rejected: %s", exc)
            raise AuthError()

        identity_id = claims.get("id")
        username = claims.get("username")
        if not isinstance(identity_id, int) or not isinstance(username, str):
            logger.warning("Session rejected: signed token with unexpected claims")
            raise AuthError()
        return SessionClaims(identity_id=identity_id, username=username)
