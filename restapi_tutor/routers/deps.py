"""Request dependencies: session verification and per-request services."""
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from restapi_tutor.core.security import PasswordHasher, SessionClaims, SessionIssuer
from restapi_tutor.db.session import get_db
from restapi_tutor.services.accounts import AccountService
from restapi_tutor.services.progress import ProgressService

bearer_scheme = HTTPBearer(auto_error=False)


def get_session_issuer(request: Request) -> SessionIssuer:
    return request.app.state.session_issuer


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_current_session(
    issuer: Annotated[SessionIssuer, Depends(get_session_issuer)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> SessionClaims:
    """Verify `Authorization: Bearer <token>`; AuthError (401) otherwise."""
    return issuer.verify(credentials.credentials if credentials else None)


def get_account_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    issuer: Annotated[SessionIssuer, Depends(get_session_issuer)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> AccountService:
    return AccountService(db, issuer, hasher)


def get_progress_service(db: Annotated[AsyncSession, Depends(get_db)]) -> ProgressService:
    return ProgressService(db)
