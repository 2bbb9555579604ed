"""Auth routes: register, login, current account. Stateless bearer tokens."""
from typing import Annotated

from fastapi import APIRouter, Depends, Response

from restapi_tutor.core.security import SessionClaims
from restapi_tutor.routers.deps import get_account_service, get_current_session
from restapi_tutor.schemas.auth import AuthOutSchema, LoginSchema, RegisterSchema, UserOutSchema
from restapi_tutor.services.accounts import AccountService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthOutSchema, status_code=201)
async def register(
    body: RegisterSchema,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Create user and progress entry; return a token (auto-login)."""
    return await accounts.register(body.username, body.email, body.password)


@router.post("/login", response_model=AuthOutSchema)
async def login(
    body: LoginSchema,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Exchange email and password for a token."""
    return await accounts.login(body.email, body.password)


@router.get("/me", response_model=UserOutSchema)
async def me(
    session: Annotated[SessionClaims, Depends(get_current_session)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    return await accounts.get_identity(session.identity_id)


@router.delete("/me", status_code=204)
async def delete_me(
    session: Annotated[SessionClaims, Depends(get_current_session)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Delete the account and its progress. Outstanding tokens stop resolving to a user."""
    await accounts.delete(session.identity_id)
    return Response(status_code=204)
