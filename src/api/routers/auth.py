"""Signup and login endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_settings
from core.config import Settings
from schemas.auth import AccessTokenResponse, AuthCredentials
from services import auth_service
from services.exceptions import CredentialsTakenError, InvalidCredentialsError

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AccessTokenResponse, status_code=201)
async def signup(
    data: AuthCredentials,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> AccessTokenResponse:
    """Register a new account and return an access token."""
    try:
        token = await auth_service.signup(db, data, settings)
    except CredentialsTakenError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Credentials taken")
    return AccessTokenResponse(access_token=token)


@router.post("/login", response_model=AccessTokenResponse)
async def login(
    data: AuthCredentials,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> AccessTokenResponse:
    """Exchange email and password for an access token."""
    try:
        token = await auth_service.login(db, data, settings)
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Credentials incorrect",
        )
    return AccessTokenResponse(access_token=token)
