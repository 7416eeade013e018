"""
Authentication endpoints.

Issues JWT bearer tokens for dashboard users (e-mail + password).
"""

from datetime import timedelta
from typing import Annotated
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from gspro.api.dependencies import get_current_active_user
from gspro.core.config import settings
from gspro.core.security import (
    authenticate_user,
    create_access_token,
    Token,
    User,
)
from gspro.schemas.user import CurrentUserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/token", response_model=Token, status_code=status.HTTP_200_OK)
async def login(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
) -> Token:
    """
    OAuth2 compatible token login endpoint.

    The ``username`` form field carries the user's e-mail.

    Example:
        POST /api/v1/auth/token
        Content-Type: application/x-www-form-urlencoded

        username=admin@gspro.com.br&password=changeme123

    Security:
        - Generic error message on failure (don't reveal if e-mail exists)
        - Disabled users are rejected the same way as bad passwords
    """
    user = await authenticate_user(form_data.username, form_data.password)

    if not user:
        logger.warning("Login failed", extra={"email": form_data.username})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="E-mail ou senha incorretos",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        data={"sub": user.email},
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes)
    )

    logger.info("Login succeeded", extra={"user_id": user.id})
    return Token(access_token=access_token, token_type="bearer")


@router.get("/me", response_model=CurrentUserResponse)
async def read_users_me(
    current_user: Annotated[User, Depends(get_current_active_user)]
) -> CurrentUserResponse:
    """Return the authenticated user's profile."""
    return CurrentUserResponse(
        id=current_user.id,
        email=current_user.email,
        name=current_user.name,
        role=current_user.role,
    )
