"""
Security module for authentication.

Provides JWT token handling, password hashing, and user lookup against
the ``usuarios`` table (bcrypt, python-jose).
"""

from datetime import datetime, timedelta
from typing import Optional, Dict, Any

import bcrypt
from jose import JWTError, jwt
from pydantic import BaseModel, Field
from sqlalchemy import select

from gspro.core.config import settings

# JWT Algorithm
ALGORITHM = "HS256"

# bcrypt only looks at the first 72 bytes
_BCRYPT_MAX_BYTES = 72


class TokenData(BaseModel):
    """Claims stored in the JWT token."""
    email: str
    exp: Optional[datetime] = None


class User(BaseModel):
    """
    Authenticated user as seen by the API layer.

    Never carries the password hash.
    """
    id: str
    email: str
    name: Optional[str] = None
    role: str = "vendedor"
    disabled: bool = False


class UserInDB(User):
    """
    User with hashed password for credential checks.

    Never expose this model through the API - use User instead.
    """
    hashed_password: str


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a bcrypt hash.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    if isinstance(hashed_password, str):
        hashed_bytes = hashed_password.encode("utf-8")
    else:
        hashed_bytes = hashed_password

    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed_bytes)
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt (12 rounds).

    Passwords longer than 72 bytes are truncated, matching bcrypt's limit.
    """
    salt = bcrypt.gensalt(rounds=12)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token.

    Args:
        data: Dictionary of claims to encode in the token
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string

    Example:
        >>> token = create_access_token({"sub": "admin@gspro.com.br"})
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(
            minutes=settings.access_token_expire_minutes
        )

    to_encode.update({"exp": expire})

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=ALGORITHM
    )


def decode_access_token(token: str) -> Optional[TokenData]:
    """
    Decode and validate a JWT access token.

    Returns:
        TokenData if valid, None if invalid, expired or missing ``sub``
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[ALGORITHM]
        )
    except JWTError:
        return None

    email = payload.get("sub")
    if email is None:
        return None

    return TokenData(email=email, exp=payload.get("exp"))


async def get_user(email: str) -> Optional[UserInDB]:
    """
    Retrieve a user from the ``usuarios`` table by e-mail.

    Args:
        email: E-mail address to look up (case-insensitive)

    Returns:
        UserInDB if found, None otherwise
    """
    from gspro.core.database import async_session_maker
    from gspro.models.user import User as UserModel

    async with async_session_maker() as session:
        result = await session.execute(
            select(UserModel).where(UserModel.email == email.strip().lower())
        )
        row = result.scalar_one_or_none()

        if row is None:
            return None

        return UserInDB(
            id=row.id,
            email=row.email,
            name=row.name,
            role=row.role,
            disabled=not row.is_active,
            hashed_password=row.hashed_password,
        )


async def authenticate_user(email: str, password: str) -> Optional[User]:
    """
    Authenticate a user with e-mail and password.

    Returns:
        User if authentication successful, None otherwise
    """
    user = await get_user(email)

    if not user:
        return None

    if not verify_password(password, user.hashed_password):
        return None

    if user.disabled:
        return None

    return User(**user.model_dump(exclude={"hashed_password"}))


class Token(BaseModel):
    """Access token response returned by the login endpoint."""
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type (always 'bearer')")
