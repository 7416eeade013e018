"""
User repository.
"""

from typing import Optional

from sqlalchemy import select

from gspro.core.errors import ConflictError
from gspro.core.security import get_password_hash
from gspro.models.user import User
from gspro.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Data access for ``usuarios``."""

    model = User
    entity_name = "User"

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email.strip().lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_user(
        self,
        email: str,
        name: str,
        password: str,
        role: str = "vendedor",
    ) -> User:
        """
        Create a user with a bcrypt-hashed password.

        Raises:
            ConflictError: If the e-mail is already registered
        """
        if await self.get_by_email(email) is not None:
            raise ConflictError(f"E-mail já cadastrado: {email}")

        user = User(
            email=email.strip().lower(),
            name=name,
            hashed_password=get_password_hash(password),
            role=role,
            is_active=True,
        )
        return await self.add(user)
