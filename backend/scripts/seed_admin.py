"""
Seed the admin user for dashboard authentication.

Creates a default admin with e-mail "admin@gspro.com.br" and password
"changeme123". Running it again leaves the existing user untouched.

Usage:
    python scripts/seed_admin.py

Security:
    IMPORTANT: Change the default password immediately after first login!
    The default credentials are publicly known and insecure.
"""

import asyncio
import sys
from pathlib import Path

# Add backend directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from gspro.core.database import async_session_maker, engine
from gspro.models.base import Base
from gspro.repositories.user import UserRepository


ADMIN_EMAIL = "admin@gspro.com.br"
ADMIN_PASSWORD = "changeme123"


async def seed_admin() -> None:
    """Create the default admin user if it doesn't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_maker() as session:
        try:
            users = UserRepository(session)
            if await users.get_by_email(ADMIN_EMAIL):
                print("Admin user already exists. Skipping...")
                return

            await users.create_user(
                email=ADMIN_EMAIL,
                name="Administrador",
                password=ADMIN_PASSWORD,
                role="admin",
            )
            await session.commit()

            print("Admin user created successfully!")
            print(f"E-mail: {ADMIN_EMAIL}")
            print(f"Password: {ADMIN_PASSWORD}")
            print("")
            print("WARNING: Please change this password immediately after first login!")

        except Exception as e:
            await session.rollback()
            print(f"Error creating admin user: {e}")
            raise


if __name__ == "__main__":
    print("Seeding admin user...")
    asyncio.run(seed_admin())
    print("Done!")
