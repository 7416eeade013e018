"""
Health probe functions for dependency checks.

Each probe returns True when healthy and never raises.
"""

import asyncio
import logging

from sqlalchemy import text

from gspro.core.database import async_session_maker

logger = logging.getLogger(__name__)


async def check_database(timeout_seconds: float = 2.0) -> bool:
    """
    Check database connectivity.

    Executes ``SELECT 1`` under a timeout so an unreachable database
    cannot hang the readiness probe.

    Args:
        timeout_seconds: Maximum time to wait for response (default: 2.0)

    Returns:
        True if database is reachable and healthy, False otherwise
    """
    try:
        async with asyncio.timeout(timeout_seconds):
            async with async_session_maker() as session:
                result = await session.execute(text("SELECT 1"))
                result.scalar()
                return True

    except asyncio.TimeoutError:
        logger.warning("Database probe timed out", extra={"timeout_seconds": timeout_seconds})
        return False
    except Exception as exc:
        logger.warning("Database probe failed: %s", exc)
        return False
