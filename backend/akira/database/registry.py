"""
Database bootstrap.
Creates indexes and seeds the roles the application depends on.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from akira.database.databases.akira_db import Collections
from akira.models.user import RoleName

logger = logging.getLogger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create necessary indexes for the application database."""
    # Email uniqueness is enforced here; the service pre-check alone is racy
    await db[Collections.USERS].create_index("email", unique=True)
    await db[Collections.ROLES].create_index("name", unique=True)


async def seed_roles(db: AsyncIOMotorDatabase) -> None:
    """Ensure every known role exists in the roles collection."""
    roles = db[Collections.ROLES]
    for role_name in RoleName:
        result = await roles.update_one(
            {"name": role_name.value},
            {"$setOnInsert": {"name": role_name.value}},
            upsert=True,
        )
        if result.upserted_id is not None:
            logger.info(f"Seeded role {role_name.value}")
