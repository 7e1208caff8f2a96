from typing import Annotated

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from tracker.database import get_database
from tracker.users.repository import MongoUserRepository, UserRepositoryInterface


async def get_user_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> UserRepositoryInterface:
    """Dependency to get the user repository backed by MongoDB."""
    return MongoUserRepository(db)
