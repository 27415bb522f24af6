"""
MongoDB-backed user and role stores.
"""
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from akira.core.exceptions import DuplicateEmailError
from akira.database.databases.akira_db import Collections
from akira.models.user import Role, RoleName, User


def _to_model_doc(doc: dict) -> dict:
    doc["_id"] = str(doc["_id"])
    return doc


class MongoUserRepository:
    """User store on the akira_db.users collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[Collections.USERS]

    async def exists_by_email(self, email: str) -> bool:
        existing = await self.collection.find_one({"email": email}, {"_id": 1})
        return existing is not None

    async def find_by_email(self, email: str) -> Optional[User]:
        user_doc = await self.collection.find_one({"email": email})

        if not user_doc:
            return None

        return User(**_to_model_doc(user_doc))

    async def find_by_id(self, user_id: str) -> Optional[User]:
        try:
            object_id = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None

        user_doc = await self.collection.find_one({"_id": object_id})

        if not user_doc:
            return None

        return User(**_to_model_doc(user_doc))

    async def save(self, user: User) -> User:
        """
        Insert the user when it has no id yet, replace it otherwise.

        Returns:
            The saved user, carrying its id

        Raises:
            DuplicateEmailError: If the unique email index rejects the write
        """
        user_doc = user.model_dump(exclude={"id"})

        try:
            if user.id is None:
                result = await self.collection.insert_one(user_doc)
                return user.model_copy(update={"id": str(result.inserted_id)})

            await self.collection.replace_one({"_id": ObjectId(user.id)}, user_doc)
            return user
        except DuplicateKeyError:
            raise DuplicateEmailError(user.email)


class MongoRoleRepository:
    """Role store on the akira_db.roles collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[Collections.ROLES]

    async def find_by_name(self, name: RoleName) -> Optional[Role]:
        role_doc = await self.collection.find_one({"name": RoleName(name).value})

        if not role_doc:
            return None

        return Role(**_to_model_doc(role_doc))
