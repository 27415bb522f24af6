"""
Store adapters for the credential service.
"""
from akira.repositories.user_repository import MongoRoleRepository, MongoUserRepository

__all__ = ["MongoRoleRepository", "MongoUserRepository"]
