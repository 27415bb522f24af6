"""
Database module - MongoDB connection and database definitions.
"""
from akira.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from akira.database.databases import akira_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "akira_db",
]
