"""
Database definitions and collection constants.
"""
from akira.database.databases import akira_db

__all__ = ["akira_db"]
