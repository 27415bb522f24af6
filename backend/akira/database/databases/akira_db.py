"""
Akira database configuration.
Stores customer identity, credentials and roles.

The database name comes from ``settings.mongo_db_name``.
"""


class Collections:
    """Collection names in akira_db."""
    USERS = "users"
    ROLES = "roles"
