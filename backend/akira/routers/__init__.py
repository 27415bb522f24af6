"""
API Routers module.
"""
from akira.routers import auth, health

__all__ = ["auth", "health"]
