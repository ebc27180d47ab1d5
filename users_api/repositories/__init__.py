"""
Persistence adapters.

Services depend on the repository rather than touching the JSON file.
"""

from .json_storage import JsonUserRepository, StorageError, UserTransaction

__all__ = ["JsonUserRepository", "StorageError", "UserTransaction"]
