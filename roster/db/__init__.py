"""Storage utilities for Roster.

This module contains:
- Redis connection handle
- Store error hierarchy
"""

from roster.db.errors import (
    NotFoundError,
    StorageUnavailable,
    StoreError,
    ValidationError,
)

__all__ = [
    "StoreError",
    "StorageUnavailable",
    "NotFoundError",
    "ValidationError",
]
