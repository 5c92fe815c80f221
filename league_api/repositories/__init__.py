"""
Repository layer for document store access.

This module provides repository classes that abstract the document store,
providing a clean interface for data access separate from business logic.
"""

from league_api.repositories.base import (
    DocumentExistsError,
    DocumentNotFoundError,
    DocumentRepository,
    QueryError,
    StoreError,
)
from league_api.repositories.league_repository import LeagueRepository

__all__ = [
    'DocumentRepository',
    'LeagueRepository',
    'StoreError',
    'DocumentExistsError',
    'DocumentNotFoundError',
    'QueryError',
]
