"""
Service layer for business logic.

This module provides service classes that encapsulate business logic,
separating it from HTTP handling in routes and data access in repositories.
"""

from league_api.services.base import (
    BaseService,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from league_api.services.league_service import LeagueService, league_service
from league_api.services.team_service import TeamService, team_service

__all__ = [
    'BaseService',
    'ServiceError',
    'NotFoundError',
    'ValidationError',
    'LeagueService',
    'league_service',
    'TeamService',
    'team_service',
]
