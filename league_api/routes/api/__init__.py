"""
API routes package for the league API.

Contains the league and team endpoints.
"""

# Import submodules to register routes
from league_api.routes.api import leagues, teams

__all__ = ['leagues', 'teams']
