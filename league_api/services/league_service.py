"""
League service for managing league operations.

Encapsulates all business logic related to:
- League creation
- Listing the users of a league
"""

from typing import Any, Dict, List, Optional

from league_api.constants import MSG_CREATE_LEAGUE_FAILED, MSG_LIST_USERS_FAILED
from league_api.dataclasses import CreateLeagueRequest
from league_api.league_documents import build_league_document, users_from_rows
from league_api.logger import get_logger, log_audit
from league_api.repositories.league_repository import LeagueRepository
from league_api.services.base import BaseService

logger = get_logger(__name__)


class LeagueService(BaseService):
    """Service for league-related operations."""

    def __init__(self, league_repo: Optional[LeagueRepository] = None):
        """Initialize service with optional repository injection.

        Args:
            league_repo: LeagueRepository instance (defaults to new instance).
        """
        self.league_repo = league_repo or LeagueRepository()

    def create_league(self, request: CreateLeagueRequest) -> Dict[str, Any]:
        """Create a new league.

        The league id is the storage key, so a second create with the same
        id fails.

        Args:
            request: Validated create-league request.

        Returns:
            Insert acknowledgment.

        Raises:
            ServiceError: 500 if the insert fails for any reason.
        """
        league = build_league_document(request)

        with self.transaction(MSG_CREATE_LEAGUE_FAILED):
            result = self.league_repo.insert_league(league)

        logger.info(f"Created league: {request.name} (ID: {request.id})")
        log_audit('league_created', 'league', request.id, {'adminId': request.admin_id})
        return result.to_dict()

    def get_users_from_league(self, league_id: str) -> Optional[List[Dict[str, Any]]]:
        """Get the users of a league.

        Args:
            league_id: ID of the league.

        Returns:
            List of ``{'name': ...}`` items, or None when the league has
            no users.

        Raises:
            ServiceError: 500 if the lookup fails.
        """
        with self.store_errors(MSG_LIST_USERS_FAILED):
            result = self.league_repo.find_users_teams(league_id)

        return users_from_rows(result.rows)


# Singleton instance for convenience
league_service = LeagueService()
