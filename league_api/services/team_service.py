"""
Team service for managing team operations.

Team documents are opaque: the service only rewrites their name.
"""

from typing import Optional

from league_api.constants import MSG_TEAM_NOT_FOUND, MSG_UPDATE_TEAM_FAILED
from league_api.dataclasses import UpdateTeamNameRequest
from league_api.league_documents import rename_team_document
from league_api.logger import get_logger, log_audit
from league_api.repositories.base import DocumentNotFoundError, DocumentRepository
from league_api.services.base import BaseService, NotFoundError

logger = get_logger(__name__)


class TeamService(BaseService):
    """Service for team-related operations."""

    def __init__(self, document_repo: Optional[DocumentRepository] = None):
        self.document_repo = document_repo or DocumentRepository()

    def rename_team(self, request: UpdateTeamNameRequest) -> None:
        """Rename a team.

        Fetches the whole team document, sets its name and writes the whole
        document back. There is no concurrency check between the fetch and
        the write, so concurrent renames of one team race and the last
        write wins.

        Args:
            request: Validated rename request.

        Raises:
            NotFoundError: If the team does not exist or its content is null.
            ServiceError: 500 if the fetch or replace fails otherwise.
        """
        with self.transaction(MSG_UPDATE_TEAM_FAILED):
            try:
                result = self.document_repo.get(request.team_id)
            except DocumentNotFoundError as e:
                raise NotFoundError(MSG_TEAM_NOT_FOUND) from e

            if result is None or result.content is None:
                raise NotFoundError(MSG_TEAM_NOT_FOUND)

            team = rename_team_document(result.content, request.name)
            self.document_repo.replace(request.team_id, team)

        logger.info(f"Renamed team {request.team_id} to {request.name}")
        log_audit('team_renamed', 'team', request.team_id, {'name': request.name})


# Singleton instance for convenience
team_service = TeamService()
