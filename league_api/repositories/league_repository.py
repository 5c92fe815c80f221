"""
League repository for league document access.

Provides the usersTeams lookup for league documents.
"""

from typing import Any, Dict

from sqlalchemy import bindparam, select

from league_api.constants import LEAGUE_DOC_TYPE, USERS_TEAMS_FIELD
from league_api.dataclasses import MutationResult, QueryResult
from league_api.models import Document
from league_api.repositories.base import DocumentRepository

# usersTeams of the league with a given id; the id is bound at execution time
USERS_TEAMS_QUERY = (
    select(Document.content)
    .where(
        Document.key == bindparam('leagueId'),
        Document.type == LEAGUE_DOC_TYPE,
    )
)


class LeagueRepository(DocumentRepository):
    """Repository for league document operations."""

    def insert_league(self, league: Dict[str, Any]) -> MutationResult:
        """Insert a league document keyed by its id.

        Args:
            league: League document.

        Returns:
            MutationResult for the new league.
        """
        return self.insert(league['id'], league)

    def find_users_teams(self, league_id: str) -> QueryResult:
        """Get the usersTeams projection of a league.

        Args:
            league_id: ID of the league.

        Returns:
            QueryResult whose rows hold at most a usersTeams field.
        """
        return self.query(
            USERS_TEAMS_QUERY,
            {'leagueId': league_id},
            projection=[USERS_TEAMS_FIELD],
        )
