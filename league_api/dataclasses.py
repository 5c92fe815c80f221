"""
Data classes for structured data in the league API.

Provides typed shapes for document store results and validated request bodies.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class MutationResult:
    """Acknowledgment returned by an insert, replace or upsert."""
    key: str
    cas: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON acknowledgment sent to clients."""
        return {'id': self.key, 'cas': self.cas}


@dataclass
class GetResult:
    """A fetched document. `content` is a private copy the caller may mutate."""
    content: Any
    cas: int


@dataclass
class QueryResult:
    """Rows produced by a document query."""
    rows: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class CreateLeagueRequest:
    """Validated body of a create-league request."""
    id: str
    name: str
    description: str
    admin_id: str


@dataclass(frozen=True)
class UpdateTeamNameRequest:
    """Validated params and body of a rename-team request."""
    team_id: str
    name: str
