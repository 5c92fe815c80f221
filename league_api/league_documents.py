"""
Pure shaping functions for league and team documents.

Nothing here touches the store: these functions build the documents that
services persist and derive response payloads from query rows.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from league_api.constants import LEAGUE_DOC_TYPE, USERS_TEAMS_FIELD
from league_api.dataclasses import CreateLeagueRequest


def build_league_document(request: CreateLeagueRequest) -> Dict[str, str]:
    """Build the stored form of a new league.

    Args:
        request: Validated create-league request.

    Returns:
        League document keyed by the caller-supplied id.
    """
    return {
        'id': request.id,
        'type': LEAGUE_DOC_TYPE,
        'adminId': request.admin_id,
        'name': request.name,
        'description': request.description,
    }


def users_from_rows(rows: Optional[Iterable[Any]]) -> Optional[List[Dict[str, Any]]]:
    """Derive the user list of a league from usersTeams query rows.

    Only the first row decides whether any users exist. When it has at
    least one field, the usersTeams values of all rows are flattened
    (a list contributes its elements) and only the first flattened entry
    is used: each of its values becomes a ``{'name': value}`` item.
    Rows after the first are therefore ignored whenever the first row
    carries a mapping.

    Args:
        rows: Query rows, each shaped ``{'usersTeams': ...}`` or ``{}``.

    Returns:
        The user list, or None when the first row is missing or empty.

    Example:
        >>> users_from_rows([{'usersTeams': {'u1': 'Alice', 'u2': 'Bob'}}])
        [{'name': 'Alice'}, {'name': 'Bob'}]
        >>> users_from_rows([{}, {'usersTeams': {'u1': 'Alice'}}]) is None
        True
    """
    rows = list(rows or [])
    if not rows or not isinstance(rows[0], Mapping) or len(rows[0]) == 0:
        return None

    users_teams: List[Any] = []
    for row in rows:
        value = row.get(USERS_TEAMS_FIELD) if isinstance(row, Mapping) else None
        if isinstance(value, list):
            users_teams.extend(value)
        else:
            users_teams.append(value)

    first = users_teams[0] if users_teams else None
    return [{'name': value} for value in _values_of(first)]


def rename_team_document(team: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a copy of a team document with a new name.

    Every other field is carried over untouched.

    Args:
        team: Current team document.
        name: New team name.

    Returns:
        Updated team document.
    """
    updated = dict(team)
    updated['name'] = name
    return updated


def _values_of(entry: Any) -> List[Any]:
    if isinstance(entry, Mapping):
        return list(entry.values())
    if isinstance(entry, (list, tuple)):
        return list(entry)
    return []
