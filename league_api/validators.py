"""
Request validation for the league and team endpoints.

Each parser turns an untyped JSON body / URL params into a typed request
object, raising ValidationError before any store call is made.
"""

from typing import Any, Mapping, Optional

from league_api.constants import (
    LEAGUE_FIELDS,
    MSG_BODY_MISSING,
    MSG_BODY_OR_PARAMS_MISSING,
    MSG_INVALID_TYPES,
    MSG_MISSING_PROPERTIES,
    MSG_PARAMS_MISSING,
    MSG_TEAM_FIELDS_REQUIRED,
)
from league_api.dataclasses import CreateLeagueRequest, UpdateTeamNameRequest
from league_api.services.base import ValidationError


def parse_create_league(payload: Any) -> CreateLeagueRequest:
    """Validate a create-league body.

    All four fields are required: a single falsy field rejects the request.

    Args:
        payload: Decoded JSON body (None when absent or not JSON).

    Returns:
        CreateLeagueRequest.

    Raises:
        ValidationError: If the body is missing, a field is missing or a
            field is not a string.
    """
    if payload is None or not isinstance(payload, Mapping):
        raise ValidationError(MSG_BODY_MISSING)

    values = [payload.get(f) for f in LEAGUE_FIELDS]
    if not all(values):
        raise ValidationError(MSG_MISSING_PROPERTIES)
    if not all(isinstance(v, str) for v in values):
        raise ValidationError(MSG_INVALID_TYPES)

    league_id, name, description, admin_id = values
    return CreateLeagueRequest(
        id=league_id,
        name=name,
        description=description,
        admin_id=admin_id
    )


def parse_league_id(params: Optional[Mapping[str, Any]]) -> str:
    """Validate the leagueId path parameter.

    Raises:
        ValidationError: If leagueId is missing or empty.
    """
    league_id = params.get('leagueId') if params else None
    if not isinstance(league_id, str) or not league_id:
        raise ValidationError(MSG_PARAMS_MISSING)
    return league_id


def parse_update_team_name(
    params: Optional[Mapping[str, Any]],
    payload: Any
) -> UpdateTeamNameRequest:
    """Validate a rename-team request.

    Args:
        params: URL params holding teamId.
        payload: Decoded JSON body holding name.

    Returns:
        UpdateTeamNameRequest.

    Raises:
        ValidationError: If params or body are absent, a field is missing
            or a field is not a string.
    """
    if params is None or payload is None or not isinstance(payload, Mapping):
        raise ValidationError(MSG_BODY_OR_PARAMS_MISSING)

    team_id = params.get('teamId')
    name = payload.get('name')
    if not team_id or not name:
        raise ValidationError(MSG_TEAM_FIELDS_REQUIRED)
    if not isinstance(team_id, str) or not isinstance(name, str):
        raise ValidationError(MSG_INVALID_TYPES)

    return UpdateTeamNameRequest(team_id=team_id, name=name)
