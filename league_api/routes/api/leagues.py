"""
League API endpoints.

Handles league creation and the user list of a league.
"""

from flask import jsonify

from league_api.constants import MSG_CREATE_LEAGUE_FAILED, MSG_LIST_USERS_FAILED
from league_api.routes import api_bp
from league_api.services.league_service import league_service
from league_api.utils import get_json_body, handle_errors
from league_api.validators import parse_create_league, parse_league_id


@api_bp.route('/leagues', methods=['POST'])
@handle_errors(MSG_CREATE_LEAGUE_FAILED)
def create_league():
    """Create a new league from {id, name, description, adminId}."""
    league_request = parse_create_league(get_json_body())
    return jsonify(league_service.create_league(league_request))


@api_bp.route('/leagues/<league_id>/users', methods=['GET'])
@handle_errors(MSG_LIST_USERS_FAILED)
def get_users_from_league(league_id: str):
    """List the users of a league.

    Responds 204 when the league has no users (or does not exist).
    """
    league_id = parse_league_id({'leagueId': league_id})

    users = league_service.get_users_from_league(league_id)
    if users is None:
        return jsonify({'users': []}), 204
    return jsonify({'users': users}), 200
