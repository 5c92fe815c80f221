"""
Team API endpoints.
"""

from flask import jsonify

from league_api.constants import MSG_TEAM_UPDATED, MSG_UPDATE_TEAM_FAILED
from league_api.routes import api_bp
from league_api.services.team_service import team_service
from league_api.utils import get_json_body, handle_errors
from league_api.validators import parse_update_team_name


@api_bp.route('/teams/<team_id>', methods=['PATCH'])
@handle_errors(MSG_UPDATE_TEAM_FAILED)
def update_team_name(team_id: str):
    """Rename a team from {name}."""
    rename_request = parse_update_team_name({'teamId': team_id}, get_json_body())
    team_service.rename_team(rename_request)
    return jsonify({'message': MSG_TEAM_UPDATED}), 200
