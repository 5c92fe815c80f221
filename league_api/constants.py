"""
Centralized constants for the league API.

Document discriminators and the fixed user-facing messages returned by
the endpoints live here.
"""

from typing import Final

# ==================== DOCUMENT TYPES ====================
LEAGUE_DOC_TYPE: Final[str] = 'mpg_league'

# Field holding the per-league users/teams mapping
USERS_TEAMS_FIELD: Final[str] = 'usersTeams'

# ==================== CREATE LEAGUE ====================
LEAGUE_FIELDS: Final[tuple] = ('id', 'name', 'description', 'adminId')

MSG_BODY_MISSING: Final[str] = 'Request body is missing'
MSG_MISSING_PROPERTIES: Final[str] = 'Missing required properties'
MSG_INVALID_TYPES: Final[str] = 'Invalid data type for properties'
MSG_CREATE_LEAGUE_FAILED: Final[str] = 'An error occurred while creating the league'

# ==================== LIST USERS ====================
MSG_PARAMS_MISSING: Final[str] = 'Request params is missing'
MSG_LIST_USERS_FAILED: Final[str] = 'Error occurred while retrieving users from a league'

# ==================== UPDATE TEAM ====================
MSG_BODY_OR_PARAMS_MISSING: Final[str] = 'Request body or request params is undefined'
MSG_TEAM_FIELDS_REQUIRED: Final[str] = 'teamId and name are required'
MSG_TEAM_NOT_FOUND: Final[str] = 'Team not found'
MSG_UPDATE_TEAM_FAILED: Final[str] = 'An error occurred while updating team'
MSG_TEAM_UPDATED: Final[str] = 'Team name updated successfully'
