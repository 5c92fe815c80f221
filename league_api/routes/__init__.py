"""
Routes package for the league API.

This module registers all blueprints and provides a clean interface
for the application to import routes.
"""

from flask import Blueprint

# Create blueprints
main_bp = Blueprint('main', __name__)
api_bp = Blueprint('api', __name__)

# Import route handlers to register them with blueprints
# These imports must come after blueprint creation to avoid circular imports
from league_api.routes import main  # noqa: E402,F401
from league_api.routes.api import leagues, teams  # noqa: E402,F401

__all__ = ['main_bp', 'api_bp']
