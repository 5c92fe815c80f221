"""
Main routes for the league API.

Handles:
- API landing page
- Health check
"""

from datetime import datetime, timezone

from flask import current_app, jsonify, url_for
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from league_api import db
from league_api.logger import get_db_logger
from league_api.routes import main_bp

logger = get_db_logger()

INDEX_PAGE = """<h1>API for managing leagues</h1>
An API for managing leagues and teams backed by a document store.
<ul>
  <li>POST <code>{prefix}/leagues</code>: create a league</li>
  <li>GET <code>{prefix}/leagues/&lt;leagueId&gt;/users</code>: list the users of a league</li>
  <li>PATCH <code>{prefix}/teams/&lt;teamId&gt;</code>: rename a team</li>
  <li>GET <a href="{health}">{health}</a>: health check</li>
</ul>"""


@main_bp.route('/')
def index():
    """Landing page describing the API."""
    prefix = current_app.config.get('API_PREFIX', '').rstrip('/')
    return INDEX_PAGE.format(prefix=prefix, health=url_for('main.health_check'))


@main_bp.route('/health')
def health_check():
    """Health check endpoint for load balancers and orchestration.

    Returns:
        JSON with health status and document store connectivity
    """
    try:
        db.session.execute(text('SELECT 1'))
        return jsonify({
            'status': 'healthy',
            'database': 'connected',
            'timestamp': datetime.now(timezone.utc).isoformat()
        })
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        return jsonify({
            'status': 'unhealthy',
            'database': 'disconnected'
        }), 503
