"""
Pytest fixtures for league API tests.

Provides fixtures for app, client, document store, and sample documents.
"""

import pytest
from sqlalchemy import func, select

from league_api import create_app, db
from league_api.models import Document
from league_api.repositories.base import DocumentRepository


@pytest.fixture
def app():
    """Create application for testing with a fresh document store."""
    app = create_app('testing')

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Test client for making requests."""
    return app.test_client()


@pytest.fixture
def store(app):
    """Document repository bound to the test database."""
    return DocumentRepository()


@pytest.fixture
def count_documents(app):
    """Return a callable counting the stored documents."""
    def _count():
        return db.session.execute(
            select(func.count()).select_from(Document)
        ).scalar_one()
    return _count


@pytest.fixture
def sample_league(app, store):
    """Create a league whose usersTeams holds two users."""
    league = {
        'id': 'league-1',
        'type': 'mpg_league',
        'adminId': 'admin-1',
        'name': 'Sunday League',
        'description': 'Five-a-side on Sundays',
        'usersTeams': {'u1': 'Alice', 'u2': 'Bob'},
    }
    store.insert(league['id'], league)
    db.session.commit()
    yield league


@pytest.fixture
def sample_team(app, store):
    """Create a team document."""
    team = {
        'id': 't1',
        'type': 'mpg_team',
        'name': 'Old Name',
        'leagueId': 'league-1',
        'players': ['p1', 'p2'],
        'budget': 500,
    }
    store.insert(team['id'], team)
    db.session.commit()
    yield team
