"""
Tests for league API endpoints.

Tests cover:
- League creation and its validation
- Listing the users of a league
- Generic 500 responses on store failures
"""

from unittest.mock import patch

import pytest

from league_api import db
from league_api.dataclasses import QueryResult
from league_api.repositories import QueryError, StoreError
from league_api.services.league_service import league_service

VALID_LEAGUE = {
    'id': 'l1',
    'name': 'Sunday League',
    'description': 'Five-a-side on Sundays',
    'adminId': 'admin-1',
}


class TestCreateLeague:
    """Tests for POST /leagues."""

    def test_create_league(self, client, store):
        """Test that a valid league is stored and acknowledged."""
        response = client.post('/leagues', json=VALID_LEAGUE)

        assert response.status_code == 200
        assert response.get_json() == {'id': 'l1', 'cas': 1}
        assert store.get('l1').content == {**VALID_LEAGUE, 'type': 'mpg_league'}

    def test_create_same_league_twice(self, client, store):
        """Test that a second create with the same id fails with 500."""
        assert client.post('/leagues', json=VALID_LEAGUE).status_code == 200

        response = client.post('/leagues', json={**VALID_LEAGUE, 'name': 'Other'})

        assert response.status_code == 500
        assert response.get_json() == {
            'error': 'An error occurred while creating the league'
        }
        assert store.get('l1').content['name'] == 'Sunday League'

    def test_missing_body(self, client, count_documents):
        """Test that a request without a body is rejected."""
        response = client.post('/leagues')

        assert response.status_code == 400
        assert response.get_json() == {'error': 'Request body is missing'}
        assert count_documents() == 0

    def test_non_json_body(self, client, count_documents):
        """Test that a non-JSON body counts as missing."""
        response = client.post('/leagues', data='id=l1', content_type='text/plain')

        assert response.status_code == 400
        assert response.get_json() == {'error': 'Request body is missing'}
        assert count_documents() == 0

    @pytest.mark.parametrize('field', ['id', 'name', 'description', 'adminId'])
    def test_missing_field(self, client, count_documents, field):
        """Test that any one missing field is a 400 and nothing is written."""
        payload = {k: v for k, v in VALID_LEAGUE.items() if k != field}
        response = client.post('/leagues', json=payload)

        assert response.status_code == 400
        assert response.get_json() == {'error': 'Missing required properties'}
        assert count_documents() == 0

    def test_empty_string_field(self, client, count_documents):
        """Test that an empty string counts as missing."""
        response = client.post('/leagues', json={**VALID_LEAGUE, 'description': ''})

        assert response.status_code == 400
        assert count_documents() == 0

    def test_wrong_type(self, client, count_documents):
        """Test that a non-string field is rejected."""
        response = client.post('/leagues', json={**VALID_LEAGUE, 'id': 123})

        assert response.status_code == 400
        assert response.get_json() == {'error': 'Invalid data type for properties'}
        assert count_documents() == 0

    def test_store_failure_is_generic(self, client):
        """Test that store errors are not leaked to the client."""
        with patch.object(
            league_service.league_repo, 'insert_league',
            side_effect=StoreError('couchbase://10.0.0.5 unreachable')
        ):
            response = client.post('/leagues', json=VALID_LEAGUE)

        assert response.status_code == 500
        assert b'10.0.0.5' not in response.data
        assert response.get_json() == {
            'error': 'An error occurred while creating the league'
        }

    def test_unexpected_failure_is_generic(self, client):
        """Test that a non-store exception inside the handler is a generic 500."""
        with patch.object(
            league_service, 'create_league', side_effect=KeyError('secret')
        ):
            response = client.post('/leagues', json=VALID_LEAGUE)

        assert response.status_code == 500
        assert response.get_json() == {
            'error': 'An error occurred while creating the league'
        }


class TestGetUsersFromLeague:
    """Tests for GET /leagues/<leagueId>/users."""

    def test_users_found(self, client, sample_league):
        """Test that usersTeams values are returned as names."""
        response = client.get('/leagues/league-1/users')

        assert response.status_code == 200
        assert response.get_json() == {
            'users': [{'name': 'Alice'}, {'name': 'Bob'}]
        }

    def test_unknown_league(self, client, sample_league):
        """Test that an unknown league responds 204."""
        response = client.get('/leagues/unknown/users')

        assert response.status_code == 204
        assert response.data == b''

    def test_league_without_users_teams(self, client):
        """Test that a league lacking usersTeams responds 204."""
        client.post('/leagues', json=VALID_LEAGUE)

        response = client.get('/leagues/l1/users')

        assert response.status_code == 204

    def test_created_league_is_visible(self, client, store):
        """Test that a league created through the API can be listed once seeded."""
        client.post('/leagues', json=VALID_LEAGUE)
        league = store.get('l1').content
        store.replace('l1', {**league, 'usersTeams': {'u9': 'Zoe'}})
        db.session.commit()

        response = client.get('/leagues/l1/users')

        assert response.status_code == 200
        assert response.get_json() == {'users': [{'name': 'Zoe'}]}

    def test_empty_first_row_ignores_later_rows(self, client):
        """Test that an empty first row responds 204 even if later rows have users."""
        rows = QueryResult(rows=[{}, {'usersTeams': {'u1': 'Alice'}}])
        with patch.object(league_service.league_repo, 'find_users_teams', return_value=rows):
            response = client.get('/leagues/l1/users')

        assert response.status_code == 204

    def test_only_first_row_counts(self, client):
        """Test that users come from the first row only."""
        rows = QueryResult(rows=[
            {'usersTeams': {'u1': 'Alice', 'u2': 'Bob'}},
            {'usersTeams': {'u3': 'Carol'}},
        ])
        with patch.object(league_service.league_repo, 'find_users_teams', return_value=rows):
            response = client.get('/leagues/l1/users')

        assert response.status_code == 200
        assert response.get_json() == {
            'users': [{'name': 'Alice'}, {'name': 'Bob'}]
        }

    def test_blank_league_id(self, client, sample_league):
        """Test that a whitespace league id is looked up and matches nothing."""
        response = client.get('/leagues/%20/users')

        assert response.status_code == 204

    def test_query_failure(self, client):
        """Test that a lookup failure is a generic 500."""
        with patch.object(
            league_service.league_repo, 'find_users_teams',
            side_effect=QueryError('bad N1QL')
        ):
            response = client.get('/leagues/l1/users')

        assert response.status_code == 500
        assert response.get_json() == {
            'error': 'Error occurred while retrieving users from a league'
        }
