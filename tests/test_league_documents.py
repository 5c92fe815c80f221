"""
Tests for the league document shaping functions.
"""

from league_api.dataclasses import CreateLeagueRequest
from league_api.league_documents import (
    build_league_document,
    rename_team_document,
    users_from_rows,
)


class TestBuildLeagueDocument:
    """Tests for build_league_document."""

    def test_builds_league_with_discriminator(self):
        """Test that the league document carries all fields and the type."""
        request = CreateLeagueRequest(
            id='l1', name='Sunday League', description='Weekly', admin_id='a1'
        )
        assert build_league_document(request) == {
            'id': 'l1',
            'type': 'mpg_league',
            'adminId': 'a1',
            'name': 'Sunday League',
            'description': 'Weekly',
        }


class TestUsersFromRows:
    """Tests for users_from_rows."""

    def test_maps_values_of_first_row(self):
        """Test that each usersTeams value becomes a name entry."""
        rows = [{'usersTeams': {'u1': 'Alice', 'u2': 'Bob'}}]
        assert users_from_rows(rows) == [{'name': 'Alice'}, {'name': 'Bob'}]

    def test_ignores_keys(self):
        """Test that mapping keys never appear in the output."""
        users = users_from_rows([{'usersTeams': {'u1': 'Alice'}}])
        assert users == [{'name': 'Alice'}]
        assert 'u1' not in str(users)

    def test_only_first_row_is_used(self):
        """Test that later rows are ignored when the first row has a mapping."""
        rows = [
            {'usersTeams': {'u1': 'Alice', 'u2': 'Bob'}},
            {'usersTeams': {'u3': 'Carol'}},
        ]
        assert users_from_rows(rows) == [{'name': 'Alice'}, {'name': 'Bob'}]

    def test_no_rows_means_no_users(self):
        """Test that an empty result yields None."""
        assert users_from_rows([]) is None
        assert users_from_rows(None) is None

    def test_empty_first_row_means_no_users(self):
        """Test that an empty first row wins over non-empty later rows."""
        rows = [{}, {'usersTeams': {'u1': 'Alice'}}]
        assert users_from_rows(rows) is None

    def test_empty_mapping_gives_empty_list(self):
        """Test that an empty usersTeams mapping is still a users-found result."""
        assert users_from_rows([{'usersTeams': {}}]) == []

    def test_list_value_is_flattened(self):
        """Test that a list of mappings contributes its first element only."""
        rows = [{'usersTeams': [{'u1': 'Alice'}, {'u2': 'Bob'}]}]
        assert users_from_rows(rows) == [{'name': 'Alice'}]

    def test_preserves_value_shapes(self):
        """Test that non-string values are passed through unchanged."""
        rows = [{'usersTeams': {'u1': {'team': 'Reds'}, 'u2': 7}}]
        assert users_from_rows(rows) == [{'name': {'team': 'Reds'}}, {'name': 7}]

    def test_scalar_users_teams_gives_empty_list(self):
        """Test that a non-mapping usersTeams value yields no users."""
        assert users_from_rows([{'usersTeams': 'Alice'}]) == []
        assert users_from_rows([{'usersTeams': None}]) == []

    def test_accepts_any_iterable(self):
        """Test that rows may be a generator."""
        rows = (row for row in [{'usersTeams': {'u1': 'Alice'}}])
        assert users_from_rows(rows) == [{'name': 'Alice'}]


class TestRenameTeamDocument:
    """Tests for rename_team_document."""

    def test_replaces_name_and_keeps_other_fields(self):
        """Test that only the name changes."""
        team = {'id': 't1', 'name': 'Old', 'players': ['p1']}
        assert rename_team_document(team, 'New') == {
            'id': 't1', 'name': 'New', 'players': ['p1']
        }

    def test_does_not_mutate_input(self):
        """Test that the input document is left untouched."""
        team = {'id': 't1', 'name': 'Old'}
        rename_team_document(team, 'New')
        assert team['name'] == 'Old'

    def test_adds_name_when_absent(self):
        """Test that a document without a name gains one."""
        assert rename_team_document({'id': 't1'}, 'New') == {'id': 't1', 'name': 'New'}
