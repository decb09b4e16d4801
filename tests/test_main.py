"""
Tests for the command line entry point.
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import main


class TestMain:
    """Tests for main()."""

    def test_default_tournament(self, capsys):
        """The packaged 2023 field prints by default."""
        assert main.main([]) == 0
        out = capsys.readouterr().out
        assert "Bracket 'my bracket' for NCAA Tournament 2023" in out
        assert "Regions: South, East, Midwest, West" in out
        assert "G0: (1) Alabama vs (16) A&M CC -> G32" in out
        assert "G1: (8) Maryland vs (9) West Virginia -> G32" in out
        assert "G62: Winner G60 vs Winner G61" in out
        assert "# Championship" in out

    def test_bracket_name(self, data_dir, capsys):
        """Bracket name and data directory come from the command line."""
        assert main.main(['test', '--data-dir', data_dir, '--bracket-name', 'office pool']) == 0
        out = capsys.readouterr().out
        assert "Bracket 'office pool' for Test Tournament" in out

    def test_list(self, data_dir, capsys):
        """--list prints the available identifiers."""
        assert main.main(['--list', '--data-dir', data_dir]) == 0
        assert capsys.readouterr().out.split() == ['broken', 'test']

    def test_unknown_tournament(self, data_dir, capsys):
        """Unknown ids exit with status 1."""
        assert main.main(['1999', '--data-dir', data_dir]) == 1
        assert "field not found for '1999'" in capsys.readouterr().err

    def test_invalid_field(self, data_dir, capsys):
        """Invalid fields exit with status 1."""
        assert main.main(['broken', '--data-dir', data_dir]) == 1
        assert "invalid field for 'broken'" in capsys.readouterr().err

    @pytest.mark.parametrize('tournament_id', ['syntax', 'toplevel_list', 'string_entry'])
    def test_malformed_yaml(self, malformed_dir, capsys, tournament_id):
        """Unreadable field files exit with status 1 and a message."""
        assert main.main([tournament_id, '--data-dir', malformed_dir]) == 1
        assert f"invalid field for '{tournament_id}'" in capsys.readouterr().err

    def test_parse_args_defaults(self):
        """Defaults cover the common case."""
        args = main.parse_args([])
        assert args.tournament == '2023'
        assert args.bracket_name == 'my bracket'
        assert args.list is False
