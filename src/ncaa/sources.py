"""
Roster sources: where tournament fields come from.

A source maps a tournament identifier (e.g. "2023") to its validated field of
64 teams. YAML files hold the bundled data:

    name: NCAA Tournament 2023
    teams:
      - {name: Alabama, region: South, seed: 1}
      ...
"""
import os
import logging
from typing import Dict, List, Sequence, Tuple

import yaml

from ncaa.models import Team
from ncaa.roster import load_teams, MalformedField

logger = logging.getLogger(__name__)

PACKAGE_DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')
DATA_DIR = os.environ.get('BRACKET_DATA_DIR', PACKAGE_DATA_DIR)


class RosterNotFound(LookupError):
    def __init__(self, tournament_id):
        self.tournament_id = tournament_id
        super().__init__(f"field not found for '{tournament_id}'")


class RosterSource:
    """Lookup of tournament fields by identifier."""

    def get_roster(self, tournament_id: str) -> List[Team]:
        raise NotImplementedError

    def get_name(self, tournament_id: str) -> str:
        """Display name of a tournament (defaults to its identifier)."""
        return tournament_id

    def load(self, tournament_id: str) -> Tuple[str, List[Team]]:
        """Display name and validated teams in one lookup."""
        return self.get_name(tournament_id), self.get_roster(tournament_id)

    def available(self) -> List[str]:
        raise NotImplementedError


class InMemoryRosterSource(RosterSource):
    def __init__(self, fields: Dict[str, Sequence]):
        self.fields = dict(fields)

    def get_roster(self, tournament_id: str) -> List[Team]:
        if tournament_id not in self.fields:
            raise RosterNotFound(tournament_id)
        return load_teams(self.fields[tournament_id])

    def available(self) -> List[str]:
        return sorted(self.fields)


class YamlRosterSource(RosterSource):
    """Reads fields from <directory>/<tournament_id>.yaml."""

    def __init__(self, directory: str):
        self.directory = directory

    def _file_path(self, tournament_id: str) -> str:
        return os.path.join(self.directory, f'{tournament_id}.yaml')

    def _load(self, tournament_id: str) -> dict:
        # Identifiers come from callers (CLI, URLs); keep them inside the directory
        if not tournament_id or os.path.basename(tournament_id) != tournament_id:
            raise RosterNotFound(tournament_id)
        path = self._file_path(tournament_id)
        if not os.path.exists(path):
            raise RosterNotFound(tournament_id)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning(f'Failed to parse {path}: {e}')
            raise MalformedField(path, 'not valid YAML')
        if not isinstance(data, dict):
            raise MalformedField(path, 'expected a mapping with name and teams')
        logger.debug("Loaded %s", path)
        return data

    def _teams(self, path: str, data: dict) -> List[Team]:
        teams = data.get('teams') or []
        if not isinstance(teams, list):
            raise MalformedField(path, 'teams must be a list')
        return load_teams(teams)

    def get_roster(self, tournament_id: str) -> List[Team]:
        data = self._load(tournament_id)
        return self._teams(self._file_path(tournament_id), data)

    def get_name(self, tournament_id: str) -> str:
        return self._load(tournament_id).get('name') or tournament_id

    def load(self, tournament_id: str) -> Tuple[str, List[Team]]:
        data = self._load(tournament_id)
        teams = self._teams(self._file_path(tournament_id), data)
        return data.get('name') or tournament_id, teams

    def available(self) -> List[str]:
        if not os.path.isdir(self.directory):
            return []
        return sorted(
            os.path.splitext(f)[0] for f in os.listdir(self.directory)
            if f.endswith('.yaml')
        )


def default_source() -> YamlRosterSource:
    """Source over $BRACKET_DATA_DIR, or the fields shipped with the package."""
    return YamlRosterSource(DATA_DIR)
