"""
A tournament: one year's validated field of 64 teams.

Teams are ordered by region and seed exactly as the roster source lists them,
so a team's position in `teams` is the identifier games refer to.
"""
import logging
from typing import List, Optional

from ncaa.bracket import Bracket, build
from ncaa.models import Team
from ncaa.roster import regions_of
from ncaa.sources import RosterSource, default_source

logger = logging.getLogger(__name__)


class Tournament:
    def __init__(self, tournament_id: str, source: Optional[RosterSource] = None):
        self.id = tournament_id
        self.source = source if source is not None else default_source()
        self.teams: List[Team] = []
        self.name = tournament_id
        self.load()

    def load(self):
        """Load and validate the field; errors from the source propagate."""
        logger.info("Loading tournament '%s'...", self.id)
        self.name, self.teams = self.source.load(self.id)
        for team in self.teams:
            logger.debug("   Team: %s (%s region, %d seed)", team.name, team.region, team.seed)

    @property
    def regions(self) -> List[str]:
        return regions_of(self.teams)

    def create_bracket(self, bracket_name: str) -> Bracket:
        """Create a new bracket; each call returns independent games."""
        logger.info("Populating bracket '%s' using tournament '%s'", bracket_name, self.name)
        return build(self.teams, name=bracket_name, tournament=self)

    def __repr__(self):
        return f"Tournament(id={self.id}, name={self.name}, teams={len(self.teams)})"
