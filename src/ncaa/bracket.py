"""
64-team single elimination bracket construction.

All 63 games live in one flat list, addressed by index:

    round 0: games  0-31  (Round of 64)
    round 1: games 32-47  (Round of 32)
    round 2: games 48-55  (Sweet 16)
    round 3: games 56-59  (Elite 8)
    round 4: games 60-61  (Final Four)
    round 5: game  62     (Championship)

Games link to each other by index only. The winners of games 2j and 2j+1 of
a round meet in game j of the next round, so every game's prev/next links are
computed directly from its index.
"""
import logging
from bisect import bisect_right
from typing import List, Optional, Tuple

from ncaa.models import Game, Team, HOME, AWAY, to_team
from ncaa.roster import TEAM_COUNT, SEEDS_PER_REGION

logger = logging.getLogger(__name__)


# Seed pairings within a region, read as (home, away) pairs: 1v16, 8v9, 5v12, ...
REGION_MATCHUPS = [1, 16, 8, 9, 5, 12, 4, 13, 6, 11, 3, 14, 7, 10, 2, 15]

ROUND_STARTS = [0, 32, 48, 56, 60, 62, 63]
ROUND_COUNT = len(ROUND_STARTS) - 1
GAME_COUNT = ROUND_STARTS[-1]
CHAMPIONSHIP = GAME_COUNT - 1
GAMES_PER_REGION = SEEDS_PER_REGION // 2

ROUND_NAMES = [
    "Round of 64",
    "Round of 32",
    "Sweet 16",
    "Elite 8",
    "Final Four",
    "Championship",
]


class BracketError(ValueError):
    """Base class for errors raised while recording results."""


class GameNotReady(BracketError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"game {index}: participants not known yet")


class GameAlreadyCompleted(BracketError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"game {index}: already completed")


class InvalidScore(BracketError):
    def __init__(self, index: int, home_score, away_score):
        self.index = index
        self.score = (home_score, away_score)
        super().__init__(f"game {index}: invalid score {home_score}-{away_score}")


def round_start(round_num: int) -> int:
    """Index of the first game of a round."""
    return ROUND_STARTS[round_num]


def round_size(round_num: int) -> int:
    return ROUND_STARTS[round_num + 1] - ROUND_STARTS[round_num]


def round_of(index: int) -> int:
    """Round number of the game at a flat index."""
    if not 0 <= index < GAME_COUNT:
        raise IndexError(f"game index out of range: {index}")
    return bisect_right(ROUND_STARTS, index) - 1


def round_name(round_num: int) -> str:
    return ROUND_NAMES[round_num]


def matchup_seeds(local_game: int) -> Tuple[int, int]:
    """(home, away) seeds of a region's first-round game (0-7)."""
    return REGION_MATCHUPS[2 * local_game], REGION_MATCHUPS[2 * local_game + 1]


def first_round_positions(game_index: int) -> Tuple[int, int]:
    """Roster positions of the home and away teams of a round-0 game."""
    region = game_index // GAMES_PER_REGION
    home_seed, away_seed = matchup_seeds(game_index % GAMES_PER_REGION)
    base = region * SEEDS_PER_REGION
    return base + home_seed - 1, base + away_seed - 1


def _link_games() -> List[Game]:
    games = []
    for round_num in range(ROUND_COUNT):
        start = ROUND_STARTS[round_num]
        for local in range(round_size(round_num)):
            prev = None
            if round_num > 0:
                first = ROUND_STARTS[round_num - 1] + 2 * local
                prev = [first, first + 1]
            next_index = None
            if round_num < ROUND_COUNT - 1:
                next_index = ROUND_STARTS[round_num + 1] + local // 2
            games.append(Game(start + local, round_num, prev=prev, next=next_index))
    return games


class Bracket:
    """
    A named 63-game bracket for one tournament.

    Topology (round, index, prev, next) is fixed at construction. Teams,
    scores and completion flags are filled in as results are recorded.
    """

    def __init__(self, name, games, tournament=None, roster=None):
        self.name = name
        self.tournament = tournament
        self.roster: List[Team] = list(roster) if roster is not None else []
        self.games: List[Game] = games

    def games_in_round(self, round_num: int) -> List[Game]:
        return self.games[ROUND_STARTS[round_num]:ROUND_STARTS[round_num + 1]]

    def team(self, position: Optional[int]):
        """The Team at a roster position (None passes through)."""
        if position is None:
            return None
        if self.tournament is not None:
            return self.tournament.teams[position]
        if not self.roster:
            raise LookupError(f"bracket '{self.name}' has no roster")
        return self.roster[position]

    @property
    def champion(self) -> Optional[int]:
        return self.games[CHAMPIONSHIP].winner

    def record_result(self, index: int, home_score: int, away_score: int) -> Optional[int]:
        """
        Record a final score and advance the winner.

        The winner is written into the next game's home slot when this game
        is the first of its pair, otherwise into the away slot.

        Returns the winner's roster position.
        """
        if not 0 <= index < GAME_COUNT:
            raise IndexError(f"game index out of range: {index}")
        game = self.games[index]
        if game.completed:
            raise GameAlreadyCompleted(index)
        if not game.is_ready:
            raise GameNotReady(index)
        if home_score < 0 or away_score < 0 or home_score == away_score:
            raise InvalidScore(index, home_score, away_score)

        game.score = [home_score, away_score]
        game.completed = True
        winner = game.winner

        if game.next is not None:
            local = index - ROUND_STARTS[game.round]
            slot = HOME if local % 2 == 0 else AWAY
            self.games[game.next].teams[slot] = winner
        logger.debug("Bracket %s: game %d won by team %d", self.name, index, winner)
        return winner

    def to_dict(self):
        return {
            'name': self.name,
            'tournament': self.tournament.name if self.tournament is not None else None,
            'rounds': [
                {'round': r, 'name': ROUND_NAMES[r], 'games': [g.to_dict() for g in self.games_in_round(r)]}
                for r in range(ROUND_COUNT)
            ],
            'champion': self.champion,
        }

    def __repr__(self):
        return f"Bracket(name={self.name}, games={len(self.games)})"


def build(roster, name: str = "", tournament=None) -> Bracket:
    """
    Build a fully linked bracket from a validated roster.

    Assigns round-0 teams using the seed pairings of REGION_MATCHUPS; later
    rounds start empty. The roster must already have passed validate().
    """
    assert len(roster) == TEAM_COUNT, f"bracket needs {TEAM_COUNT} teams, got {len(roster)}"

    teams = [to_team(entry) for entry in roster]
    games = _link_games()
    for game in games[:ROUND_STARTS[1]]:
        home, away = first_round_positions(game.index)
        game.teams = [home, away]
        logger.debug("Bracket %s: round 0 game %d: %s vs %s",
                     name, game.index, teams[home].name, teams[away].name)
    return Bracket(name, games, tournament=tournament, roster=teams)
