from typing import NamedTuple, List, Optional


HOME = 0
AWAY = 1


class Team(NamedTuple):
    name: str
    region: str
    seed: int


def to_team(entry) -> Team:
    """Coerce a roster entry (Team, (name, region, seed) or mapping) into a Team."""
    if isinstance(entry, Team):
        return entry
    if isinstance(entry, dict):
        return Team(name=entry.get('name', ''), region=entry.get('region', ''), seed=entry.get('seed'))
    name, region, seed = entry
    return Team(name=name, region=region, seed=seed)


class Game:
    def __init__(self, index, round, prev=None, next=None):
        self.index = index
        self.round = round
        self.teams: List[Optional[int]] = [None, None]  # roster positions, home then away
        self.score = [0, 0]
        self.completed = False
        self.prev: List[Optional[int]] = list(prev) if prev else [None, None]
        self.next: Optional[int] = next

    @property
    def home(self) -> Optional[int]:
        return self.teams[HOME]

    @property
    def away(self) -> Optional[int]:
        return self.teams[AWAY]

    @property
    def is_ready(self) -> bool:
        return self.teams[HOME] is not None and self.teams[AWAY] is not None

    @property
    def winner(self) -> Optional[int]:
        """Roster position of the winning team, or None until the game is completed."""
        if not self.completed:
            return None
        if self.score[HOME] > self.score[AWAY]:
            return self.teams[HOME]
        return self.teams[AWAY]

    def to_dict(self):
        return {
            'index': self.index,
            'round': self.round,
            'teams': list(self.teams),
            'score': list(self.score),
            'completed': self.completed,
            'prev': list(self.prev),
            'next': self.next,
        }

    def __repr__(self):
        return (f"Game(index={self.index}, round={self.round}, teams={self.teams}, "
                f"prev={self.prev}, next={self.next})")
