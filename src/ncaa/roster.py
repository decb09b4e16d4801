"""
Tournament field (roster) validation.

A roster is the ordered list of 64 (team, region, seed) entries a bracket is
built from. The ordering is significant:
    - the teams of a region are grouped together and ordered by seed 1-16
    - the first region's winner meets the second in the Final Four, and the
      third meets the fourth
"""
from typing import List, Sequence

from ncaa.models import Team, to_team


TEAM_COUNT = 64
REGION_COUNT = 4
SEEDS_PER_REGION = 16


class RosterValidationError(ValueError):
    """Base class for structural problems in a tournament field."""


class EmptyField(RosterValidationError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"entry {index}: empty team or region")


class DuplicateTeam(RosterValidationError):
    def __init__(self, name: str, index: int):
        self.name = name
        self.index = index
        super().__init__(f"entry {index}: duplicate team: {name}")


class UnexpectedSeed(RosterValidationError):
    def __init__(self, index: int, got, want: int):
        self.index = index
        self.got = got
        self.want = want
        super().__init__(f"entry {index}: unexpected seed {got} (expected {want})")


class RegionNotContiguous(RosterValidationError):
    def __init__(self, index: int, region: str, expected: str):
        self.index = index
        self.region = region
        self.expected = expected
        if region == expected:
            message = f"entry {index}: region did not change: {region}"
        else:
            message = f"entry {index}: unexpected region {region} (expected {expected})"
        super().__init__(message)


class DuplicateRegion(RosterValidationError):
    def __init__(self, index: int, region: str):
        self.index = index
        self.region = region
        super().__init__(f"entry {index}: regions not unique: {region}")


class WrongLength(RosterValidationError):
    def __init__(self, got: int):
        self.got = got
        super().__init__(f"field has {got} entries (expected {TEAM_COUNT})")


class MalformedEntry(RosterValidationError):
    def __init__(self, index: int, entry):
        self.index = index
        self.entry = entry
        super().__init__(f"entry {index}: expected name, region and seed, got {entry!r}")


class MalformedField(RosterValidationError):
    """The field data itself could not be read (bad YAML, wrong shape)."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


def validate(roster: Sequence) -> None:
    """
    Check a tournament field for structural correctness.

    Rules, checked in a single pass:
    - no empty team names or regions
    - team names are unique
    - seeds run 1-16 within each region
    - regions are contiguous and unique (so there are exactly 4 of them)

    Raises the RosterValidationError subclass describing the first problem found.
    """
    seen_teams = set()
    seen_regions = set()
    expected_seed = 1
    current_region = None

    for index, entry in enumerate(roster):
        if isinstance(entry, str):
            raise MalformedEntry(index, entry)
        try:
            name, region, seed = to_team(entry)
        except (TypeError, ValueError):
            raise MalformedEntry(index, entry)

        if not name or not region:
            raise EmptyField(index)
        if not isinstance(name, str) or not isinstance(region, str):
            raise MalformedEntry(index, entry)

        if name in seen_teams:
            raise DuplicateTeam(name, index)
        seen_teams.add(name)

        if seed != expected_seed:
            raise UnexpectedSeed(index, seed, expected_seed)

        if expected_seed == 1:
            # A new region starts here
            if index > 0 and region == current_region:
                raise RegionNotContiguous(index, region, current_region)
            if region in seen_regions:
                raise DuplicateRegion(index, region)
            seen_regions.add(region)
            current_region = region
        elif region != current_region:
            raise RegionNotContiguous(index, region, current_region)

        expected_seed = 1 if expected_seed == SEEDS_PER_REGION else expected_seed + 1

    # Per-entry rules cannot catch a short (or long) field
    if len(roster) != TEAM_COUNT:
        raise WrongLength(len(roster))


def load_teams(roster: Sequence) -> List[Team]:
    """Validate a field and return it as a list of Team records."""
    validate(roster)
    return [to_team(entry) for entry in roster]


def regions_of(teams: Sequence[Team]) -> List[str]:
    """Region names in field order (one per block of 16 teams)."""
    return [teams[r * SEEDS_PER_REGION].region for r in range(len(teams) // SEEDS_PER_REGION)]
