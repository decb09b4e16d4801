# Entry point: build a bracket for a tournament and print its layout

import argparse
import logging
import os
import sys
from ncaa.bracket import ROUND_COUNT, round_name
from ncaa.roster import RosterValidationError
from ncaa.sources import RosterNotFound, YamlRosterSource, DATA_DIR
from ncaa.tournament import Tournament

DEFAULT_TOURNAMENT = '2023'
LOG_LEVEL = os.environ.get('BRACKET_LOG_LEVEL', 'WARNING')


def format_team(bracket, position):
    team = bracket.team(position)
    if team is None:
        return 'TBD'
    return f"({team.seed}) {team.name}"


def print_bracket(bracket):
    tournament = bracket.tournament
    print(f"Bracket '{bracket.name}' for {tournament.name}")
    print(f"Regions: {', '.join(tournament.regions)}")
    for round_num in range(ROUND_COUNT):
        print(f"\n# {round_name(round_num)}")
        for game in bracket.games_in_round(round_num):
            if round_num == 0:
                matchup = f"{format_team(bracket, game.home)} vs {format_team(bracket, game.away)}"
            else:
                matchup = f"Winner G{game.prev[0]} vs Winner G{game.prev[1]}"
            feeds = f" -> G{game.next}" if game.next is not None else ""
            print(f"  G{game.index}: {matchup}{feeds}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Build and print a 64-team tournament bracket.')
    parser.add_argument('tournament', nargs='?', default=DEFAULT_TOURNAMENT,
                        help=f'Tournament identifier (default: {DEFAULT_TOURNAMENT})')
    parser.add_argument('--bracket-name', default='my bracket', help='Name of the bracket to create')
    parser.add_argument('--data-dir', default=DATA_DIR, help='Directory holding <tournament>.yaml fields')
    parser.add_argument('--list', action='store_true', help='List available tournaments and exit')
    parser.add_argument('--log-level', default=LOG_LEVEL, help='Logging level (default: %(default)s)')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format='%(levelname)s %(name)s: %(message)s')

    source = YamlRosterSource(args.data_dir)
    if args.list:
        for tournament_id in source.available():
            print(tournament_id)
        return 0

    try:
        tournament = Tournament(args.tournament, source=source)
    except RosterNotFound as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except RosterValidationError as e:
        print(f"Error: invalid field for '{args.tournament}': {e}", file=sys.stderr)
        return 1

    bracket = tournament.create_bracket(args.bracket_name)
    print_bracket(bracket)
    return 0


if __name__ == '__main__':
    sys.exit(main())
