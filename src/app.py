"""
Flask web application serving NCAA brackets as JSON.
"""
import logging
from flask import Flask, jsonify
from ncaa.roster import RosterValidationError
from ncaa.sources import RosterNotFound, YamlRosterSource, DATA_DIR
from ncaa.tournament import Tournament

app = Flask(__name__)

DEFAULT_BRACKET_NAME = 'bracket'

if not app.debug:
    app.logger.setLevel(logging.INFO)


def get_source() -> YamlRosterSource:
    """Roster source over the configured data directory."""
    return YamlRosterSource(DATA_DIR)


@app.route('/api/tournaments')
def api_tournaments():
    """List the tournaments with a field on file."""
    return jsonify({'success': True, 'tournaments': get_source().available()})


@app.route('/api/tournaments/<tournament_id>/bracket')
def api_bracket(tournament_id):
    """Build a fresh bracket for a tournament and return it."""
    try:
        tournament = Tournament(tournament_id, source=get_source())
    except RosterNotFound as e:
        app.logger.warning(f'Unknown tournament requested: {tournament_id}')
        return jsonify({'success': False, 'error': str(e)}), 404
    except RosterValidationError as e:
        app.logger.error(f'Invalid field for {tournament_id}: {e}')
        return jsonify({'success': False, 'error': str(e)}), 422

    bracket = tournament.create_bracket(DEFAULT_BRACKET_NAME)
    return jsonify({
        'success': True,
        'teams': [team._asdict() for team in tournament.teams],
        'regions': tournament.regions,
        'bracket': bracket.to_dict(),
    })


if __name__ == '__main__':
    app.run(debug=True)
