"""
Shared pytest fixtures for bracket tests.

Running tests:
    pytest tests/
"""
import pytest
import sys
import os
import yaml

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from ncaa.models import Team
from ncaa.sources import PACKAGE_DATA_DIR


REGIONS = ['South', 'East', 'Midwest', 'West']


def make_field(regions=None):
    """Build a valid 64-entry field of (name, region, seed) tuples."""
    regions = regions or REGIONS
    return [(f"{region} {seed}", region, seed) for region in regions for seed in range(1, 17)]


@pytest.fixture
def field():
    """A synthetic valid field."""
    return make_field()


@pytest.fixture
def field_2023():
    """The 2023 men's field, as shipped with the package."""
    with open(os.path.join(PACKAGE_DATA_DIR, '2023.yaml'), 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    return [Team(t['name'], t['region'], t['seed']) for t in data['teams']]


@pytest.fixture
def data_dir(tmp_path):
    """Temporary roster directory holding a valid and an invalid field."""
    valid = {
        'name': 'Test Tournament',
        'teams': [{'name': n, 'region': r, 'seed': s} for n, r, s in make_field()],
    }
    broken_field = make_field()
    broken_field[5] = ('South 6', 'South', 7)
    broken = {
        'name': 'Broken Tournament',
        'teams': [{'name': n, 'region': r, 'seed': s} for n, r, s in broken_field],
    }
    (tmp_path / 'test.yaml').write_text(yaml.dump(valid, default_flow_style=False))
    (tmp_path / 'broken.yaml').write_text(yaml.dump(broken, default_flow_style=False))
    (tmp_path / 'notes.txt').write_text('not a field')
    return str(tmp_path)


@pytest.fixture
def client(data_dir, monkeypatch):
    """Flask test client reading fields from the temporary directory."""
    import app as app_module
    monkeypatch.setattr(app_module, 'DATA_DIR', data_dir)
    app_module.app.config['TESTING'] = True
    with app_module.app.test_client() as client:
        yield client


MALFORMED_FIELDS = {
    'syntax': "name: Bad\nteams: [{name: Alabama, region: South, seed: 1}\n",
    'toplevel_list': "- Alabama\n- Arizona\n",
    'string_entry': "name: Bad\nteams:\n  - Alabama South 1\n",
}


@pytest.fixture
def malformed_dir(tmp_path):
    """Roster directory whose files cannot be read as fields."""
    directory = tmp_path / 'malformed'
    directory.mkdir()
    for tournament_id, body in MALFORMED_FIELDS.items():
        (directory / f'{tournament_id}.yaml').write_text(body)
    return str(directory)
