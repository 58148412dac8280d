"""
Shared pytest fixtures.
"""

import copy
from datetime import date, datetime

import pytest

from legacywill.jurisdictions import build_default_registry
from legacywill.templates import TemplateLibrary
from legacywill.will_data import WillUserData


AS_OF = date(2025, 6, 1)
FIXED_NOW = datetime(2025, 6, 1, 12, 0, 0)

BASE_WILL = {
    'personal': {
        'full_name': 'Ján Novák',
        'date_of_birth': '1970-05-12',
        'place_of_birth': 'Bratislava',
        'personal_id': '700512/1234',
        'citizenship': 'Slovak Republic',
        'address': {
            'street': 'Hlavná 1',
            'city': 'Bratislava',
            'postal_code': '81101',
            'country': 'SK',
        },
        'marital_status': 'married',
        'profession': 'Engineer',
    },
    'family': {
        'spouse': {'full_name': 'Mária Nováková', 'date_of_birth': '1972-03-01'},
        'children': [],
    },
    'assets': [
        {
            'id': 'a1',
            'type': 'real_estate',
            'description': 'Family house',
            'value': 250000,
            'currency': 'EUR',
            'location': 'Bratislava',
        },
    ],
    'beneficiaries': [
        {
            'id': 'b1',
            'name': 'Mária Nováková',
            'relationship': 'spouse',
            'share': {'type': 'percentage', 'value': 100},
        },
    ],
    'executors': [
        {'id': 'e1', 'role': 'primary', 'name': 'Peter Novák', 'relationship': 'brother'},
        {'id': 'e2', 'role': 'alternate', 'name': 'Eva Malá', 'relationship': 'friend'},
    ],
}


def make_will_data(**overrides):
    """Copy of the base will dictionary with top-level keys replaced."""
    data = copy.deepcopy(BASE_WILL)
    data.update(copy.deepcopy(overrides))
    return data


def make_will(**overrides) -> WillUserData:
    return WillUserData.from_dict(make_will_data(**overrides))


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def templates():
    return TemplateLibrary()


@pytest.fixture
def sk_config(registry):
    return registry.get_config('SK')


@pytest.fixture
def cz_config(registry):
    return registry.get_config('CZ')


@pytest.fixture
def will():
    return make_will()


@pytest.fixture
def app(tmp_path):
    from legacywill import create_app, db

    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'WILL_CONTENT_DIR': str(tmp_path / 'wills'),
        'RATELIMIT_ENABLED': False,
    })
    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()
