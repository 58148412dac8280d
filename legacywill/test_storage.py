"""
Tests for the SQL and filesystem will store.
"""

import os
from datetime import datetime

import pytest

from legacywill import db
from legacywill.conftest import FIXED_NOW
from legacywill.storage import SqlWillStore


def record_fields(will_id, user_id='alice', created_at=FIXED_NOW):
    return {
        'id': will_id,
        'user_id': user_id,
        'will_type': 'holographic',
        'record_will_type': 'simple',
        'jurisdiction': 'SK',
        'language': 'sk',
        'status': 'draft',
        'content_status': 'pending',
        'content_version': 0,
        'testator': {'full_name': 'Ján Novák'},
        'beneficiaries': [{'id': 'b1', 'name': 'Mária Nováková'}],
        'user_data': {'personal': {'full_name': 'Ján Novák'}},
        'created_at': created_at,
        'updated_at': created_at,
    }


@pytest.fixture
def sql_store(app, tmp_path):
    with app.app_context():
        yield SqlWillStore(db.session, str(tmp_path / 'content'))


class TestRecords:
    def test_insert_and_get(self, sql_store):
        sql_store.insert_record(record_fields('w1'))
        record = sql_store.get_record('w1')

        assert record['user_id'] == 'alice'
        assert record['testator'] == {'full_name': 'Ján Novák'}
        assert record['beneficiaries'][0]['name'] == 'Mária Nováková'
        assert record['created_at'] == FIXED_NOW.isoformat()
        assert record['generated_at'] is None

    def test_get_missing(self, sql_store):
        assert sql_store.get_record('missing') is None

    def test_update(self, sql_store):
        sql_store.insert_record(record_fields('w1'))
        sql_store.update_record('w1', {
            'content_status': 'ready',
            'content_version': 1,
            'validation': {'is_valid': True},
        })
        record = sql_store.get_record('w1')
        assert record['content_status'] == 'ready'
        assert record['content_version'] == 1
        assert record['validation'] == {'is_valid': True}

    def test_update_missing_raises(self, sql_store):
        with pytest.raises(KeyError):
            sql_store.update_record('missing', {'status': 'review'})

    def test_list_by_user_oldest_first(self, sql_store):
        sql_store.insert_record(record_fields('w2', created_at=datetime(2025, 6, 2)))
        sql_store.insert_record(record_fields('w1', created_at=datetime(2025, 6, 1)))
        sql_store.insert_record(record_fields('w3', user_id='bob'))

        assert [r['id'] for r in sql_store.list_records('alice')] == ['w1', 'w2']
        assert [r['id'] for r in sql_store.list_records('bob')] == ['w3']

    def test_delete(self, sql_store):
        sql_store.insert_record(record_fields('w1'))
        sql_store.delete_record('w1')
        assert sql_store.get_record('w1') is None
        # deleting again is a no-op
        sql_store.delete_record('w1')

    def test_failed_commit_rolls_back(self, sql_store):
        sql_store.insert_record(record_fields('w1'))
        with pytest.raises(Exception):
            sql_store.insert_record(record_fields('w1'))
        assert sql_store.get_record('w1')['user_id'] == 'alice'


class TestContent:
    def test_save_and_load(self, sql_store):
        sql_store.save_content('w1', 1, {'text': 'ZÁVET', 'version': 1})
        assert sql_store.load_content('w1', 1) == {'text': 'ZÁVET', 'version': 1}
        assert sql_store.load_content('w1', 2) is None
        assert os.path.exists(os.path.join(sql_store.content_dir, 'w1', 'v1.json'))

    def test_versions(self, sql_store):
        for version in (2, 1, 10):
            sql_store.save_content('w1', version, {'version': version})
        assert sql_store.content_versions('w1') == [1, 2, 10]
        assert sql_store.content_versions('other') == []

    def test_delete_version(self, sql_store):
        sql_store.save_content('w1', 1, {'version': 1})
        sql_store.save_content('w1', 2, {'version': 2})
        sql_store.delete_content_version('w1', 2)
        sql_store.delete_content_version('w1', 5)
        assert sql_store.content_versions('w1') == [1]

    def test_delete_all(self, sql_store):
        sql_store.save_content('w1', 1, {'version': 1})
        sql_store.delete_content('w1')
        assert not os.path.exists(os.path.join(sql_store.content_dir, 'w1'))
        sql_store.delete_content('w1')

    def test_failed_write_leaves_no_files(self, sql_store):
        sql_store.save_content('w1', 1, {'version': 1})
        with pytest.raises(TypeError):
            sql_store.save_content('w1', 2, {'bad': object()})

        assert sorted(os.listdir(os.path.join(sql_store.content_dir, 'w1'))) == ['v1.json']
        assert sql_store.load_content('w1', 1) == {'version': 1}

    @pytest.mark.parametrize('will_id', ['../escape', 'a/b', '', 'w 1'])
    def test_unsafe_ids_rejected(self, sql_store, will_id):
        with pytest.raises(ValueError):
            sql_store.save_content(will_id, 1, {})
