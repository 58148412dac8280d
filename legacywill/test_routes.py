"""
Tests for the JSON API.
"""

import pytest

from legacywill import db
from legacywill.audit_logger import AuditAction, get_audit_trail_for_will, verify_audit_integrity
from legacywill.conftest import make_will_data
from legacywill.security import USER_ID_HEADER


ALICE = {USER_ID_HEADER: 'alice'}
MALLORY = {USER_ID_HEADER: 'mallory'}


def create_payload(**overrides):
    payload = {
        'jurisdiction': 'SK',
        'language': 'sk',
        'user_data': make_will_data(),
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def will_id(client):
    response = client.post('/api/wills', json=create_payload(), headers=ALICE)
    assert response.status_code == 201
    return response.get_json()['will']['will_id']


class TestJurisdictionEndpoints:
    def test_list(self, client):
        response = client.get('/api/jurisdictions')
        data = response.get_json()

        assert response.status_code == 200
        codes = [j['code'] for j in data['jurisdictions']]
        assert codes == ['AT', 'CZ', 'DE', 'SK']
        sk = data['jurisdictions'][codes.index('SK')]
        assert sk['languages'][0] == 'sk'
        assert sk['default_will_type'] == 'holographic'

    def test_detail(self, client):
        response = client.get('/api/jurisdictions/cz')
        assert response.status_code == 200
        assert response.get_json()['jurisdiction']['code'] == 'CZ'

    def test_unknown(self, client):
        response = client.get('/api/jurisdictions/FR')
        assert response.status_code == 400
        assert response.get_json()['code'] == 'configuration_error'


class TestStatelessEndpoints:
    def test_validate(self, client):
        response = client.post('/api/validate', json={
            'jurisdiction': 'SK', 'user_data': make_will_data(), 'as_of': '2025-06-01',
        })
        data = response.get_json()
        assert response.status_code == 200
        assert data['validation']['is_valid'] is True
        assert data['validation']['completeness_score'] == 100

    def test_validate_reports_problems_with_200(self, client):
        data = make_will_data()
        data['personal']['date_of_birth'] = '2009-01-01'
        response = client.post('/api/validate', json={
            'jurisdiction': 'SK', 'user_data': data, 'as_of': '2025-06-01',
        })
        assert response.status_code == 200
        codes = [e['code'] for e in response.get_json()['validation']['errors']]
        assert 'under_minimum_age' in codes

    def test_validate_missing_payload(self, client):
        response = client.post('/api/validate', data='not json', content_type='text/plain')
        assert response.status_code == 400
        assert response.get_json()['errors'][0]['code'] == 'missing_payload'

    def test_validate_unsupported_will_type(self, client):
        response = client.post('/api/validate', json={
            'jurisdiction': 'DE', 'will_type': 'witnessed', 'user_data': {},
        })
        assert response.status_code == 400

    def test_suggestions(self, client):
        response = client.post('/api/suggestions', json={
            'jurisdiction': 'SK', 'user_data': make_will_data(), 'as_of': '2025-06-01',
        })
        ids = [s['id'] for s in response.get_json()['suggestions']]
        assert response.status_code == 200
        assert 'funeral_wishes' in ids


class TestCreateWill:
    def test_requires_user(self, client):
        response = client.post('/api/wills', json=create_payload())
        assert response.status_code == 401

    def test_create(self, client):
        response = client.post('/api/wills', json=create_payload(), headers=ALICE)
        data = response.get_json()

        assert response.status_code == 201
        will = data['will']
        assert will['version'] == 1
        assert will['jurisdiction'] == 'SK'
        assert will['will_type'] == 'holographic'
        assert 'Ján Novák' in will['content']['text']
        assert will['metadata']['checksum']
        assert will['validation']['is_valid'] is True
        assert will['legal_disclaimer']

    def test_bad_jurisdiction(self, client):
        response = client.post('/api/wills', json=create_payload(jurisdiction='FR'), headers=ALICE)
        assert response.status_code == 400
        assert client.get('/api/wills', headers=ALICE).get_json()['wills'] == []

    def test_unsupported_language(self, client):
        response = client.post('/api/wills', json=create_payload(language='uk'), headers=ALICE)
        assert response.status_code == 400

    def test_invalid_will_is_created(self, client):
        payload = create_payload(user_data={'personal': {'full_name': 'Ján Novák'}})
        response = client.post('/api/wills', json=payload, headers=ALICE)
        assert response.status_code == 201
        assert response.get_json()['will']['validation']['is_valid'] is False

    def test_markup_is_stripped(self, client):
        data = make_will_data()
        data['personal']['full_name'] = '<b>Ján</b> Novák'
        response = client.post('/api/wills', json=create_payload(user_data=data), headers=ALICE)
        assert response.get_json()['will']['user_data']['personal']['full_name'] == 'Ján Novák'


class TestWillEndpoints:
    def test_list(self, client, will_id):
        response = client.get('/api/wills', headers=ALICE)
        assert [w['id'] for w in response.get_json()['wills']] == [will_id]
        assert client.get('/api/wills', headers=MALLORY).get_json()['wills'] == []

    def test_get(self, client, will_id):
        response = client.get(f'/api/wills/{will_id}', headers=ALICE)
        record = response.get_json()['will']
        assert response.status_code == 200
        assert record['content_status'] == 'ready'
        assert record['testator']['full_name'] == 'Ján Novák'

    def test_get_foreign_or_missing(self, client, will_id):
        assert client.get(f'/api/wills/{will_id}', headers=MALLORY).status_code == 404
        assert client.get('/api/wills/does-not-exist', headers=ALICE).status_code == 404

    def test_update(self, client, will_id):
        response = client.put(f'/api/wills/{will_id}', json={'status': 'review'}, headers=ALICE)
        assert response.status_code == 200
        assert response.get_json()['will']['status'] == 'review'

        data = make_will_data(beneficiaries=[])
        response = client.put(f'/api/wills/{will_id}', json={'user_data': data}, headers=ALICE)
        record = response.get_json()['will']
        assert record['content_status'] == 'stale'
        assert record['is_valid'] is False

    def test_update_invalid_status(self, client, will_id):
        response = client.put(f'/api/wills/{will_id}', json={'status': 'signed'}, headers=ALICE)
        assert response.status_code == 400

    def test_update_foreign(self, client, will_id):
        response = client.put(f'/api/wills/{will_id}', json={'status': 'review'}, headers=MALLORY)
        assert response.status_code == 404

    def test_regenerate(self, client, will_id):
        response = client.post(f'/api/wills/{will_id}/regenerate', headers=ALICE)
        assert response.status_code == 200
        assert response.get_json()['will']['version'] == 2

        content = client.get(f'/api/wills/{will_id}/content', headers=ALICE).get_json()['content']
        assert content['version'] == 2
        old = client.get(f'/api/wills/{will_id}/content?version=1', headers=ALICE).get_json()['content']
        assert old['version'] == 1
        assert old['checksum'] == content['checksum']

    def test_content_missing_version(self, client, will_id):
        response = client.get(f'/api/wills/{will_id}/content?version=9', headers=ALICE)
        assert response.status_code == 404
        assert response.get_json()['code'] == 'content_missing'

    def test_verify(self, client, will_id):
        response = client.get(f'/api/wills/{will_id}/verify', headers=ALICE)
        assert response.status_code == 200
        assert response.get_json()['intact'] is True

    def test_delete(self, client, will_id):
        response = client.delete(f'/api/wills/{will_id}', headers=ALICE)
        assert response.status_code == 200
        assert client.get(f'/api/wills/{will_id}', headers=ALICE).status_code == 404
        assert client.delete(f'/api/wills/{will_id}', headers=ALICE).status_code == 404

    def test_delete_foreign(self, client, will_id):
        assert client.delete(f'/api/wills/{will_id}', headers=MALLORY).status_code == 404
        assert client.get(f'/api/wills/{will_id}', headers=ALICE).status_code == 200


class TestAuditTrail:
    def test_actions_are_recorded(self, client, will_id):
        client.put(f'/api/wills/{will_id}', json={'status': 'review'}, headers=ALICE)
        client.post(f'/api/wills/{will_id}/regenerate', headers=ALICE)
        client.get(f'/api/wills/{will_id}/content', headers=ALICE)
        client.get(f'/api/wills/{will_id}/verify', headers=ALICE)

        response = client.get(f'/api/wills/{will_id}/audit', headers=ALICE)
        actions = [entry['action'] for entry in response.get_json()['audit_trail']]
        assert actions == [
            AuditAction.WILL_CREATED,
            AuditAction.WILL_UPDATED,
            AuditAction.WILL_REGENERATED,
            AuditAction.WILL_CONTENT_VIEWED,
            AuditAction.WILL_VERIFIED,
        ]

    def test_trail_outlives_deletion(self, client, will_id, app):
        client.delete(f'/api/wills/{will_id}', headers=ALICE)
        with app.app_context():
            actions = [e['action'] for e in get_audit_trail_for_will(will_id)]
        assert actions[-1] == AuditAction.WILL_DELETED

    def test_integrity(self, client, will_id, app):
        with app.app_context():
            valid, invalid, invalid_ids = verify_audit_integrity()
        assert valid >= 1
        assert invalid == 0
        assert invalid_ids == []

    def test_foreign_audit_hidden(self, client, will_id):
        assert client.get(f'/api/wills/{will_id}/audit', headers=MALLORY).status_code == 404


def test_unknown_route(client):
    response = client.get('/api/nothing-here')
    assert response.status_code == 404
    assert response.get_json()['ok'] is False


def test_tables_created(app):
    with app.app_context():
        assert 'wills' in db.metadata.tables
        assert 'audit_logs' in db.metadata.tables
