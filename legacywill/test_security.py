"""
Security Tests

Tests for security features:
- Input sanitization
- Caller identification
- Security headers
- Rate limiting
"""

import shutil
import tempfile
import unittest

from flask import g

from legacywill import create_app, db
from legacywill.security import (
    RATE_LIMITS, USER_ID_HEADER, get_client_ip, get_user_id, sanitize_payload, sanitize_string,
)


def make_test_app(content_dir, **overrides):
    config = {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'WILL_CONTENT_DIR': content_dir,
        'RATELIMIT_ENABLED': False,
    }
    config.update(overrides)
    return create_app(config)


class TestInputSanitization(unittest.TestCase):
    """Test input sanitization functions."""

    def test_sanitize_string_removes_dangerous_chars(self):
        """Test that dangerous characters are removed."""
        dangerous = '<script>alert("xss")</script>'
        sanitized = sanitize_string(dangerous)
        self.assertNotIn('<', sanitized)
        self.assertNotIn('>', sanitized)

    def test_sanitize_string_preserves_safe_text(self):
        """Test that safe text is preserved."""
        safe = 'Ján O\'Neill-Nováková'
        self.assertEqual(sanitize_string(safe), safe)

    def test_sanitize_string_handles_unicode(self):
        """Test handling of unicode characters."""
        for text in ['Mária Nováková', 'Jiří Dvořák', 'Jürgen Müller']:
            self.assertEqual(sanitize_string(text), text)

    def test_sanitize_string_trims_whitespace(self):
        self.assertEqual(sanitize_string('  Ján Novák  '), 'Ján Novák')

    def test_sanitize_string_empty_input(self):
        """Test handling of empty input."""
        self.assertEqual(sanitize_string(''), '')
        self.assertEqual(sanitize_string(None), '')

    def test_sanitize_string_removes_event_handlers(self):
        sanitized = sanitize_string('x onclick=alert(1)')
        self.assertNotIn('onclick=', sanitized)

    def test_sanitize_payload_nested_dict(self):
        """Test sanitization of nested will data."""
        payload = {
            'personal': {
                'full_name': '<script>alert(1)</script>Ján Novák',
                'address': {'street': 'Hlavná <b>1</b>', 'city': 'Bratislava'},
            },
            'beneficiaries': [
                {'name': '<img src=x onerror=alert(1)>'},
                'safe string'
            ]
        }

        sanitized = sanitize_payload(payload)

        self.assertEqual(sanitized['personal']['full_name'], 'Ján Novák')
        self.assertEqual(sanitized['personal']['address']['street'], 'Hlavná 1')
        self.assertNotIn('<', sanitized['beneficiaries'][0]['name'])
        self.assertEqual(sanitized['personal']['address']['city'], 'Bratislava')
        self.assertEqual(sanitized['beneficiaries'][1], 'safe string')

    def test_sanitize_payload_preserves_types(self):
        """Test that non-string types are preserved."""
        payload = {
            'string': 'test',
            'integer': 42,
            'float': 33.33,
            'boolean': True,
            'null': None,
            'list': [1, 2, 3]
        }

        sanitized = sanitize_payload(payload)

        self.assertEqual(sanitized, payload)

    def test_sanitize_very_long_string(self):
        sanitized = sanitize_string('A' * 20000)
        self.assertEqual(len(sanitized), 10000)


class TestCallerIdentity(unittest.TestCase):
    """Test the X-User-Id header handling."""

    def setUp(self):
        self.content_dir = tempfile.mkdtemp()
        self.app = make_test_app(self.content_dir)

    def tearDown(self):
        shutil.rmtree(self.content_dir, ignore_errors=True)

    def user_id_for(self, value):
        headers = {USER_ID_HEADER: value} if value is not None else {}
        with self.app.test_request_context('/', headers=headers):
            return get_user_id()

    def test_valid_ids(self):
        for value in ['alice', 'user-42', 'a.b@example.com', 'tenant:7']:
            self.assertEqual(self.user_id_for(value), value)

    def test_surrounding_whitespace_stripped(self):
        self.assertEqual(self.user_id_for('  alice '), 'alice')

    def test_missing_or_malformed(self):
        self.assertEqual(self.user_id_for(None), '')
        self.assertEqual(self.user_id_for(''), '')
        self.assertEqual(self.user_id_for('alice bob'), '')
        self.assertEqual(self.user_id_for('<script>'), '')
        self.assertEqual(self.user_id_for('x' * 101), '')

    def test_client_ip_prefers_forwarded_header(self):
        with self.app.test_request_context('/', headers={'X-Forwarded-For': '203.0.113.5, 10.0.0.1'}):
            self.assertEqual(get_client_ip(), '203.0.113.5')
        with self.app.test_request_context('/', environ_base={'REMOTE_ADDR': '198.51.100.7'}):
            self.assertEqual(get_client_ip(), '198.51.100.7')

    def test_user_required_rejects_anonymous(self):
        client = self.app.test_client()
        response = client.get('/api/wills')
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.get_json()['code'], 'unauthorized')

    def test_user_required_sets_user(self):
        from legacywill.security import user_required

        @user_required
        def view():
            return g.user_id

        with self.app.test_request_context('/', headers={USER_ID_HEADER: 'alice'}):
            self.assertEqual(view(), 'alice')


class TestSecurityHeaders(unittest.TestCase):
    """Test that every response carries the security headers."""

    def setUp(self):
        self.content_dir = tempfile.mkdtemp()
        self.app = make_test_app(self.content_dir)
        self.client = self.app.test_client()

    def tearDown(self):
        with self.app.app_context():
            db.drop_all()
        shutil.rmtree(self.content_dir, ignore_errors=True)

    def test_headers_on_success(self):
        response = self.client.get('/api/jurisdictions')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers['X-Content-Type-Options'], 'nosniff')
        self.assertEqual(response.headers['X-Frame-Options'], 'DENY')
        self.assertEqual(response.headers['Cache-Control'], 'no-store')
        self.assertIn("default-src 'none'", response.headers['Content-Security-Policy'])

    def test_headers_on_error(self):
        response = self.client.get('/api/wills')
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.headers['X-Frame-Options'], 'DENY')


class TestRateLimiting(unittest.TestCase):
    """Test that generation requests are rate limited."""

    def setUp(self):
        self.content_dir = tempfile.mkdtemp()
        self.app = make_test_app(self.content_dir, RATELIMIT_ENABLED=True)
        self.client = self.app.test_client()

    def tearDown(self):
        with self.app.app_context():
            db.drop_all()
        shutil.rmtree(self.content_dir, ignore_errors=True)

    def test_generation_limit(self):
        limit = int(RATE_LIMITS['generate'].split()[0])
        headers = {USER_ID_HEADER: 'alice'}
        payload = {'jurisdiction': 'XX', 'language': 'en', 'user_data': {}}

        for _ in range(limit):
            response = self.client.post('/api/wills', json=payload, headers=headers)
            self.assertEqual(response.status_code, 400)

        response = self.client.post('/api/wills', json=payload, headers=headers)
        self.assertEqual(response.status_code, 429)
        self.assertEqual(response.get_json()['code'], 'rate_limited')


if __name__ == '__main__':
    unittest.main()
