import io
import json
import os
import time
from unittest.mock import patch

from django.contrib.auth.hashers import check_password, make_password
from django.core.exceptions import ImproperlyConfigured
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import Client, SimpleTestCase, TestCase

from common.config import SiteConfig
from common.errors import AuthError

from .checks import check_site_config
from .tokens import issue_token, verify_token
from .users import get_directory

ADMIN_CREDENTIALS = {'username': 'admin', 'password': 'correct-horse'}


def post_json(client, path, payload, **extra):
    return client.post(path, data=json.dumps(payload), content_type='application/json', **extra)


class LoginTest(TestCase):
    def setUp(self):
        self.client = Client()

    def test_login_with_correct_credentials_sets_cookie(self):
        response = post_json(self.client, '/api/auth/login', ADMIN_CREDENTIALS)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'message': 'Login successful'})

        cookie = response.cookies['token']
        self.assertTrue(cookie.value)
        self.assertTrue(cookie['httponly'])
        self.assertEqual(cookie['samesite'], 'Strict')
        self.assertEqual(cookie['path'], '/')
        self.assertEqual(cookie['max-age'], 24 * 60 * 60)
        self.assertFalse(cookie['secure'])

    def test_cookie_is_secure_in_production(self):
        with self.settings(APP_ENV='production'):
            response = post_json(self.client, '/api/auth/login', ADMIN_CREDENTIALS)

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.cookies['token']['secure'])

    def test_wrong_password_is_rejected_without_cookie(self):
        response = post_json(self.client, '/api/auth/login', {'username': 'admin', 'password': 'nope'})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['message'], 'Invalid credentials')
        self.assertNotIn('token', response.cookies)

    def test_wrong_username_gets_the_same_message(self):
        response = post_json(self.client, '/api/auth/login', {'username': 'root', 'password': 'correct-horse'})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['message'], 'Invalid credentials')
        self.assertNotIn('token', response.cookies)

    def test_failed_login_is_logged(self):
        with self.assertLogs('accounts.views', level='WARNING') as logs:
            post_json(self.client, '/api/auth/login', {'username': 'admin', 'password': 'nope'})

        self.assertIn('Login failed for user: admin', logs.output[0])
        self.assertNotIn('nope', logs.output[0])

    def test_missing_fields_return_400(self):
        for payload in [{}, {'username': 'admin'}, {'password': 'correct-horse'}, {'username': '', 'password': 'x'}]:
            with self.subTest(payload=payload):
                response = post_json(self.client, '/api/auth/login', payload)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()['message'], 'Username and password are required')
                self.assertNotIn('token', response.cookies)

    def test_invalid_json_returns_400(self):
        response = self.client.post('/api/auth/login', data='{not json', content_type='application/json')

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['message'], 'Invalid JSON')

    def test_non_post_returns_405(self):
        response = self.client.get('/api/auth/login')

        self.assertEqual(response.status_code, 405)
        self.assertEqual(response.json()['message'], 'Method not allowed')

    def test_hashed_password_mode(self):
        with self.settings(
            ADMIN_PASSWORD_MODE='hashed',
            ADMIN_PASSWORD='',
            ADMIN_PASSWORD_HASH=make_password('s3cret-hash'),
        ):
            ok = post_json(self.client, '/api/auth/login', {'username': 'admin', 'password': 's3cret-hash'})
            bad = post_json(self.client, '/api/auth/login', ADMIN_CREDENTIALS)

        self.assertEqual(ok.status_code, 200)
        self.assertEqual(bad.status_code, 401)

    def test_misconfigured_password_mode_returns_500(self):
        with self.settings(ADMIN_PASSWORD_MODE='sometimes'):
            response = post_json(self.client, '/api/auth/login', ADMIN_CREDENTIALS)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()['message'], 'An error occurred during authentication')


class SessionTest(TestCase):
    def setUp(self):
        self.client = Client()
        self.config = SiteConfig.from_settings()

    def test_me_without_cookie_returns_401(self):
        response = self.client.get('/api/auth/me')

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['message'], 'Authentication required')

    def test_me_after_login_returns_admin_profile(self):
        post_json(self.client, '/api/auth/login', ADMIN_CREDENTIALS)

        response = self.client.get('/api/auth/me')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            'id': 'admin',
            'username': 'admin',
            'firstName': 'Admin',
            'role': 'admin',
        })

    def test_me_with_tampered_token_returns_401(self):
        account = get_directory(self.config).get('admin')
        self.client.cookies['token'] = issue_token(account, self.config) + 'x'

        response = self.client.get('/api/auth/me')

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['message'], 'Invalid or expired token')

    def test_me_with_expired_token_returns_401(self):
        account = get_directory(self.config).get('admin')
        self.client.cookies['token'] = issue_token(account, self.config, now=time.time() - 2 * 24 * 60 * 60)

        response = self.client.get('/api/auth/me')

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['message'], 'Invalid or expired token')

    def test_me_rejects_non_get(self):
        response = self.client.post('/api/auth/me')

        self.assertEqual(response.status_code, 405)

    def test_logout_clears_cookie(self):
        post_json(self.client, '/api/auth/login', ADMIN_CREDENTIALS)

        response = self.client.post('/api/auth/logout')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'message': 'Logout successful'})
        self.assertEqual(response.cookies['token'].value, '')
        self.assertEqual(response.cookies['token']['max-age'], 0)

    def test_logout_then_me_returns_401(self):
        post_json(self.client, '/api/auth/login', ADMIN_CREDENTIALS)
        self.client.post('/api/auth/logout')

        response = self.client.get('/api/auth/me')

        self.assertEqual(response.status_code, 401)

    def test_logout_without_session_still_succeeds(self):
        response = self.client.post('/api/auth/logout')

        self.assertEqual(response.status_code, 200)

    def test_logout_rejects_get(self):
        response = self.client.get('/api/auth/logout')

        self.assertEqual(response.status_code, 405)


class TokenTest(SimpleTestCase):
    def setUp(self):
        self.config = SiteConfig.from_settings()
        self.account = get_directory(self.config).get('admin')

    def test_fresh_token_verifies_to_account_id(self):
        token = issue_token(self.account, self.config)

        self.assertEqual(verify_token(token, self.config), 'admin')

    def test_token_expires_after_max_age(self):
        issued_at = 1_700_000_000
        token = issue_token(self.account, self.config, now=issued_at)

        self.assertEqual(verify_token(token, self.config, now=issued_at + self.config.token_max_age - 1), 'admin')
        with self.assertRaises(AuthError):
            verify_token(token, self.config, now=issued_at + self.config.token_max_age)

    def test_token_signed_with_other_secret_is_rejected(self):
        with self.settings(SESSION_TOKEN_SECRET='another-secret'):
            other = SiteConfig.from_settings()
        token = issue_token(self.account, other)

        with self.assertRaises(AuthError):
            verify_token(token, self.config)

    def test_garbage_is_rejected(self):
        with self.assertRaises(AuthError):
            verify_token('not-a-token', self.config)


class SiteConfigTest(SimpleTestCase):
    def test_unknown_password_mode_is_rejected(self):
        with self.settings(ADMIN_PASSWORD_MODE='auto'):
            with self.assertRaises(ImproperlyConfigured):
                SiteConfig.from_settings()

    def test_hashed_mode_requires_hash(self):
        with self.settings(ADMIN_PASSWORD_MODE='hashed', ADMIN_PASSWORD_HASH=''):
            with self.assertRaises(ImproperlyConfigured):
                SiteConfig.from_settings()

    def test_plain_mode_requires_password(self):
        with self.settings(ADMIN_PASSWORD_MODE='plain', ADMIN_PASSWORD=''):
            with self.assertRaises(ImproperlyConfigured):
                SiteConfig.from_settings()

    def test_system_check_reports_misconfiguration(self):
        self.assertEqual(check_site_config(None), [])

        with self.settings(ADMIN_PASSWORD_MODE='hashed', ADMIN_PASSWORD_HASH=''):
            errors = check_site_config(None)

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].id, 'accounts.E001')


class CorsTest(TestCase):
    def setUp(self):
        self.client = Client()

    def preflight(self, path, origin):
        return self.client.options(
            path,
            HTTP_ORIGIN=origin,
            HTTP_ACCESS_CONTROL_REQUEST_METHOD='POST',
        )

    def test_preflight_from_allowed_origin_is_echoed(self):
        response = self.preflight('/api/auth/login', 'http://localhost:5173')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, b'')
        self.assertEqual(response['Access-Control-Allow-Origin'], 'http://localhost:5173')
        self.assertEqual(response['Access-Control-Allow-Credentials'], 'true')

    def test_preflight_from_preview_domain_is_echoed(self):
        origin = 'https://dubai-rose-git-feature-team.vercel.app'
        response = self.preflight('/api/auth/me', origin)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Access-Control-Allow-Origin'], origin)

    def test_preflight_from_unknown_origin_gets_no_allow_origin(self):
        response = self.preflight('/api/auth/login', 'https://evil.example.com')

        self.assertEqual(response.status_code, 200)
        self.assertNotIn('Access-Control-Allow-Origin', response)

    def test_same_policy_applies_to_booking_and_contact(self):
        for path in ['/api/booking', '/api/contact']:
            with self.subTest(path=path):
                allowed = self.preflight(path, 'https://dubai-rose.vercel.app')
                denied = self.preflight(path, 'https://evil.example.com')
                self.assertEqual(allowed['Access-Control-Allow-Origin'], 'https://dubai-rose.vercel.app')
                self.assertNotIn('Access-Control-Allow-Origin', denied)

    def test_bare_options_returns_empty_200(self):
        response = self.client.options('/api/auth/logout')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, b'')


class HashAdminPasswordCommandTest(SimpleTestCase):
    def test_prints_a_usable_hash(self):
        out = io.StringIO()
        call_command('hash_admin_password', password='s3cret', stdout=out, stderr=io.StringIO())

        self.assertTrue(check_password('s3cret', out.getvalue().strip()))

    def test_requires_a_password(self):
        with patch.dict(os.environ, {'ADMIN_PASSWORD': ''}):
            with self.assertRaises(CommandError):
                call_command('hash_admin_password', stdout=io.StringIO(), stderr=io.StringIO())
