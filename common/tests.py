import importlib
import json
import os
from unittest.mock import patch

from django.http import JsonResponse
from django.test import Client, RequestFactory, SimpleTestCase, TestCase

from .errors import NotFoundError, PersistenceError, ValidationError
from .http import api_endpoint, parse_json_body, require_fields, require_text


class DiagnosticTest(TestCase):
    def setUp(self):
        self.client = Client()

    def test_returns_diagnostic_payload(self):
        response = self.client.get('/api/test', HTTP_ORIGIN='http://localhost:3000')

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['message'], 'API is working!')
        self.assertEqual(data['environment'], 'test')
        self.assertEqual(data['host'], 'testserver')
        self.assertEqual(data['origin'], 'http://localhost:3000')
        self.assertIn('timestamp', data)

    def test_origin_defaults_to_none(self):
        response = self.client.get('/api/test')

        self.assertEqual(response.json()['origin'], 'none')

    def test_repeated_calls_never_touch_the_database(self):
        for _ in range(3):
            with self.assertNumQueries(0):
                response = self.client.get('/api/test')
            self.assertEqual(response.status_code, 200)

    def test_options_returns_empty_200(self):
        response = self.client.options('/api/test')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, b'')


class ApiEndpointTest(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_api_errors_become_message_responses(self):
        @api_endpoint('GET')
        def view(request):
            raise NotFoundError('Nothing here')

        response = view(self.factory.get('/'))

        self.assertEqual(response.status_code, 404)
        self.assertEqual(json.loads(response.content), {'message': 'Nothing here'})

    def test_error_code_is_included_when_set(self):
        @api_endpoint('GET')
        def view(request):
            raise PersistenceError('Broken', code='SOME_CODE')

        response = view(self.factory.get('/'))

        self.assertEqual(response.status_code, 500)
        self.assertEqual(json.loads(response.content), {'message': 'Broken', 'code': 'SOME_CODE'})

    def test_unexpected_errors_use_the_route_failure_message(self):
        @api_endpoint('GET', failure_message='Could not load things.')
        def view(request):
            raise RuntimeError('secret internals')

        response = view(self.factory.get('/'))

        self.assertEqual(response.status_code, 500)
        self.assertEqual(json.loads(response.content), {'message': 'Could not load things.'})

    def test_wrong_method_returns_405(self):
        @api_endpoint('POST')
        def view(request):
            return JsonResponse({})

        response = view(self.factory.delete('/'))

        self.assertEqual(response.status_code, 405)
        self.assertEqual(json.loads(response.content), {'message': 'Method not allowed'})

    def test_views_are_csrf_exempt(self):
        @api_endpoint('POST')
        def view(request):
            return JsonResponse({})

        self.assertTrue(view.csrf_exempt)


class RequestHelpersTest(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_parse_json_body_rejects_non_objects(self):
        request = self.factory.post('/', data='[1, 2]', content_type='application/json')

        with self.assertRaises(ValidationError):
            parse_json_body(request)

    def test_require_fields_treats_blank_strings_as_missing(self):
        with self.assertRaises(ValidationError) as ctx:
            require_fields({'a': '  ', 'b': 'x'}, ['a', 'b'], 'All fields are required')

        self.assertEqual(ctx.exception.message, 'All fields are required')

    def test_require_fields_returns_values_in_order(self):
        self.assertEqual(require_fields({'b': 2, 'a': 0}, ['a', 'b'], 'msg'), [0, 2])

    def test_require_text_rejects_non_strings(self):
        require_text(['a', 'b'], 'msg')
        for value in [['a'], {'a': 1}, 3]:
            with self.subTest(value=value), self.assertRaises(ValidationError):
                require_text(['a', value], 'msg')


class EnvironmentSettingTest(SimpleTestCase):
    def load_settings(self, **env):
        with patch.dict(os.environ, env):
            for key in ('APP_ENV', 'NODE_ENV'):
                if key not in env:
                    os.environ.pop(key, None)
            return importlib.reload(importlib.import_module('config.settings'))

    def tearDown(self):
        importlib.reload(importlib.import_module('config.settings'))

    def test_app_env_is_read_first(self):
        module = self.load_settings(APP_ENV='staging', NODE_ENV='production')

        self.assertEqual(module.APP_ENV, 'staging')

    def test_node_env_is_the_fallback(self):
        module = self.load_settings(NODE_ENV='production')

        self.assertEqual(module.APP_ENV, 'production')

    def test_defaults_to_development(self):
        module = self.load_settings()

        self.assertEqual(module.APP_ENV, 'development')
