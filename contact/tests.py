from django.db import IntegrityError
from django.test import Client, TestCase
from unittest.mock import patch
import json

from .models import ContactMessage


VALID_MESSAGE = {
    'name': 'Jonas Weber',
    'email': 'jonas@example.com',
    'phone': '+4915112345678',
    'message': 'Do you offer couples massages on Sundays?',
}


class ContactSubmissionTest(TestCase):
    def setUp(self):
        self.client = Client()

    def post(self, payload):
        return self.client.post('/api/contact', data=json.dumps(payload), content_type='application/json')

    def test_valid_message_is_persisted(self):
        response = self.post(VALID_MESSAGE)

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data['success'])
        self.assertEqual(data['message'], 'Message received! We will contact you soon.')
        for field, value in VALID_MESSAGE.items():
            self.assertEqual(data['data'][field], value)

        contact = ContactMessage.objects.get(id=data['data']['id'])
        self.assertFalse(contact.is_responded)

    def test_missing_fields_are_rejected(self):
        for field in VALID_MESSAGE:
            with self.subTest(field=field):
                payload = {k: v for k, v in VALID_MESSAGE.items() if k != field}
                response = self.post(payload)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()['message'], 'All fields are required')

        self.assertEqual(ContactMessage.objects.count(), 0)

    def test_non_text_fields_are_rejected(self):
        for field in VALID_MESSAGE:
            for value in [['x', 'y'], {'a': 1}, 7]:
                with self.subTest(field=field, value=value):
                    response = self.post({**VALID_MESSAGE, field: value})
                    self.assertEqual(response.status_code, 400)
                    self.assertEqual(response.json()['message'], 'All fields are required')

        self.assertEqual(ContactMessage.objects.count(), 0)

    @patch('contact.views.ContactMessage.objects.create')
    def test_database_failure_returns_generic_message(self, mock_create):
        mock_create.side_effect = IntegrityError('null value in column "phone" violates not-null constraint')

        response = self.post(VALID_MESSAGE)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'message': 'Failed to process your request. Please try again later.'})

    def test_get_is_not_allowed(self):
        response = self.client.get('/api/contact')

        self.assertEqual(response.status_code, 405)
        self.assertEqual(response.json()['message'], 'Method not allowed')

    def test_options_returns_empty_200(self):
        response = self.client.options('/api/contact')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, b'')
