from django.db import IntegrityError, OperationalError, ProgrammingError
from django.test import Client, TestCase
from unittest.mock import patch
import json

from catalog.models import Service
from .models import BlockedTimeSlot, Booking


VALID_BOOKING = {
    'name': 'Layla Haddad',
    'email': 'layla@example.com',
    'phone': '+971501234567',
    'service': 3,
    'date': '2026-03-15',
    'time': '14:00',
}


def post_json(client, path, payload, method='post'):
    return getattr(client, method)(path, data=json.dumps(payload), content_type='application/json')


def login(client):
    return post_json(client, '/api/auth/login', {'username': 'admin', 'password': 'correct-horse'})


class BookingCreationTest(TestCase):
    def setUp(self):
        self.client = Client()

    def test_valid_booking_is_persisted_as_pending(self):
        response = post_json(self.client, '/api/booking', VALID_BOOKING)

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data['success'])
        self.assertEqual(data['message'], 'Booking confirmed!')
        self.assertEqual(data['data']['status'], 'pending')
        for field, value in VALID_BOOKING.items():
            self.assertEqual(data['data'][field], value)

        booking = Booking.objects.get(id=data['data']['id'])
        self.assertEqual(booking.status, 'pending')
        self.assertEqual(booking.service, 3)
        self.assertIsNone(booking.vip_number)

    def test_numeric_string_service_is_coerced(self):
        response = post_json(self.client, '/api/booking', {**VALID_BOOKING, 'service': ' 7 '})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data']['service'], 7)
        self.assertEqual(Booking.objects.get().service, 7)

    def test_vip_number_is_optional_and_stored(self):
        response = post_json(self.client, '/api/booking', {**VALID_BOOKING, 'vipNumber': 'VIP-0042'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data']['vipNumber'], 'VIP-0042')

    def test_missing_fields_are_rejected_and_nothing_is_saved(self):
        for field in ['name', 'email', 'phone', 'service', 'date', 'time']:
            for payload in [
                {k: v for k, v in VALID_BOOKING.items() if k != field},
                {**VALID_BOOKING, field: ''},
            ]:
                with self.subTest(field=field, payload=payload):
                    response = post_json(self.client, '/api/booking', payload)
                    self.assertEqual(response.status_code, 400)
                    self.assertEqual(
                        response.json()['message'],
                        'All fields are required except VIP membership number',
                    )

        self.assertEqual(Booking.objects.count(), 0)

    def test_non_integer_service_is_rejected(self):
        for service in ['facial', '3.5', 2.5, True, ['3'], {'id': 3}]:
            with self.subTest(service=service):
                response = post_json(self.client, '/api/booking', {**VALID_BOOKING, 'service': service})
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()['message'], 'Service must be a valid service ID')

        self.assertEqual(Booking.objects.count(), 0)

    def test_out_of_range_service_is_rejected(self):
        for service in [0, -4, '99999999999', 2 ** 31]:
            with self.subTest(service=service):
                response = post_json(self.client, '/api/booking', {**VALID_BOOKING, 'service': service})
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()['message'], 'Service must be a valid service ID')

        self.assertEqual(Booking.objects.count(), 0)

    def test_non_text_fields_are_rejected(self):
        for field in ['name', 'email', 'phone', 'vipNumber']:
            for value in [['x', 'y'], {'a': 1}, 42]:
                with self.subTest(field=field, value=value):
                    response = post_json(self.client, '/api/booking', {**VALID_BOOKING, field: value})
                    self.assertEqual(response.status_code, 400)
                    self.assertEqual(
                        response.json()['message'],
                        'All fields are required except VIP membership number',
                    )

        self.assertEqual(Booking.objects.count(), 0)

    def test_malformed_date_is_rejected(self):
        for date in ['banana', '2026-03-15T00:00', '15/03/2026', '2026-02-30', ['2026-03-15']]:
            with self.subTest(date=date):
                response = post_json(self.client, '/api/booking', {**VALID_BOOKING, 'date': date})
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()['message'], 'Date must be in YYYY-MM-DD format')

        self.assertEqual(Booking.objects.count(), 0)

    def test_malformed_time_is_rejected(self):
        for time in ['lunch', '25:00', '14h', {'hour': 14}]:
            with self.subTest(time=time):
                response = post_json(self.client, '/api/booking', {**VALID_BOOKING, 'time': time})
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()['message'], 'Time must be in HH:MM format')

        self.assertEqual(Booking.objects.count(), 0)

    def test_time_is_stored_as_hours_and_minutes(self):
        response = post_json(self.client, '/api/booking', {**VALID_BOOKING, 'time': '14:00:00'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(Booking.objects.get().time, '14:00')

        slots = self.client.get('/api/time-slots', {'date': '2026-03-15'}).json()['availableSlots']
        self.assertNotIn('14:00', slots)

    def test_invalid_json_is_rejected(self):
        response = self.client.post('/api/booking', data='name=x', content_type='application/json')

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['message'], 'Invalid JSON')

    def test_get_is_not_allowed(self):
        response = self.client.get('/api/booking')

        self.assertEqual(response.status_code, 405)
        self.assertEqual(response.json()['message'], 'Method not allowed')


class BookingFailureTaxonomyTest(TestCase):
    def setUp(self):
        self.client = Client()

    @patch('bookings.views.Booking.objects.create')
    def test_missing_column_reports_schema_mismatch(self, mock_create):
        mock_create.side_effect = ProgrammingError('column "vip_number" of relation "bookings" does not exist')

        response = post_json(self.client, '/api/booking', VALID_BOOKING)

        self.assertEqual(response.status_code, 500)
        data = response.json()
        self.assertEqual(data['code'], 'BOOKING_SCHEMA_MISMATCH')
        self.assertNotIn('vip_number', data['message'])

    @patch('bookings.views.Booking.objects.create')
    def test_foreign_key_violation_reports_invalid_service(self, mock_create):
        mock_create.side_effect = IntegrityError(
            'insert or update on table "bookings" violates foreign key constraint "bookings_service_id_fkey"'
        )

        response = post_json(self.client, '/api/booking', VALID_BOOKING)

        self.assertEqual(response.status_code, 500)
        data = response.json()
        self.assertEqual(data['code'], 'BOOKING_INVALID_SERVICE')
        self.assertEqual(data['message'], 'The selected service is not valid. Please choose another service.')

    @patch('bookings.views.Booking.objects.create')
    def test_other_database_errors_get_generic_message(self, mock_create):
        mock_create.side_effect = OperationalError('could not connect to server: Connection refused')

        response = post_json(self.client, '/api/booking', VALID_BOOKING)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'message': 'Failed to process booking. Please try again later.'})


class TimeSlotsTest(TestCase):
    def setUp(self):
        self.client = Client()
        Booking.objects.create(**{**VALID_BOOKING, 'time': '10:00'})
        Booking.objects.create(**{**VALID_BOOKING, 'time': '11:00', 'status': 'cancelled'})
        Booking.objects.create(**{**VALID_BOOKING, 'date': '2026-03-16', 'time': '15:00'})
        BlockedTimeSlot.objects.create(date='2026-03-15', time='12:00')

    def test_booked_and_blocked_slots_are_excluded(self):
        response = self.client.get('/api/time-slots', {'date': '2026-03-15'})

        self.assertEqual(response.status_code, 200)
        slots = response.json()['availableSlots']
        self.assertNotIn('10:00', slots)
        self.assertNotIn('12:00', slots)
        self.assertIn('11:00', slots)
        self.assertIn('15:00', slots)
        self.assertEqual(len(slots), 8)

    def test_date_is_required(self):
        response = self.client.get('/api/time-slots')

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['message'], 'Date parameter is required')

    def test_malformed_date_is_rejected(self):
        response = self.client.get('/api/time-slots', {'date': '15/03/2026'})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['message'], 'Date must be in YYYY-MM-DD format')


class AppointmentTest(TestCase):
    def setUp(self):
        self.client = Client()
        self.service = Service.objects.create(
            slug='hammam',
            name_en='Moroccan Hammam',
            name_ar='حمام مغربي',
            name_de='Marokkanisches Hammam',
            name_tr='Fas Hamamı',
            description_en='Traditional steam bath.',
            duration=60,
            price=35000,
        )
        self.booking = Booking.objects.create(**{**VALID_BOOKING, 'service': self.service.id})

    def test_check_returns_booking_with_service(self):
        response = post_json(self.client, '/api/appointments/check', {
            'email': 'layla@example.com',
            'appointmentId': self.booking.id,
        })

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['id'], self.booking.id)
        self.assertEqual(data['status'], 'pending')
        self.assertEqual(data['service']['name']['de'], 'Marokkanisches Hammam')
        self.assertEqual(data['service']['duration'], 60)

    def test_check_with_unknown_service_returns_null_service(self):
        booking = Booking.objects.create(**{**VALID_BOOKING, 'service': 9999})

        response = post_json(self.client, '/api/appointments/check', {
            'email': 'layla@example.com',
            'appointmentId': str(booking.id),
        })

        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()['service'])

    def test_check_with_wrong_email_returns_404(self):
        response = post_json(self.client, '/api/appointments/check', {
            'email': 'someone@example.com',
            'appointmentId': self.booking.id,
        })

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['message'], 'Appointment not found')

    def test_check_with_out_of_range_id_returns_404(self):
        response = post_json(self.client, '/api/appointments/check', {
            'email': 'layla@example.com',
            'appointmentId': 10 ** 20,
        })

        self.assertEqual(response.status_code, 404)

    def test_check_requires_fields(self):
        response = post_json(self.client, '/api/appointments/check', {'email': 'layla@example.com'})

        self.assertEqual(response.status_code, 400)

    def test_customer_can_cancel_own_booking(self):
        response = post_json(self.client, '/api/appointments', {
            'id': self.booking.id,
            'email': 'layla@example.com',
            'status': 'cancelled',
        }, method='put')

        self.assertEqual(response.status_code, 200)
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.status, 'cancelled')

    def test_customer_cannot_confirm_booking(self):
        response = post_json(self.client, '/api/appointments', {
            'id': self.booking.id,
            'email': 'layla@example.com',
            'status': 'confirmed',
        }, method='put')

        self.assertEqual(response.status_code, 400)
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.status, 'pending')

    def test_cancel_with_wrong_email_returns_404(self):
        response = post_json(self.client, '/api/appointments', {
            'id': self.booking.id,
            'email': 'other@example.com',
            'status': 'cancelled',
        }, method='put')

        self.assertEqual(response.status_code, 404)


class AppointmentSlotsTest(TestCase):
    def setUp(self):
        self.client = Client()
        self.long_service = Service.objects.create(
            slug='signature-ritual',
            name_en='Signature Ritual',
            description_en='Scrub, wrap and massage.',
            duration=90,
            price=90000,
        )
        Booking.objects.create(**{**VALID_BOOKING, 'service': 9999, 'time': '10:00'})
        Booking.objects.create(**{**VALID_BOOKING, 'time': '13:00', 'status': 'cancelled'})
        BlockedTimeSlot.objects.create(date='2026-03-15', time='15:00')

    def test_half_hour_slots_skip_overlaps(self):
        response = self.client.get('/api/appointments', {'date': '2026-03-15'})

        self.assertEqual(response.status_code, 200)
        slots = response.json()['availableSlots']
        self.assertEqual(slots[0], '09:00')
        self.assertEqual(slots[-1], '18:00')
        for taken in ['09:30', '10:00', '10:30', '14:30', '15:00', '15:30']:
            self.assertNotIn(taken, slots)
        self.assertIn('11:00', slots)
        self.assertIn('13:00', slots)
        self.assertEqual(len(slots), 13)

    def test_service_duration_narrows_the_slots(self):
        response = self.client.get('/api/appointments', {
            'date': '2026-03-15',
            'serviceId': self.long_service.id,
        })

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['availableSlots'], [
            '11:00', '11:30', '12:00', '12:30', '13:00', '13:30',
            '16:00', '16:30', '17:00', '17:30',
        ])

    def test_booking_uses_its_service_duration(self):
        Booking.objects.create(**{**VALID_BOOKING, 'service': self.long_service.id, 'time': '16:00'})

        slots = self.client.get('/api/appointments', {'date': '2026-03-15'}).json()['availableSlots']

        self.assertNotIn('17:00', slots)
        self.assertIn('17:30', slots)

    def test_date_is_required(self):
        response = self.client.get('/api/appointments')

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['message'], 'Date parameter is required')

    def test_invalid_service_id_is_rejected(self):
        response = self.client.get('/api/appointments', {'date': '2026-03-15', 'serviceId': 'facial'})

        self.assertEqual(response.status_code, 400)

    def test_post_is_not_allowed(self):
        response = self.client.post('/api/appointments')

        self.assertEqual(response.status_code, 405)


class AdminBookingRoutesTest(TestCase):
    def setUp(self):
        self.client = Client()
        Booking.objects.create(**VALID_BOOKING)
        Booking.objects.create(**{**VALID_BOOKING, 'time': '16:00', 'status': 'confirmed'})

    def test_admin_routes_require_session(self):
        for path in ['/api/admin/bookings', '/api/admin/dashboard-summary', '/api/admin/blocked-slots']:
            with self.subTest(path=path):
                response = self.client.get(path)
                self.assertEqual(response.status_code, 401)
                self.assertEqual(response.json()['message'], 'Authentication required')

    def test_admin_can_list_bookings(self):
        login(self.client)

        response = self.client.get('/api/admin/bookings')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()), 2)

    def test_dashboard_summary_counts(self):
        BlockedTimeSlot.objects.create(date='2026-03-20', time='10:00')
        login(self.client)

        response = self.client.get('/api/admin/dashboard-summary')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            'totalBookings': 2,
            'confirmed': 1,
            'pending': 1,
            'servicesCount': 0,
            'blockedSlotsCount': 1,
        })

    def test_blocked_slot_lifecycle(self):
        login(self.client)

        created = post_json(self.client, '/api/admin/blocked-slots', {'date': '2026-03-15', 'time': '13:00'})
        self.assertEqual(created.status_code, 201)
        slot_id = created.json()['id']

        slots = self.client.get('/api/time-slots', {'date': '2026-03-15'}).json()['availableSlots']
        self.assertNotIn('13:00', slots)

        listed = self.client.get('/api/admin/blocked-slots')
        self.assertEqual([slot['id'] for slot in listed.json()], [slot_id])

        deleted = self.client.delete(f'/api/admin/blocked-slots?id={slot_id}')
        self.assertEqual(deleted.status_code, 204)
        self.assertFalse(BlockedTimeSlot.objects.exists())

        missing = self.client.delete(f'/api/admin/blocked-slots?id={slot_id}')
        self.assertEqual(missing.status_code, 404)

    def test_blocked_slot_validation(self):
        login(self.client)

        no_time = post_json(self.client, '/api/admin/blocked-slots', {'date': '2026-03-15'})
        bad_id = self.client.delete('/api/admin/blocked-slots?id=abc')

        self.assertEqual(no_time.status_code, 400)
        self.assertEqual(no_time.json()['message'], 'Date and time are required')
        self.assertEqual(bad_id.status_code, 400)
        self.assertEqual(bad_id.json()['message'], 'Valid ID is required')
