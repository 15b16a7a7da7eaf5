import datetime
import logging

from django.db import DatabaseError
from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from accounts.decorators import admin_required
from catalog.localization import localized
from catalog.models import Service
from common.errors import NotFoundError, PersistenceError, ValidationError
from common.http import api_endpoint, parse_json_body, require_fields, require_text

from .models import BlockedTimeSlot, Booking
from .serializers import BlockedTimeSlotSerializer, BookingSerializer

logger = logging.getLogger(__name__)

BOOKING_FAILURE_MESSAGE = 'Failed to process booking. Please try again later.'

MISSING_COLUMN_MARKERS = ('does not exist', 'no column', 'no such column', 'unknown column')

ALL_TIME_SLOTS = [
    '10:00', '11:00', '12:00', '13:00', '14:00',
    '15:00', '16:00', '17:00', '18:00', '19:00',
]

# Appointment availability: 30 minute starts between opening and closing.
OPENING_MINUTE = 9 * 60
CLOSING_MINUTE = 19 * 60
SLOT_INTERVAL = 30
DEFAULT_DURATION = 60

# Largest value an integer primary key column holds.
MAX_ROW_ID = 2 ** 31 - 1


def parse_service_id(value):
    """Coerce a submitted service reference to an int, or raise ``ValidationError``."""
    invalid = ValidationError('Service must be a valid service ID')
    if isinstance(value, bool):
        raise invalid
    if isinstance(value, float):
        if not value.is_integer():
            raise invalid
        value = int(value)
    elif isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise invalid
    elif not isinstance(value, int):
        raise invalid
    if not 0 < value <= MAX_ROW_ID:
        raise invalid
    return value


def booking_failure(error):
    """Map a database error raised while saving a booking to a client-safe error."""
    text = str(error).lower()
    if 'column' in text and any(marker in text for marker in MISSING_COLUMN_MARKERS):
        return PersistenceError(
            'Booking could not be saved due to a server configuration issue. Please contact us directly.',
            code='BOOKING_SCHEMA_MISMATCH',
        )
    if 'foreign key' in text:
        return PersistenceError(
            'The selected service is not valid. Please choose another service.',
            code='BOOKING_INVALID_SERVICE',
        )
    return PersistenceError(BOOKING_FAILURE_MESSAGE)


def parse_date(value):
    if not value:
        raise ValidationError('Date parameter is required')
    if not isinstance(value, str):
        raise ValidationError('Date must be in YYYY-MM-DD format')
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise ValidationError('Date must be in YYYY-MM-DD format')


def parse_time(value):
    """Return ``value`` normalised to ``HH:MM``, or raise ``ValidationError``."""
    if not isinstance(value, str):
        raise ValidationError('Time must be in HH:MM format')
    try:
        parsed = datetime.time.fromisoformat(value.strip())
    except ValueError:
        raise ValidationError('Time must be in HH:MM format')
    return parsed.strftime('%H:%M')


def to_minutes(value):
    hours, minutes = value[:5].split(':')
    return int(hours) * 60 + int(minutes)


@api_endpoint('POST', failure_message=BOOKING_FAILURE_MESSAGE)
def create_booking(request):
    message = 'All fields are required except VIP membership number'
    data = parse_json_body(request)
    name, email, phone, service, date, time = require_fields(
        data,
        ['name', 'email', 'phone', 'service', 'date', 'time'],
        message,
    )
    vip_number = data.get('vipNumber') or None
    require_text([name, email, phone], message)
    if vip_number is not None:
        require_text([vip_number], message)

    service_id = parse_service_id(service)
    day = parse_date(date).isoformat()
    start = parse_time(time)

    try:
        booking = Booking.objects.create(
            name=name,
            email=email,
            phone=phone,
            service=service_id,
            date=day,
            time=start,
            vip_number=vip_number,
            status='pending',
        )
    except DatabaseError as e:
        logger.exception('Error processing booking')
        raise booking_failure(e)

    return JsonResponse({
        'success': True,
        'message': 'Booking confirmed!',
        'data': BookingSerializer(booking).data,
    })


@api_endpoint('GET', failure_message='Failed to retrieve available time slots. Please try again later.')
def time_slots(request):
    day = parse_date(request.GET.get('date')).isoformat()

    booked = Booking.objects.filter(date=day).exclude(status='cancelled').values_list('time', flat=True)
    blocked = BlockedTimeSlot.objects.filter(date=day).values_list('time', flat=True)
    taken = {slot[:5] for slot in list(booked) + list(blocked)}

    return JsonResponse({'availableSlots': [slot for slot in ALL_TIME_SLOTS if slot not in taken]})


@api_endpoint('GET', failure_message='Failed to retrieve available time slots. Please try again later.')
def appointment_slots(request):
    """List 30 minute start times on a date that fit the requested service.

    A start is offered when the whole service, ``serviceId``'s duration or an
    hour, ends by closing time and overlaps no live booking or blocked slot.
    """
    day = parse_date(request.GET.get('date')).isoformat()

    duration = DEFAULT_DURATION
    if request.GET.get('serviceId'):
        service = Service.objects.filter(id=parse_service_id(request.GET['serviceId'])).first()
        if service is not None:
            duration = service.duration

    bookings = list(Booking.objects.filter(date=day).exclude(status='cancelled'))
    durations = dict(
        Service.objects.filter(id__in={booking.service for booking in bookings}).values_list('id', 'duration')
    )
    busy = [
        (to_minutes(booking.time), to_minutes(booking.time) + durations.get(booking.service, DEFAULT_DURATION))
        for booking in bookings
    ]
    busy += [
        (to_minutes(time), to_minutes(time) + DEFAULT_DURATION)
        for time in BlockedTimeSlot.objects.filter(date=day).values_list('time', flat=True)
    ]

    available = []
    for start in range(OPENING_MINUTE, CLOSING_MINUTE - duration + 1, SLOT_INTERVAL):
        end = start + duration
        if any(start < busy_end and busy_start < end for busy_start, busy_end in busy):
            continue
        available.append('%02d:%02d' % divmod(start, 60))

    return JsonResponse({'availableSlots': available})


@csrf_exempt
def appointments(request):
    if request.method == 'GET':
        return appointment_slots(request)
    return update_appointment(request)


def find_customer_booking(booking_id, email):
    try:
        booking_id = int(booking_id)
    except (TypeError, ValueError):
        raise NotFoundError('Appointment not found')
    if not isinstance(email, str) or not 0 < booking_id <= MAX_ROW_ID:
        raise NotFoundError('Appointment not found')

    booking = Booking.objects.filter(id=booking_id, email=email).first()
    if booking is None:
        raise NotFoundError('Appointment not found')
    return booking


@api_endpoint('POST', failure_message='Failed to check appointment status. Please try again later.')
def check_appointment(request):
    data = parse_json_body(request)
    email, appointment_id = require_fields(
        data, ['email', 'appointmentId'], 'Email and appointment ID are required'
    )
    booking = find_customer_booking(appointment_id, email)

    service = Service.objects.filter(id=booking.service).first()
    return JsonResponse({
        'id': booking.id,
        'name': booking.name,
        'email': booking.email,
        'phone': booking.phone,
        'date': booking.date,
        'time': booking.time,
        'service': {
            'id': service.id,
            'name': localized(service.name_en, service.name_ar, service.name_de, service.name_tr),
            'price': service.price,
            'duration': service.duration,
        } if service else None,
        'status': booking.status,
        'createdAt': booking.created_at.isoformat(),
    })


@api_endpoint('PUT', failure_message='Failed to update appointment. Please try again later.')
def update_appointment(request):
    data = parse_json_body(request)
    booking_id, email, status = require_fields(
        data, ['id', 'email', 'status'], 'Appointment ID, email, and status are required'
    )
    if status != 'cancelled':
        raise ValidationError('Appointments can only be cancelled')

    booking = find_customer_booking(booking_id, email)
    booking.status = status
    booking.save(update_fields=['status', 'updated_at'])

    return JsonResponse({
        'success': True,
        'message': 'Appointment cancelled successfully',
    })


@api_endpoint('GET', failure_message='An error occurred while processing the request')
@admin_required
def admin_bookings(request):
    bookings = Booking.objects.all()
    return JsonResponse(BookingSerializer(bookings, many=True).data, safe=False)


@api_endpoint('GET', failure_message='Failed to retrieve dashboard summary. Please try again later.')
@admin_required
def dashboard_summary(request):
    return JsonResponse({
        'totalBookings': Booking.objects.count(),
        'confirmed': Booking.objects.filter(status='confirmed').count(),
        'pending': Booking.objects.filter(status='pending').count(),
        'servicesCount': Service.objects.count(),
        'blockedSlotsCount': BlockedTimeSlot.objects.count(),
    })


@api_endpoint('GET', 'POST', 'DELETE', failure_message='Failed to process blocked time slots. Please try again later.')
@admin_required
def blocked_slots(request):
    if request.method == 'POST':
        data = parse_json_body(request)
        date, time = require_fields(data, ['date', 'time'], 'Date and time are required')
        slot = BlockedTimeSlot.objects.create(date=parse_date(date).isoformat(), time=parse_time(time))
        logger.info('Blocked time slot %s created for %s %s', slot.id, slot.date, slot.time)
        return JsonResponse(BlockedTimeSlotSerializer(slot).data, status=201)

    if request.method == 'DELETE':
        try:
            slot_id = int(request.GET.get('id', ''))
        except ValueError:
            raise ValidationError('Valid ID is required')
        deleted, _ = BlockedTimeSlot.objects.filter(id=slot_id).delete()
        if not deleted:
            raise NotFoundError('Blocked time slot not found')
        logger.info('Blocked time slot %s deleted', slot_id)
        return HttpResponse(status=204)

    slots = BlockedTimeSlot.objects.all()
    return JsonResponse(BlockedTimeSlotSerializer(slots, many=True).data, safe=False)
