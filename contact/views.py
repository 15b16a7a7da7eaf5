from django.http import JsonResponse

from common.http import api_endpoint, parse_json_body, require_fields, require_text

from .models import ContactMessage
from .serializers import ContactMessageSerializer


@api_endpoint('POST', failure_message='Failed to process your request. Please try again later.')
def create_contact(request):
    data = parse_json_body(request)
    fields = require_fields(data, ['name', 'email', 'phone', 'message'], 'All fields are required')
    require_text(fields, 'All fields are required')
    name, email, phone, message = fields

    contact = ContactMessage.objects.create(
        name=name,
        email=email,
        phone=phone,
        message=message,
    )

    return JsonResponse({
        'success': True,
        'message': 'Message received! We will contact you soon.',
        'data': ContactMessageSerializer(contact).data,
    })
