from django.db.models import Prefetch
from django.http import JsonResponse

from common.errors import NotFoundError
from common.http import api_endpoint

from .models import MembershipTier, Service, ServiceGroup
from .serializers import MembershipTierSerializer, ServiceGroupSerializer, ServiceSerializer


@api_endpoint('GET', failure_message='Failed to retrieve memberships. Please try again later.')
def memberships(request):
    tier = request.GET.get('tier')

    if tier:
        membership = MembershipTier.objects.filter(tier=tier).first()
        if membership is None:
            raise NotFoundError('Membership tier not found')
        return JsonResponse(MembershipTierSerializer(membership).data)

    tiers = MembershipTier.objects.all()
    return JsonResponse(MembershipTierSerializer(tiers, many=True).data, safe=False)


@api_endpoint('GET', failure_message='Failed to retrieve services. Please try again later.')
def services(request):
    slug = request.GET.get('slug')

    if slug:
        service = Service.objects.filter(slug=slug, is_active=True).first()
        if service is None:
            raise NotFoundError('Service not found')
        return JsonResponse(ServiceSerializer(service).data)

    active = Service.objects.filter(is_active=True)
    return JsonResponse(ServiceSerializer(active, many=True).data, safe=False)


@api_endpoint('GET', failure_message='Failed to retrieve service groups. Please try again later.')
def service_groups(request):
    slug = request.GET.get('slug')
    groups = ServiceGroup.objects.prefetch_related(
        Prefetch('services', queryset=Service.objects.order_by('id'))
    )

    if slug:
        group = groups.filter(slug=slug).first()
        if group is None:
            raise NotFoundError('Service group not found')
        return JsonResponse(ServiceGroupSerializer(group).data)

    return JsonResponse(ServiceGroupSerializer(groups, many=True).data, safe=False)
