from django.test import Client, SimpleTestCase, TestCase
from unittest.mock import patch
from django.db import OperationalError

from .localization import localized, split_benefits
from .models import MembershipTier, Service, ServiceGroup


def create_tier(tier, **overrides):
    fields = {
        'tier': tier,
        'name_en': f'{tier.title()} Membership',
        'name_ar': 'عضوية',
        'name_de': 'Mitgliedschaft',
        'name_tr': 'Üyelik',
        'description_en': 'Member perks.',
        'benefits_en': '10% off all services|Free herbal tea|Priority booking',
        'benefits_ar': 'خصم 10%|شاي مجاني',
        'price': 50000,
        'discount_percentage': 10,
        'validity': 365,
        'color': '#C0C0C0',
    }
    fields.update(overrides)
    return MembershipTier.objects.create(**fields)


class MembershipQueryTest(TestCase):
    def setUp(self):
        self.client = Client()
        self.silver = create_tier('silver')
        self.gold = create_tier('gold', is_popular=True, discount_percentage=20, benefits_de=None)

    def test_single_tier_is_reshaped_by_language(self):
        response = self.client.get('/api/memberships', {'tier': 'silver'})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['id'], self.silver.id)
        self.assertEqual(data['tier'], 'silver')
        self.assertEqual(data['name'], {
            'en': 'Silver Membership',
            'ar': 'عضوية',
            'de': 'Mitgliedschaft',
            'tr': 'Üyelik',
        })
        self.assertEqual(data['benefits']['en'], ['10% off all services', 'Free herbal tea', 'Priority booking'])
        self.assertEqual(data['benefits']['ar'], ['خصم 10%', 'شاي مجاني'])
        self.assertEqual(data['benefits']['de'], [])
        self.assertEqual(data['benefits']['tr'], [])
        self.assertEqual(data['description']['ar'], None)
        self.assertEqual(data['price'], 50000)
        self.assertEqual(data['discountPercentage'], 10)
        self.assertEqual(data['validity'], 365)
        self.assertEqual(data['color'], '#C0C0C0')
        self.assertFalse(data['isPopular'])

    def test_all_tiers_are_listed_without_tier_parameter(self):
        response = self.client.get('/api/memberships')

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual([tier['tier'] for tier in data], ['silver', 'gold'])
        self.assertTrue(data[1]['isPopular'])
        self.assertEqual(data[1]['discountPercentage'], 20)

    def test_unknown_tier_returns_404(self):
        response = self.client.get('/api/memberships', {'tier': 'unknown-tier'})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['message'], 'Membership tier not found')

    def test_tier_match_is_exact(self):
        response = self.client.get('/api/memberships', {'tier': 'Silver'})

        self.assertEqual(response.status_code, 404)

    def test_post_is_not_allowed(self):
        response = self.client.post('/api/memberships')

        self.assertEqual(response.status_code, 405)

    @patch('catalog.views.MembershipTier.objects.all')
    def test_database_failure_returns_generic_message(self, mock_all):
        mock_all.side_effect = OperationalError('server closed the connection unexpectedly')

        response = self.client.get('/api/memberships')

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'message': 'Failed to retrieve memberships. Please try again later.'})


class ServiceCatalogTest(TestCase):
    def setUp(self):
        self.client = Client()
        self.face = ServiceGroup.objects.create(slug='face', name_en='Face', display_order=2)
        self.body = ServiceGroup.objects.create(slug='body', name_en='Body', name_de='Körper', display_order=1)
        self.facial = Service.objects.create(
            slug='gold-facial',
            category='face',
            group=self.face,
            name_en='24K Gold Facial',
            description_en='Radiance facial with gold leaf.',
            long_description_en='A ninety minute ritual.',
            duration=90,
            price=60000,
            image_url='https://images.example.com/facial.jpg',
        )
        self.retired = Service.objects.create(
            slug='old-peel',
            group=self.face,
            name_en='Old Peel',
            description_en='No longer offered.',
            duration=30,
            price=10000,
            is_active=False,
        )
        self.massage = Service.objects.create(
            slug='hot-stone',
            group=self.body,
            name_en='Hot Stone Massage',
            description_en='Basalt stones.',
            duration=60,
            price=40000,
        )

    def test_services_lists_active_only(self):
        response = self.client.get('/api/services')

        self.assertEqual(response.status_code, 200)
        self.assertEqual([service['slug'] for service in response.json()], ['gold-facial', 'hot-stone'])

    def test_service_by_slug(self):
        response = self.client.get('/api/services', {'slug': 'gold-facial'})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['groupId'], self.face.id)
        self.assertEqual(data['longDescription']['en'], 'A ninety minute ritual.')
        self.assertEqual(data['imageUrl'], 'https://images.example.com/facial.jpg')
        self.assertIsNone(data['imageLarge'])

    def test_unknown_service_returns_404(self):
        response = self.client.get('/api/services', {'slug': 'nope'})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['message'], 'Service not found')

    def test_inactive_service_is_not_found_by_slug(self):
        response = self.client.get('/api/services', {'slug': 'old-peel'})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['message'], 'Service not found')

    def test_service_groups_are_ordered_with_active_services(self):
        response = self.client.get('/api/service-groups')

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual([group['slug'] for group in data], ['body', 'face'])
        self.assertEqual(data[0]['name']['de'], 'Körper')
        self.assertEqual([service['slug'] for service in data[1]['services']], ['gold-facial'])

    def test_service_group_by_slug(self):
        response = self.client.get('/api/service-groups', {'slug': 'body'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['services'][0]['name']['en'], 'Hot Stone Massage')

    def test_unknown_service_group_returns_404(self):
        response = self.client.get('/api/service-groups', {'slug': 'hair'})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['message'], 'Service group not found')


class LocalizationTest(SimpleTestCase):
    def test_split_benefits(self):
        self.assertEqual(split_benefits('a|b|c'), ['a', 'b', 'c'])
        self.assertEqual(split_benefits('single'), ['single'])
        self.assertEqual(split_benefits(None), [])
        self.assertEqual(split_benefits(''), [])

    def test_localized_keys(self):
        self.assertEqual(localized('a', 'b', 'c', 'd'), {'en': 'a', 'ar': 'b', 'de': 'c', 'tr': 'd'})
