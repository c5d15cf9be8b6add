from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase
from django.contrib.auth import get_user_model
from user.models import UserProfile
from .models import Event, EventTag, InterestCategory

User = get_user_model()


def make_profile(username):
    return UserProfile.objects.create(user=User.objects.create_user(username=username, password='password'))


class InterestCategoryTests(TestCase):
    def test_keys_are_stable(self):
        self.assertEqual(InterestCategory.SPORTS.value, 'SPORTS')
        self.assertEqual(len(InterestCategory.values), 10)

    def test_from_display_name(self):
        self.assertEqual(InterestCategory.from_display_name('music & concerts'), InterestCategory.MUSIC_CONCERTS)

    def test_from_unknown_display_name(self):
        with self.assertRaises(ValueError):
            InterestCategory.from_display_name('Knitting')


class EventModelTests(TestCase):
    def setUp(self):
        self.organizer = make_profile('organizer')

    def test_create_event(self):
        event = Event.objects.create(
            title="Jazz Night",
            created_by=self.organizer,
            latitude=27.7172,
            longitude=85.3240,
        )
        self.assertEqual(event.status, Event.Status.ACTIVE)
        self.assertEqual(event.get_lat_lon(), (27.7172, 85.3240))

    def test_event_without_location(self):
        event = Event.objects.create(title="Online Meetup", created_by=self.organizer)
        self.assertIsNone(event.get_lat_lon())

    def test_latitude_without_longitude(self):
        """Test that a half-specified location is rejected on save."""
        event = Event(title="Broken", created_by=self.organizer, latitude=10.0)
        with self.assertRaises(ValueError):
            event.save()

    def test_invalid_coordinates(self):
        event = Event(title="Bad", created_by=self.organizer, latitude=100.0, longitude=200.0)
        with self.assertRaises(ValueError):
            event.save()

    def test_tag_keys(self):
        event = Event.objects.create(title="Match", created_by=self.organizer)
        EventTag.objects.create(event=event, tag=InterestCategory.SPORTS)
        EventTag.objects.create(event=event, tag=InterestCategory.OUTDOORS)
        self.assertEqual(event.tag_keys(), {'SPORTS', 'OUTDOORS'})


class EventAPITests(APITestCase):
    def setUp(self):
        self.organizer = make_profile('api_organizer')
        self.active = Event.objects.create(title="Active", created_by=self.organizer)
        EventTag.objects.create(event=self.active, tag=InterestCategory.TRAVEL)
        self.cancelled = Event.objects.create(
            title="Cancelled", created_by=self.organizer, status=Event.Status.CANCELLED
        )

    def test_list_only_active_events(self):
        response = self.client.get(reverse('events:event-list'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ids = [item['id'] for item in response.data]
        self.assertEqual(ids, [str(self.active.id)])
        self.assertEqual(response.data[0]['tags'], ['TRAVEL'])
        self.assertEqual(response.data[0]['organizer_name'], 'api_organizer')

    def test_retrieve_cancelled_event_not_found(self):
        response = self.client.get(reverse('events:event-detail', args=[self.cancelled.id]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_interest_categories(self):
        response = self.client.get(reverse('events:interest-categories'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['interests']), len(InterestCategory.values))
        self.assertIn(
            {'name': 'FOOD_DRINK', 'display_name': 'Food & Drink'},
            [dict(item) for item in response.data['interests']],
        )
