from django.test import TestCase
from django.urls import reverse
from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.test import APITestCase
from events.models import InterestCategory
from .models import UserProfile, FollowRelation, UserInterest

User = get_user_model()

class UserProfileTests(TestCase):
    def setUp(self):
        self.user1 = User.objects.create_user(username='user1', password='password123')
        self.user2 = User.objects.create_user(username='user2', password='password123')

        self.profile1 = UserProfile.objects.create(user=self.user1)
        self.profile2 = UserProfile.objects.create(user=self.user2)

    def test_follow_success(self):
        """Test that one user can successfully follow another."""
        self.profile1.follow(self.profile2)

        # Refresh from DB to get updated F() expression values
        self.profile1.refresh_from_db()
        self.profile2.refresh_from_db()

        self.assertEqual(self.profile1.following_count, 1)
        self.assertEqual(self.profile2.followers_count, 1)

        self.assertTrue(self.profile1.is_following(self.profile2))
        self.assertTrue(FollowRelation.objects.filter(follower=self.profile1, following=self.profile2).exists())

    def test_unfollow_success(self):
        """Test that one user can successfully unfollow another."""
        self.profile1.follow(self.profile2)
        self.profile1.unfollow(self.profile2)

        self.profile1.refresh_from_db()
        self.profile2.refresh_from_db()

        self.assertEqual(self.profile1.following_count, 0)
        self.assertEqual(self.profile2.followers_count, 0)
        self.assertFalse(self.profile1.is_following(self.profile2))

    def test_cannot_follow_self(self):
        """Test that a user cannot follow themselves."""
        self.profile1.follow(self.profile1)

        self.profile1.refresh_from_db()
        self.assertEqual(self.profile1.following_count, 0)
        self.assertEqual(self.profile1.followed_ids(), set())

    def test_followed_ids(self):
        self.profile1.follow(self.profile2)
        self.assertEqual(self.profile1.followed_ids(), {self.profile2.id})
        self.assertEqual(self.profile2.followed_ids(), set())

    def test_set_interests_replaces_previous(self):
        """Test that setting interests replaces the previous set and ignores duplicates."""
        self.profile1.set_interests(['SPORTS', 'TRAVEL'])
        self.assertEqual(self.profile1.interest_keys(), {'SPORTS', 'TRAVEL'})

        self.profile1.set_interests([InterestCategory.MUSIC_CONCERTS, 'MUSIC_CONCERTS'])
        self.assertEqual(self.profile1.interest_keys(), {'MUSIC_CONCERTS'})
        self.assertEqual(UserInterest.objects.filter(user=self.profile1).count(), 1)

    def test_set_interests_rejects_unknown_tag(self):
        with self.assertRaises(ValueError):
            self.profile1.set_interests(['KNITTING'])
        self.assertEqual(self.profile1.interest_keys(), set())

class UserAPITests(APITestCase):
    def setUp(self):
        self.user1 = User.objects.create_user(username='api_user1', password='password123')
        self.profile1 = UserProfile.objects.create(user=self.user1)

        self.user2 = User.objects.create_user(username='api_user2', password='password123')
        self.profile2 = UserProfile.objects.create(user=self.user2)

        # Authenticate as user1 for these tests
        self.client.force_authenticate(user=self.user1)

    def test_get_profile(self):
        self.profile2.set_interests(['FITNESS'])
        url = reverse('profile', args=[self.profile2.id])
        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['username'], 'api_user2')
        self.assertEqual(response.data['interests'], ['FITNESS'])

    def test_follow_endpoint(self):
        """Test the follow API endpoint."""
        url = reverse('follow', args=[self.profile2.id])
        response = self.client.post(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['success'])
        self.assertTrue(self.profile1.is_following(self.profile2))

    def test_follow_self_endpoint(self):
        url = reverse('follow', args=[self.profile1.id])
        response = self.client.post(url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data['success'])

    def test_unfollow_endpoint(self):
        """Test the unfollow API endpoint."""
        self.profile1.follow(self.profile2)

        url = reverse('unfollow', args=[self.profile2.id])
        response = self.client.post(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(self.profile1.is_following(self.profile2))

    def test_cannot_follow_already_followed(self):
        """Test that following the same user twice does not increment count or create duplicate relations."""
        self.profile1.follow(self.profile2)
        self.profile1.follow(self.profile2)

        self.profile1.refresh_from_db()
        self.profile2.refresh_from_db()

        self.assertEqual(self.profile1.following_count, 1)
        self.assertEqual(self.profile2.followers_count, 1)
        self.assertEqual(FollowRelation.objects.count(), 1)

    def test_update_interests(self):
        url = reverse('interests', args=[self.profile1.id])
        response = self.client.put(url, {'interests': ['TECHNOLOGY', 'SPORTS']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['interests'], ['SPORTS', 'TECHNOLOGY'])

        response = self.client.get(url)
        self.assertEqual(response.data['interests'], ['SPORTS', 'TECHNOLOGY'])

    def test_update_interests_unknown_tag(self):
        url = reverse('interests', args=[self.profile1.id])
        response = self.client.put(url, {'interests': ['KNITTING']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_update_other_users_interests_forbidden(self):
        url = reverse('interests', args=[self.profile2.id])
        response = self.client.put(url, {'interests': ['SPORTS']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self.profile2.interest_keys(), set())
