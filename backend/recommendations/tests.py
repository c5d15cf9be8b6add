"""
Tests for the recommendations module.
"""
import math
import uuid
from datetime import datetime, timedelta, timezone as dt_timezone

from django.contrib.auth.models import User
from django.test import SimpleTestCase, TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from events.models import Event, EventEnrollment, EventInterest, EventTag, InterestCategory
from recommendations.calculators import GeoDistanceCalculator, SimilarityCalculator, SocialBoostCalculator
from recommendations.catalog import EventCatalog
from recommendations.dtos import CandidateEvent, ScoredEvent, UserProfileDTO
from recommendations.exceptions import RecommendationCancelled, UserNotFound
from recommendations.ranker import RecommendationRanker
from recommendations.scoring_service import ScoringEngine
from user.models import UserProfile

BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=dt_timezone.utc)

# Latitude offset (degrees) of a point 2 km due north of the equator origin
TWO_KM_NORTH = math.degrees(2.0 / GeoDistanceCalculator.EARTH_RADIUS_KM)


def make_event(event_id, creator_id='creator', tags=(), lat=None, lon=None, minutes_ago=0, load_tags=True):
    return CandidateEvent(
        event_id=event_id,
        creator_id=creator_id,
        created_at=BASE_TIME - timedelta(minutes=minutes_ago),
        latitude=lat,
        longitude=lon,
        tags=frozenset(tags) if load_tags else None,
        title=f"Event {event_id}",
    )


class FakeSource:
    """In-memory collaborator recording which reads were made."""

    def __init__(self, interests=None, follows=None, events=None, attendees=None,
                 interested=None, event_tags=None):
        self.interests = interests or {}
        self.follows = follows or {}
        self.events = events or []
        self.attendees = attendees or {}
        self.interested = interested or {}
        self.event_tags = event_tags or {}
        self.calls = []

    def get_user_interest_tags(self, user_id):
        self.calls.append('get_user_interest_tags')
        if user_id not in self.interests:
            raise UserNotFound(user_id)
        return set(self.interests[user_id])

    def get_followed_user_ids(self, user_id):
        self.calls.append('get_followed_user_ids')
        return set(self.follows.get(user_id, ()))

    def get_active_events(self):
        self.calls.append('get_active_events')
        return list(self.events)

    def get_event_tags(self, event_id):
        self.calls.append('get_event_tags')
        return set(self.event_tags.get(event_id, ()))

    def get_attendee_ids(self, event_id):
        self.calls.append('get_attendee_ids')
        return set(self.attendees.get(event_id, ()))

    def get_interested_user_ids(self, event_id):
        self.calls.append('get_interested_user_ids')
        return set(self.interested.get(event_id, ()))


class SimilarityCalculatorTestCase(SimpleTestCase):
    """Test cases for Jaccard similarity"""

    def test_identical_sets(self):
        self.assertEqual(SimilarityCalculator.similarity({'SPORTS', 'TRAVEL'}, {'SPORTS', 'TRAVEL'}), 1.0)

    def test_empty_sets_score_zero(self):
        self.assertEqual(SimilarityCalculator.similarity(set(), set()), 0.0)

    def test_one_empty_set(self):
        self.assertEqual(SimilarityCalculator.similarity({'SPORTS'}, set()), 0.0)

    def test_partial_overlap(self):
        score = SimilarityCalculator.similarity({'SPORTS', 'TRAVEL'}, {'SPORTS', 'FITNESS', 'OUTDOORS'})
        self.assertAlmostEqual(score, 0.25)

    def test_disjoint_sets(self):
        self.assertEqual(SimilarityCalculator.similarity({'SPORTS'}, {'TRAVEL'}), 0.0)

    def test_symmetry(self):
        pairs = [
            ({'SPORTS'}, {'SPORTS', 'TRAVEL'}),
            ({'ART_SHOWS', 'EDUCATION'}, {'EDUCATION', 'TECHNOLOGY', 'FITNESS'}),
            (set(), {'SPORTS'}),
        ]
        for a, b in pairs:
            self.assertEqual(SimilarityCalculator.similarity(a, b), SimilarityCalculator.similarity(b, a))


class GeoDistanceCalculatorTestCase(SimpleTestCase):
    """Test cases for haversine distance"""

    def test_identical_coordinates(self):
        self.assertEqual(GeoDistanceCalculator.distance_km(27.7172, 85.3240, 27.7172, 85.3240), 0.0)
        self.assertEqual(GeoDistanceCalculator.distance_km(-33.86, 151.2, -33.86, 151.2), 0.0)

    def test_one_degree_of_latitude(self):
        distance = GeoDistanceCalculator.distance_km(0.0, 0.0, 1.0, 0.0)
        self.assertAlmostEqual(distance, 2 * math.pi * 6371.0 / 360, places=6)

    def test_known_city_distance(self):
        # Kathmandu -> Pokhara is roughly 140 km in a straight line
        distance = GeoDistanceCalculator.distance_km(27.7172, 85.3240, 28.2096, 83.9856)
        self.assertGreater(distance, 135)
        self.assertLess(distance, 150)

    def test_antipodal_points(self):
        distance = GeoDistanceCalculator.distance_km(0.0, 0.0, 0.0, 180.0)
        self.assertAlmostEqual(distance, math.pi * 6371.0, places=3)

    def test_symmetry(self):
        forward = GeoDistanceCalculator.distance_km(40.7128, -74.0060, 51.5074, -0.1278)
        backward = GeoDistanceCalculator.distance_km(51.5074, -0.1278, 40.7128, -74.0060)
        self.assertEqual(forward, backward)


class SocialBoostCalculatorTestCase(SimpleTestCase):
    """Test cases for the social boost"""

    def setUp(self):
        self.calculator = SocialBoostCalculator()
        self.event = make_event('e1', creator_id='alice')

    def test_no_follows(self):
        self.assertEqual(self.calculator.social_boost(self.event, set(), {'bob', 'carol'}), 0.0)

    def test_followed_creator(self):
        self.assertAlmostEqual(self.calculator.social_boost(self.event, {'alice'}, set()), 0.12)

    def test_one_followed_attendee(self):
        boost = self.calculator.social_boost(self.event, {'bob'}, {'bob', 'stranger'})
        self.assertAlmostEqual(boost, 0.2 * 0.4 / 3)

    def test_full_boost(self):
        """Creator followed and 3 followed attendees gives exactly SOCIAL_BOOST"""
        boost = self.calculator.social_boost(self.event, {'alice', 'bob', 'carol', 'dave'}, {'bob', 'carol', 'dave'})
        self.assertAlmostEqual(boost, 0.2)

    def test_attendance_saturates(self):
        followed = {'alice'} | {f'user{i}' for i in range(10)}
        attendees = {f'user{i}' for i in range(10)}
        boost = self.calculator.social_boost(self.event, followed, attendees)
        self.assertAlmostEqual(boost, 0.2)
        self.assertLessEqual(boost, 0.2 + 1e-12)

    def test_social_score(self):
        score = self.calculator.social_score(
            self.event,
            followed_ids={'alice', 'bob', 'carol'},
            interested_ids={'bob'},
            attendee_ids={'carol'},
        )
        self.assertAlmostEqual(score, 0.4 + 0.35 / 5 + 0.25 / 3)

    def test_social_score_caps(self):
        followed = {'alice'} | {f'user{i}' for i in range(6)}
        everyone = {f'user{i}' for i in range(6)}
        score = self.calculator.social_score(self.event, followed, everyone, everyone)
        self.assertAlmostEqual(score, 1.0)


class ScoringEngineTestCase(SimpleTestCase):
    """Test cases for ScoringEngine"""

    def setUp(self):
        self.engine = ScoringEngine()
        self.user = UserProfileDTO(user_id='u', interest_tags=frozenset({'MUSIC_CONCERTS', 'SPORTS'}))

    def test_location_score_bounds(self):
        self.assertEqual(self.engine.location_score(0.0), 1.0)
        self.assertEqual(self.engine.location_score(10.0), 0.0)
        self.assertEqual(self.engine.location_score(25.0), 0.0)
        self.assertAlmostEqual(self.engine.location_score(5.0), 0.5)

    def test_location_score_strictly_decreasing(self):
        scores = [self.engine.location_score(d / 2) for d in range(0, 21)]
        for closer, farther in zip(scores, scores[1:]):
            self.assertGreater(closer, farther)

    def test_scenario_full_signals(self):
        """Followed creator, 3 followed attendees, 2 km away, one of three tags shared -> 0.7"""
        event = make_event('e1', creator_id='c', tags={'MUSIC_CONCERTS', 'ART_SHOWS'}, lat=TWO_KM_NORTH, lon=0.0)
        followed = frozenset({'c', 'a1', 'a2', 'a3'})
        attendees = frozenset({'a1', 'a2', 'a3'})

        score, breakdown = self.engine.score_breakdown(self.user, event, 0.0, 0.0, followed, attendees)

        self.assertAlmostEqual(breakdown.content_score, 1 / 3)
        self.assertAlmostEqual(breakdown.distance_km, 2.0, places=9)
        self.assertAlmostEqual(breakdown.location_score, 0.8, places=9)
        self.assertAlmostEqual(breakdown.social_boost, 0.2)
        self.assertAlmostEqual(score, 0.7, places=9)

    def test_scenario_no_signals(self):
        event = make_event('e2', creator_id='stranger')
        score = self.engine.score(self.user, event, 0.0, 0.0, frozenset({'c'}), frozenset())
        self.assertEqual(score, 0.0)

    def test_missing_user_coordinates(self):
        event = make_event('e3', tags={'SPORTS'}, lat=0.0, lon=0.0)
        score, breakdown = self.engine.score_breakdown(self.user, event, None, None, frozenset(), frozenset())
        self.assertEqual(breakdown.location_score, 0.0)
        self.assertIsNone(breakdown.distance_km)
        self.assertAlmostEqual(score, 0.3 * 0.5)

    def test_deterministic(self):
        event = make_event('e4', creator_id='c', tags={'SPORTS'}, lat=0.01, lon=0.01)
        args = (self.user, event, 0.0, 0.0, frozenset({'c'}), frozenset({'x'}))
        self.assertEqual(self.engine.score(*args), self.engine.score(*args))

    def test_score_within_bounds(self):
        event = make_event('e5', creator_id='c', tags={'MUSIC_CONCERTS', 'SPORTS'}, lat=0.0, lon=0.0)
        followed = frozenset({'c', 'a1', 'a2', 'a3'})
        score = self.engine.score(self.user, event, 0.0, 0.0, followed, followed)
        self.assertAlmostEqual(score, self.engine.max_score)
        self.assertAlmostEqual(self.engine.max_score, 1.0)

    def test_unnormalized_weights_warn(self):
        with self.assertLogs('recommendations.scoring_service', level='WARNING'):
            ScoringEngine(alpha=0.8, beta=0.5)

    @override_settings(RECOMMENDATIONS={'ALPHA': 0.4, 'MAX_DISTANCE_KM': 20.0})
    def test_from_settings(self):
        engine = ScoringEngine.from_settings()
        self.assertEqual(engine.ALPHA, 0.4)
        self.assertEqual(engine.BETA, 0.5)
        self.assertEqual(engine.SOCIAL_BOOST, 0.2)
        self.assertAlmostEqual(engine.location_score(10.0), 0.5)


class RecommendationRankerTestCase(SimpleTestCase):
    """Test cases for RecommendationRanker against an in-memory source"""

    def setUp(self):
        self.user_id = 'u'

    def ranker(self, source, **kwargs):
        return RecommendationRanker(source, ScoringEngine(), **kwargs)

    def test_unknown_user(self):
        source = FakeSource(interests={})
        with self.assertRaises(UserNotFound):
            self.ranker(source).recommend('ghost')

    def test_scenario_ranking(self):
        e1 = make_event('e1', creator_id='c', tags={'MUSIC_CONCERTS', 'ART_SHOWS'}, lat=TWO_KM_NORTH, lon=0.0)
        e2 = make_event('e2', creator_id='stranger')
        e3 = make_event('e3', creator_id='stranger', tags={'SPORTS'})
        source = FakeSource(
            interests={'u': {'MUSIC_CONCERTS', 'SPORTS'}},
            follows={'u': {'c', 'a1', 'a2', 'a3'}},
            events=[e2, e3, e1],
            attendees={'e1': {'a1', 'a2', 'a3'}},
        )

        results = self.ranker(source).recommend('u', user_lat=0.0, user_lon=0.0)

        self.assertEqual([r.event.event_id for r in results], ['e1', 'e3'])
        self.assertAlmostEqual(results[0].score, 0.7, places=9)
        self.assertAlmostEqual(results[1].score, 0.3 * 0.5)

    def test_results_sorted_and_limited(self):
        events = [
            make_event(f'e{i:02d}', tags={'SPORTS'}, lat=0.0, lon=i * 0.01)
            for i in range(15)
        ]
        source = FakeSource(interests={'u': {'SPORTS'}}, events=events)

        results = self.ranker(source).recommend('u', user_lat=0.0, user_lon=0.0, limit=5)

        self.assertEqual(len(results), 5)
        scores = [r.score for r in results]
        self.assertEqual(scores, sorted(scores, reverse=True))
        self.assertEqual(results[0].event.event_id, 'e00')

    def test_non_positive_limit_uses_default(self):
        events = [make_event(f'e{i:02d}', tags={'SPORTS'}) for i in range(15)]
        source = FakeSource(interests={'u': {'SPORTS'}}, events=events)
        ranker = self.ranker(source)

        self.assertEqual(len(ranker.recommend('u', limit=0)), 10)
        self.assertEqual(len(ranker.recommend('u', limit=-3)), 10)
        self.assertEqual(len(ranker.recommend('u')), 10)

    def test_equal_scores_ordered_by_event_id(self):
        events = [make_event(event_id, tags={'SPORTS'}) for event_id in ['c', 'a', 'b']]
        source = FakeSource(interests={'u': {'SPORTS'}}, events=events)

        results = self.ranker(source).recommend('u')

        self.assertEqual([r.event.event_id for r in results], ['a', 'b', 'c'])

    def test_only_latitude_is_treated_as_no_coordinates(self):
        event = make_event('e1', tags={'SPORTS'}, lat=0.0, lon=0.0)
        source = FakeSource(interests={'u': {'SPORTS'}}, events=[event])

        results = self.ranker(source).recommend('u', user_lat=0.0)

        self.assertEqual(results[0].breakdown.location_score, 0.0)

    def test_tags_loaded_when_missing_from_snapshot(self):
        event = make_event('e1', load_tags=False)
        source = FakeSource(interests={'u': {'SPORTS'}}, events=[event], event_tags={'e1': {'SPORTS'}})

        results = self.ranker(source).recommend('u')

        self.assertIn('get_event_tags', source.calls)
        self.assertEqual(results[0].event.tags, frozenset({'SPORTS'}))
        self.assertAlmostEqual(results[0].score, 0.3)

    def test_attendance_not_read_without_follows(self):
        source = FakeSource(interests={'u': {'SPORTS'}}, events=[make_event('e1', tags={'SPORTS'})])
        self.ranker(source).recommend('u')
        self.assertNotIn('get_attendee_ids', source.calls)

    def test_fallback_by_recency(self):
        """No interests and no coordinates: newest events first, score omitted"""
        events = [
            make_event('old', minutes_ago=60),
            make_event('newest', minutes_ago=0),
            make_event('middle', minutes_ago=30, tags={'SPORTS'}),
        ]
        source = FakeSource(interests={'u': set()}, follows={'u': {'creator'}}, events=events)

        results = self.ranker(source).recommend('u')

        self.assertEqual([r.event.event_id for r in results], ['newest', 'middle', 'old'])
        self.assertTrue(all(r.score is None for r in results))
        self.assertNotIn('get_followed_user_ids', source.calls)
        self.assertNotIn('get_attendee_ids', source.calls)

    def test_fallback_by_distance(self):
        """No interests with coordinates: 1 / (1 + d), events without a location skipped"""
        events = [
            make_event('far', lat=0.0, lon=0.5),
            make_event('near', lat=TWO_KM_NORTH, lon=0.0),
            make_event('nowhere'),
        ]
        source = FakeSource(interests={'u': set()}, events=events)

        results = self.ranker(source).recommend('u', user_lat=0.0, user_lon=0.0)

        self.assertEqual([r.event.event_id for r in results], ['near', 'far'])
        self.assertAlmostEqual(results[0].score, 1 / 3, places=9)
        self.assertEqual(results[0].breakdown.content_score, 0.0)

    def test_fallback_respects_limit(self):
        events = [make_event(f'e{i}', minutes_ago=i) for i in range(20)]
        source = FakeSource(interests={'u': set()}, events=events)
        self.assertEqual(len(self.ranker(source).recommend('u', limit=3)), 3)

    def test_cancellation(self):
        events = [make_event(f'e{i}', tags={'SPORTS'}) for i in range(5)]
        source = FakeSource(interests={'u': {'SPORTS'}}, events=events)
        checks = []

        def is_cancelled():
            checks.append(1)
            return len(checks) > 2

        with self.assertRaises(RecommendationCancelled):
            self.ranker(source).recommend('u', is_cancelled=is_cancelled)
        self.assertEqual(len(checks), 3)

    def test_ranker_keeps_no_state_between_requests(self):
        source = FakeSource(
            interests={'u': {'SPORTS'}, 'v': {'TRAVEL'}},
            events=[make_event('e1', tags={'SPORTS'}), make_event('e2', tags={'TRAVEL'})],
        )
        ranker = self.ranker(source)

        first = ranker.recommend('u')
        ranker.recommend('v')
        again = ranker.recommend('u')

        self.assertEqual(first, again)

    def test_recommend_by_interests(self):
        events = [
            make_event('e1', tags={'SPORTS'}),
            make_event('e2', tags={'SPORTS', 'TRAVEL'}),
            make_event('e3', tags={'ART_SHOWS'}),
        ]
        source = FakeSource(interests={'u': {'SPORTS', 'TRAVEL'}}, events=events)

        results = self.ranker(source).recommend_by_interests('u')

        self.assertEqual([r.event.event_id for r in results], ['e2', 'e1'])
        self.assertEqual(results[0].score, 1.0)

    def test_recommend_by_interests_without_interests(self):
        source = FakeSource(interests={'u': set()}, events=[make_event('e1', tags={'SPORTS'})])
        self.assertEqual(self.ranker(source).recommend_by_interests('u'), [])

    def test_recommend_by_interests_unknown_user(self):
        with self.assertRaises(UserNotFound):
            self.ranker(FakeSource()).recommend_by_interests('ghost')

    def test_recommend_social(self):
        events = [
            make_event('created', creator_id='friend'),
            make_event('attended', creator_id='stranger'),
            make_event('ignored', creator_id='stranger'),
        ]
        source = FakeSource(
            follows={'u': {'friend', 'buddy'}},
            events=events,
            attendees={'attended': {'buddy'}},
            interested={'attended': {'buddy'}},
        )

        results = self.ranker(source).recommend_social('u')

        self.assertEqual([r.event.event_id for r in results], ['created', 'attended'])
        self.assertAlmostEqual(results[0].score, 0.4)
        self.assertAlmostEqual(results[1].score, 0.35 / 5 + 0.25 / 3)

    def test_recommend_social_without_follows(self):
        source = FakeSource(events=[make_event('e1')])
        self.assertEqual(self.ranker(source).recommend_social('u'), [])
        self.assertNotIn('get_active_events', source.calls)


class ScoredEventTestCase(SimpleTestCase):
    def test_sort_key(self):
        low = ScoredEvent(event=make_event('a'), score=0.1)
        high = ScoredEvent(event=make_event('b'), score=0.9)
        tie = ScoredEvent(event=make_event('c'), score=0.9)
        self.assertEqual(sorted([tie, low, high], key=ScoredEvent.sort_key), [high, tie, low])


class DatabaseFixtureMixin:
    """Builds users, follows and events in the test database."""

    def make_profile(self, username, interests=()):
        profile = UserProfile.objects.create(user=User.objects.create_user(username=username, password='pass'))
        profile.set_interests(interests)
        return profile

    def make_db_event(self, title, creator, tags=(), lat=None, lon=None, status=Event.Status.ACTIVE):
        event = Event.objects.create(title=title, created_by=creator, latitude=lat, longitude=lon, status=status)
        for tag in tags:
            EventTag.objects.create(event=event, tag=tag)
        return event


class EventCatalogTestCase(DatabaseFixtureMixin, TestCase):
    """Test cases for the ORM-backed collaborator"""

    def setUp(self):
        self.catalog = EventCatalog()
        self.user = self.make_profile('reader', interests=['SPORTS', 'TRAVEL'])
        self.friend = self.make_profile('friend')
        self.user.follow(self.friend)
        self.event = self.make_db_event('Trail Run', self.friend, tags=['OUTDOORS', 'FITNESS'], lat=27.7, lon=85.3)
        self.make_db_event('Old Gig', self.friend, tags=['MUSIC_CONCERTS'], status=Event.Status.COMPLETED)

    def test_user_interest_tags(self):
        self.assertEqual(self.catalog.get_user_interest_tags(self.user.id), {'SPORTS', 'TRAVEL'})

    def test_unknown_user(self):
        with self.assertRaises(UserNotFound):
            self.catalog.get_user_interest_tags(uuid.uuid4())

    def test_malformed_user_id(self):
        with self.assertRaises(UserNotFound):
            self.catalog.get_user_interest_tags('not-a-uuid')

    def test_followed_user_ids(self):
        self.assertEqual(self.catalog.get_followed_user_ids(self.user.id), {self.friend.id})
        self.assertEqual(self.catalog.get_followed_user_ids(self.friend.id), set())

    def test_active_events_only(self):
        events = self.catalog.get_active_events()
        self.assertEqual(len(events), 1)
        candidate = events[0]
        self.assertEqual(candidate.event_id, self.event.id)
        self.assertEqual(candidate.creator_id, self.friend.id)
        self.assertEqual(candidate.tags, frozenset({'OUTDOORS', 'FITNESS'}))
        self.assertEqual(candidate.coordinates, (27.7, 85.3))

    def test_event_tags(self):
        self.assertEqual(self.catalog.get_event_tags(self.event.id), {'OUTDOORS', 'FITNESS'})

    def test_attendees_and_interested(self):
        EventEnrollment.objects.create(user=self.user, event=self.event)
        EventInterest.objects.create(user=self.friend, event=self.event)
        self.assertEqual(self.catalog.get_attendee_ids(self.event.id), {self.user.id})
        self.assertEqual(self.catalog.get_interested_user_ids(self.event.id), {self.friend.id})


class RecommendationAPITestCase(DatabaseFixtureMixin, APITestCase):
    """Integration tests for the recommendation endpoints"""

    def setUp(self):
        self.user = self.make_profile('listener', interests=[InterestCategory.MUSIC_CONCERTS, InterestCategory.SPORTS])
        self.creator = self.make_profile('creator')
        self.user.follow(self.creator)

        self.e1 = self.make_db_event(
            'Open Air Concert', self.creator,
            tags=[InterestCategory.MUSIC_CONCERTS, InterestCategory.ART_SHOWS],
            lat=TWO_KM_NORTH, lon=0.0,
        )
        for i in range(3):
            attendee = self.make_profile(f'attendee{i}')
            self.user.follow(attendee)
            EventEnrollment.objects.create(user=attendee, event=self.e1)

        stranger = self.make_profile('stranger')
        self.e2 = self.make_db_event('Untagged Gathering', stranger)

        self.url = reverse('recommendations:recommendations')

    def test_scenario(self):
        response = self.client.get(self.url, {'user_id': str(self.user.id), 'lat': 0.0, 'lon': 0.0})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        recommendations = response.data['recommendations']
        self.assertEqual(len(recommendations), 1)
        self.assertEqual(recommendations[0]['id'], str(self.e1.id))
        self.assertAlmostEqual(recommendations[0]['final_score'], 0.7, places=6)
        self.assertEqual(recommendations[0]['tags'], ['ART_SHOWS', 'MUSIC_CONCERTS'])
        self.assertAlmostEqual(recommendations[0]['breakdown']['social_boost'], 0.2)

    def test_unknown_user(self):
        response = self.client.get(self.url, {'user_id': str(uuid.uuid4())})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertIn('error', response.data)

    def test_invalid_query(self):
        response = self.client.get(self.url, {'user_id': str(self.user.id), 'lat': 120})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_fallback_recency_for_user_without_interests(self):
        newcomer = self.make_profile('newcomer')
        response = self.client.get(self.url, {'user_id': str(newcomer.id), 'limit': 0})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        recommendations = response.data['recommendations']
        self.assertEqual([r['id'] for r in recommendations], [str(self.e2.id), str(self.e1.id)])
        self.assertIsNone(recommendations[0]['final_score'])
        self.assertIsNone(recommendations[0]['breakdown'])

    def test_interest_recommendations(self):
        url = reverse('recommendations:interest_recommendations')
        response = self.client.get(url, {'user_id': str(self.user.id)})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        recommendations = response.data['recommendations']
        self.assertEqual([r['id'] for r in recommendations], [str(self.e1.id)])
        self.assertAlmostEqual(recommendations[0]['final_score'], 1 / 3)

    def test_social_recommendations(self):
        url = reverse('recommendations:social_recommendations')
        response = self.client.get(url, {'user_id': str(self.user.id), 'limit': 5})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        recommendations = response.data['recommendations']
        self.assertEqual([r['id'] for r in recommendations], [str(self.e1.id)])
        self.assertAlmostEqual(recommendations[0]['final_score'], 0.4 + 0.25)
