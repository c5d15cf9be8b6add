"""
ORM-backed implementation of the read queries the RecommendationRanker consumes.
"""
from typing import List, Set

from django.core.exceptions import ValidationError

from events.models import Event, EventEnrollment, EventInterest, EventTag
from recommendations.dtos import CandidateEvent
from recommendations.exceptions import UserNotFound
from user.models import FollowRelation, UserProfile


class EventCatalog:
    """
    Domain Service isolating the ORM from the ranking code.
    Every call hits the database; nothing is cached between requests.
    """

    def get_user_interest_tags(self, user_id) -> Set[str]:
        """
        Returns the interest tag keys of a user.

        Raises:
            UserNotFound: no profile has this id (malformed ids included)
        """
        try:
            profile = UserProfile.objects.get(id=user_id)
        except (UserProfile.DoesNotExist, ValidationError, ValueError):
            raise UserNotFound(user_id)
        return profile.interest_keys()

    def get_followed_user_ids(self, user_id) -> Set:
        return set(
            FollowRelation.objects.filter(follower_id=user_id).values_list('following_id', flat=True)
        )

    def get_active_events(self) -> List[CandidateEvent]:
        """Snapshots of all ACTIVE events, tags loaded in the same round trip."""
        events = Event.objects.filter(status=Event.Status.ACTIVE).prefetch_related('tags')
        return [self.to_candidate(event) for event in events]

    def get_event_tags(self, event_id) -> Set[str]:
        return set(EventTag.objects.filter(event_id=event_id).values_list('tag', flat=True))

    def get_attendee_ids(self, event_id) -> Set:
        return set(EventEnrollment.objects.filter(event_id=event_id).values_list('user_id', flat=True))

    def get_interested_user_ids(self, event_id) -> Set:
        return set(EventInterest.objects.filter(event_id=event_id).values_list('user_id', flat=True))

    @staticmethod
    def to_candidate(event: Event) -> CandidateEvent:
        return CandidateEvent(
            event_id=event.id,
            creator_id=event.created_by_id,
            created_at=event.created_at,
            latitude=event.latitude,
            longitude=event.longitude,
            tags=frozenset(tag.tag for tag in event.tags.all()),
            title=event.title,
            venue=event.venue,
            status=event.status,
        )
