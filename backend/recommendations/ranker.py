"""
RecommendationRanker: loads a user's signals and the active events, scores them and returns the top-k.
"""
import logging
from dataclasses import replace
from typing import Any, AbstractSet, Callable, List, Optional, Protocol, Tuple

from django.conf import settings

from recommendations.calculators import GeoDistanceCalculator, SimilarityCalculator
from recommendations.dtos import CandidateEvent, ScoreBreakdown, ScoredEvent, UserProfileDTO
from recommendations.exceptions import RecommendationCancelled
from recommendations.scoring_service import ScoringEngine

logger = logging.getLogger(__name__)


class RecommendationSource(Protocol):
    """Read-only queries the ranker needs from the rest of the system."""

    def get_user_interest_tags(self, user_id) -> AbstractSet[str]:
        """Raises UserNotFound for an unknown user."""

    def get_followed_user_ids(self, user_id) -> AbstractSet[Any]: ...

    def get_active_events(self) -> List[CandidateEvent]: ...

    def get_event_tags(self, event_id) -> AbstractSet[str]: ...

    def get_attendee_ids(self, event_id) -> AbstractSet[Any]: ...

    def get_interested_user_ids(self, event_id) -> AbstractSet[Any]: ...


class RecommendationRanker:
    """
    Orchestrator: every call reads fresh snapshots from the source and keeps
    nothing between calls, so one instance can serve concurrent requests.

    Equal scores are ordered by event id ascending.
    """

    DEFAULT_LIMIT = 10

    def __init__(self, source: RecommendationSource, engine: Optional[ScoringEngine] = None,
                 default_limit: Optional[int] = None):
        self.source = source
        self.engine = engine or ScoringEngine()
        if default_limit is None:
            default_limit = getattr(settings, 'RECOMMENDATIONS', {}).get('DEFAULT_LIMIT', self.DEFAULT_LIMIT)
        self.default_limit = default_limit

    def recommend(self, user_id, user_lat: Optional[float] = None, user_lon: Optional[float] = None,
                  limit: Optional[int] = None,
                  is_cancelled: Optional[Callable[[], bool]] = None) -> List[ScoredEvent]:
        """
        Generates personalized recommendations for a user.

        Steps:
        1. Load the user's interest tags (users without interests take the fallback path)
        2. Load the ids the user follows
        3. Load all ACTIVE events
        4. Score each event, drop non-positive scores, sort and truncate to limit

        Args:
            user_id: Id of the requesting user
            user_lat, user_lon: Optional position of the user; ignored unless both are given
            limit: Maximum number of results, non-positive or None means default_limit
            is_cancelled: Optional check polled before each event is scored

        Returns:
            List[ScoredEvent]: Results sorted by score (highest first)

        Raises:
            UserNotFound: the user id is unknown
            RecommendationCancelled: is_cancelled() returned True
        """
        limit = self._normalize_limit(limit)
        user_position = self._coordinates(user_lat, user_lon)

        # Step 1: interests
        interest_tags = frozenset(self.source.get_user_interest_tags(user_id))
        if not interest_tags:
            logger.warning(f"User {user_id} has no interests, falling back to distance/recency ordering")
            return self._fallback(user_position, limit, is_cancelled)

        user = UserProfileDTO(user_id=user_id, interest_tags=interest_tags)

        # Step 2: social graph
        followed_ids = frozenset(self.source.get_followed_user_ids(user_id))
        logger.debug(f"User {user_id} has {len(interest_tags)} interests and follows {len(followed_ids)} users")

        # Step 3: candidates
        active_events = self.source.get_active_events()
        logger.debug(f"Found {len(active_events)} active events")

        lat, lon = user_position if user_position else (None, None)

        # Step 4: score, filter, sort, truncate
        scored_events: List[ScoredEvent] = []
        for event in active_events:
            self._check_cancelled(is_cancelled)
            event = self._with_tags(event)
            # the social boost is 0.0 without follows, skip the attendance read
            attendee_ids = frozenset(self.source.get_attendee_ids(event.event_id)) if followed_ids else frozenset()

            final_score, breakdown = self.engine.score_breakdown(
                user, event, lat, lon, followed_ids, attendee_ids
            )
            if final_score > 0.0:
                scored_events.append(ScoredEvent(event=event, score=final_score, breakdown=breakdown))

        results = self._top(scored_events, limit)
        logger.info(f"Returning {len(results)} recommended events for user {user_id}")
        return results

    def recommend_by_interests(self, user_id, limit: Optional[int] = None,
                               is_cancelled: Optional[Callable[[], bool]] = None) -> List[ScoredEvent]:
        """
        Ranks ACTIVE events by interest overlap alone.
        Users without interests get an empty list; unknown users raise UserNotFound.
        """
        limit = self._normalize_limit(limit)
        interest_tags = frozenset(self.source.get_user_interest_tags(user_id))
        if not interest_tags:
            logger.info(f"User {user_id} has no interests, returning empty interest-based recommendations")
            return []

        scored_events = []
        for event in self.source.get_active_events():
            self._check_cancelled(is_cancelled)
            event = self._with_tags(event)
            content_score = SimilarityCalculator.similarity(interest_tags, event.tags)
            if content_score > 0.0:
                scored_events.append(ScoredEvent(
                    event=event,
                    score=content_score,
                    breakdown=ScoreBreakdown(content_score=content_score),
                ))

        results = self._top(scored_events, limit)
        logger.info(f"Returning {len(results)} interest-based recommendations for user {user_id}")
        return results

    def recommend_social(self, user_id, limit: Optional[int] = None,
                         is_cancelled: Optional[Callable[[], bool]] = None) -> List[ScoredEvent]:
        """
        Ranks ACTIVE events by what followed users created, marked as interesting or attend.
        Users who follow nobody get an empty list.
        """
        limit = self._normalize_limit(limit)
        followed_ids = frozenset(self.source.get_followed_user_ids(user_id))
        if not followed_ids:
            logger.info(f"User {user_id} has no followed users, returning empty social recommendations")
            return []

        calculator = self.engine.social_calculator
        scored_events = []
        for event in self.source.get_active_events():
            self._check_cancelled(is_cancelled)
            score = calculator.social_score(
                event,
                followed_ids,
                frozenset(self.source.get_interested_user_ids(event.event_id)),
                frozenset(self.source.get_attendee_ids(event.event_id)),
            )
            if score > 0.0:
                scored_events.append(ScoredEvent(
                    event=self._with_tags(event),
                    score=score,
                    breakdown=ScoreBreakdown(social_boost=score),
                ))

        results = self._top(scored_events, limit)
        logger.info(f"Returning {len(results)} social recommendations for user {user_id}")
        return results

    def _fallback(self, user_position: Optional[Tuple[float, float]], limit: int,
                  is_cancelled: Optional[Callable[[], bool]]) -> List[ScoredEvent]:
        """
        Ordering for users without interests. Never touches the content score.

        - without coordinates: newest events first, score omitted
        - with coordinates: score = 1 / (1 + distance_km); events without a location are skipped

        The 1 / (1 + d) curve differs from the linear decay of the scored path.
        Both are kept as they are since changing either shifts result distributions.
        """
        active_events = [self._with_tags(event) for event in self.source.get_active_events()]

        if user_position is None:
            ordered = sorted(active_events, key=lambda e: str(e.event_id))
            ordered.sort(key=lambda e: e.created_at, reverse=True)
            return [ScoredEvent(event=event, score=None) for event in ordered[:limit]]

        user_lat, user_lon = user_position
        scored_events = []
        for event in active_events:
            self._check_cancelled(is_cancelled)
            if event.coordinates is None:
                continue
            distance_km = GeoDistanceCalculator.distance_km(user_lat, user_lon, event.latitude, event.longitude)
            scored_events.append(ScoredEvent(
                event=event,
                score=1.0 / (1.0 + distance_km),
                breakdown=ScoreBreakdown(distance_km=distance_km),
            ))

        return self._top(scored_events, limit)

    # Helper methods
    def _normalize_limit(self, limit: Optional[int]) -> int:
        if limit is None or limit <= 0:
            return self.default_limit
        return limit

    @staticmethod
    def _coordinates(lat: Optional[float], lon: Optional[float]) -> Optional[Tuple[float, float]]:
        if lat is None or lon is None:
            return None
        return (lat, lon)

    @staticmethod
    def _check_cancelled(is_cancelled: Optional[Callable[[], bool]]) -> None:
        if is_cancelled is not None and is_cancelled():
            raise RecommendationCancelled("Recommendation request cancelled")

    def _with_tags(self, event: CandidateEvent) -> CandidateEvent:
        """Loads the event's tags from the source when the snapshot came without them."""
        if event.tags is not None:
            return event
        return replace(event, tags=frozenset(self.source.get_event_tags(event.event_id)))

    @staticmethod
    def _top(scored_events: List[ScoredEvent], limit: int) -> List[ScoredEvent]:
        scored_events.sort(key=ScoredEvent.sort_key)
        return scored_events[:limit]
