"""
ScoringEngine: combines interest overlap, proximity and social activity into one ranking score.
"""
import logging
from typing import AbstractSet, Any, Optional

from django.conf import settings

from recommendations.calculators import GeoDistanceCalculator, SimilarityCalculator, SocialBoostCalculator
from recommendations.dtos import CandidateEvent, ScoreBreakdown, UserProfileDTO

logger = logging.getLogger(__name__)


class ScoringEngine:
    """
    Algorithm Service: scores one candidate event for one user using
    1. Content Based Filtering (Jaccard similarity of interest tags)
    2. Context Aware Filtering (distance to the event)
    3. Social Boost (followed creator / followed attendees)

    The engine keeps only its configuration; identical inputs always give the same score.
    """

    # Default weights for the weighted scoring formula
    ALPHA = 0.3             # Coefficient for interest match
    BETA = 0.5              # Coefficient for proximity score
    SOCIAL_BOOST = 0.2      # Cap of the additive social boost
    MAX_DISTANCE_KM = 10.0  # Proximity score reaches 0.0 at this distance

    def __init__(self, alpha: float = 0.3, beta: float = 0.5,
                 social_boost: float = 0.2, max_distance_km: float = 10.0):
        """Initialize scoring engine with custom weights if provided"""
        self.ALPHA = alpha
        self.BETA = beta
        self.SOCIAL_BOOST = social_boost
        self.MAX_DISTANCE_KM = max_distance_km
        self.social_calculator = SocialBoostCalculator(social_boost)

        if alpha + beta > 1.0 + 1e-9:
            logger.warning(f"Content and location weights sum to {alpha + beta}, consider normalizing")

    @classmethod
    def from_settings(cls) -> "ScoringEngine":
        """Builds an engine from settings.RECOMMENDATIONS, falling back to the class defaults."""
        config = getattr(settings, 'RECOMMENDATIONS', {}) or {}
        return cls(
            alpha=config.get('ALPHA', cls.ALPHA),
            beta=config.get('BETA', cls.BETA),
            social_boost=config.get('SOCIAL_BOOST', cls.SOCIAL_BOOST),
            max_distance_km=config.get('MAX_DISTANCE_KM', cls.MAX_DISTANCE_KM),
        )

    @property
    def max_score(self) -> float:
        return self.ALPHA + self.BETA + self.SOCIAL_BOOST

    def location_score(self, distance_km: float) -> float:
        """
        Linear proximity decay.

        Formula: score = max(0, 1 - distance / MAX_DISTANCE_KM)
        1.0 at the user's position, 0.0 at MAX_DISTANCE_KM and beyond.
        """
        if distance_km <= 0:
            return 1.0
        return max(0.0, 1.0 - (distance_km / self.MAX_DISTANCE_KM))

    def score(self, user: UserProfileDTO, event: CandidateEvent,
              user_lat: Optional[float], user_lon: Optional[float],
              followed_ids: AbstractSet[Any], attendee_ids: AbstractSet[Any]) -> float:
        """
        Calculates the final weighted score of an event for a user.

        Formula:
        Score = ALPHA * Similarity + BETA * Proximity + SocialBoost

        Returns:
            float: Score between 0.0 and ALPHA + BETA + SOCIAL_BOOST
        """
        return self.score_breakdown(user, event, user_lat, user_lon, followed_ids, attendee_ids)[0]

    def score_breakdown(self, user: UserProfileDTO, event: CandidateEvent,
                        user_lat: Optional[float], user_lon: Optional[float],
                        followed_ids: AbstractSet[Any], attendee_ids: AbstractSet[Any]):
        """
        Same computation as score(), also returning the individual signals.

        Returns:
            Tuple[float, ScoreBreakdown]: (final_score, breakdown)
        """
        # 1. Content score
        content_score = SimilarityCalculator.similarity(user.interest_tags, event.tags or frozenset())

        # 2. Location score, only when both sides have coordinates
        location_score = 0.0
        distance_km = None
        if user_lat is not None and user_lon is not None and event.coordinates is not None:
            distance_km = GeoDistanceCalculator.distance_km(
                user_lat, user_lon, event.latitude, event.longitude
            )
            location_score = self.location_score(distance_km)

        # 3. Social boost
        social_boost = self.social_calculator.social_boost(event, followed_ids, attendee_ids)

        # 4. Weighted final score
        final_score = (
            (self.ALPHA * content_score) +
            (self.BETA * location_score) +
            social_boost
        )

        logger.debug(
            f"Event {event.event_id}: content={content_score}, location={location_score}, "
            f"social={social_boost}, final={final_score}"
        )

        return final_score, ScoreBreakdown(
            content_score=content_score,
            location_score=location_score,
            social_boost=social_boost,
            distance_km=distance_km,
        )
