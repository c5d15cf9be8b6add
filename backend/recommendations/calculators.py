"""
Signal calculators used by the ScoringEngine: tag overlap, geographic distance
and social-graph activity. All of them are pure and hold no per-request state.
"""
import math
from typing import AbstractSet, Any, Iterable


class SimilarityCalculator:
    """Set-overlap similarity between two tag sets."""

    @staticmethod
    def similarity(a: Iterable[str], b: Iterable[str]) -> float:
        """
        Computes the Jaccard index of two tag sets.

        Formula: J(A, B) = |A ∩ B| / |A ∪ B|

        Two empty sets score 0.0, not 1.0, so untagged users and events are
        never rewarded for matching each other.

        Args:
            a: First tag set
            b: Second tag set

        Returns:
            float: Similarity between 0.0 and 1.0
        """
        a = set(a)
        b = set(b)
        if not a and not b:
            return 0.0

        union = a | b
        if not union:
            return 0.0

        return len(a & b) / len(union)


class GeoDistanceCalculator:
    """Great-circle distance between two latitude/longitude pairs."""

    EARTH_RADIUS_KM = 6371.0

    @staticmethod
    def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """
        Haversine distance in kilometres. Inputs are degrees and are not range checked.

        Formula:
            a = sin²(Δφ/2) + cos φ1 · cos φ2 · sin²(Δλ/2)
            d = R · 2 · atan2(√a, √(1−a))

        Args:
            lat1, lon1: First coordinate in degrees
            lat2, lon2: Second coordinate in degrees

        Returns:
            float: Distance in km (>= 0)
        """
        if lat1 == lat2 and lon1 == lon2:
            return 0.0

        phi1 = math.radians(lat1)
        phi2 = math.radians(lat2)
        d_phi = math.radians(lat2 - lat1)
        d_lambda = math.radians(lon2 - lon1)

        a = (
            math.sin(d_phi / 2) ** 2 +
            math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
        )
        # rounding can push a marginally outside [0, 1] near antipodes
        a = min(1.0, max(0.0, a))
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

        return GeoDistanceCalculator.EARTH_RADIUS_KM * c


class SocialBoostCalculator:
    """
    Derives an additive boost from the requesting user's follow graph:
    events created or attended by followed users rank higher.
    """

    SOCIAL_BOOST = 0.2
    CREATOR_SHARE = 0.6
    ATTENDANCE_SHARE = 0.4
    ATTENDANCE_SATURATION = 3  # followed attendees needed for the full attendance share

    # Weights of the standalone social ranking
    SOCIAL_CREATOR_WEIGHT = 0.4
    SOCIAL_INTEREST_WEIGHT = 0.35
    SOCIAL_INTEREST_SATURATION = 5
    SOCIAL_ATTENDANCE_WEIGHT = 0.25

    def __init__(self, social_boost: float = 0.2):
        self.SOCIAL_BOOST = social_boost

    def social_boost(self, event, followed_ids: AbstractSet[Any], attendee_ids: AbstractSet[Any]) -> float:
        """
        Calculates the social boost of an event for one user.

        Formula:
            boost = SOCIAL_BOOST * 0.6                      if the creator is followed
                  + SOCIAL_BOOST * 0.4 * min(1, k / 3)      k = followed users attending

        Args:
            event: CandidateEvent being scored
            followed_ids: Ids the requesting user follows
            attendee_ids: Ids of users enrolled in the event

        Returns:
            float: Boost between 0.0 and SOCIAL_BOOST
        """
        if not followed_ids:
            return 0.0

        boost = 0.0
        if event.creator_id in followed_ids:
            boost += self.SOCIAL_BOOST * self.CREATOR_SHARE

        followed_attending = len(set(attendee_ids) & set(followed_ids))
        if followed_attending > 0:
            boost += self.SOCIAL_BOOST * self.ATTENDANCE_SHARE * min(
                1.0, followed_attending / self.ATTENDANCE_SATURATION
            )

        return boost

    def social_score(self, event, followed_ids: AbstractSet[Any],
                     interested_ids: AbstractSet[Any], attendee_ids: AbstractSet[Any]) -> float:
        """
        Score for the purely social ranking, in [0.0, 1.0].

        Formula:
            score = 0.4                          if the creator is followed
                  + 0.35 * min(1, k_i / 5)       k_i = followed users interested in the event
                  + 0.25 * min(1, k_a / 3)       k_a = followed users attending
        """
        if not followed_ids:
            return 0.0

        score = 0.0
        if event.creator_id in followed_ids:
            score += self.SOCIAL_CREATOR_WEIGHT

        followed_interested = len(set(interested_ids) & set(followed_ids))
        if followed_interested > 0:
            score += self.SOCIAL_INTEREST_WEIGHT * min(
                1.0, followed_interested / self.SOCIAL_INTEREST_SATURATION
            )

        followed_attending = len(set(attendee_ids) & set(followed_ids))
        if followed_attending > 0:
            score += self.SOCIAL_ATTENDANCE_WEIGHT * min(
                1.0, followed_attending / self.ATTENDANCE_SATURATION
            )

        return score
