"""
Data Transfer Objects (DTOs) passed between the collaborators, the scoring engine and the API layer.
All of them are per-request snapshots; none is persisted.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class UserProfileDTO:
    """The requesting user as seen by the scoring engine"""
    user_id: Any
    interest_tags: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class CandidateEvent:
    """
    Read-only snapshot of an ACTIVE event.
    `tags` is None when the collaborator did not load them with the event.
    """
    event_id: Any
    creator_id: Any
    created_at: datetime
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    tags: Optional[FrozenSet[str]] = None
    title: str = ""
    venue: str = ""
    status: str = "ACTIVE"

    @property
    def coordinates(self) -> Optional[Tuple[float, float]]:
        if self.latitude is None or self.longitude is None:
            return None
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Individual signal values behind a final score"""
    content_score: float = 0.0
    location_score: float = 0.0
    social_boost: float = 0.0
    distance_km: Optional[float] = None


@dataclass(frozen=True)
class ScoredEvent:
    """
    Candidate event paired with its computed score.
    `score` is None on the recency fallback, where ordering does not come from a score.
    """
    event: CandidateEvent
    score: Optional[float]
    breakdown: Optional[ScoreBreakdown] = field(default=None)

    def sort_key(self):
        """Highest score first, ties broken by event id ascending."""
        return (-(self.score or 0.0), str(self.event.event_id))
