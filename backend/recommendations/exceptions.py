"""
Exceptions raised by the recommendation engine.
"""


class RecommendationError(Exception):
    """Base class for recommendation failures surfaced to callers."""


class UserNotFound(RecommendationError):
    """The requesting user id does not belong to any profile."""

    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class RecommendationCancelled(RecommendationError):
    """The caller cancelled the request while candidates were being scored."""
