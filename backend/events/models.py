import uuid
from django.db import models


class InterestCategory(models.TextChoices):
    """
    Closed tag vocabulary shared by user interests and event tags.
    The stored value is the stable key, the label is the display name.
    """
    MUSIC_CONCERTS = 'MUSIC_CONCERTS', 'Music & Concerts'
    ART_SHOWS = 'ART_SHOWS', 'Art & Shows'
    SPORTS = 'SPORTS', 'Sports'
    TECHNOLOGY = 'TECHNOLOGY', 'Technology'
    FOOD_DRINK = 'FOOD_DRINK', 'Food & Drink'
    TRAVEL = 'TRAVEL', 'Travel'
    EDUCATION = 'EDUCATION', 'Education'
    OUTDOORS = 'OUTDOORS', 'Outdoors'
    FITNESS = 'FITNESS', 'Fitness'
    SPIRITUAL = 'SPIRITUAL', 'Spiritual'

    @classmethod
    def from_display_name(cls, display_name: str) -> "InterestCategory":
        """Case-insensitive lookup by display name. Raises ValueError if unknown."""
        for category in cls:
            if category.label.lower() == display_name.lower():
                return category
        raise ValueError(f"Unknown interest category: {display_name}")


class Event(models.Model):
    """
    An event users can discover, enroll in and mark as interesting.
    Coordinates are optional but always stored as a pair.
    """

    class Status(models.TextChoices):
        """Enum for event status"""
        ACTIVE = 'ACTIVE', 'Active'
        CANCELLED = 'CANCELLED', 'Cancelled'
        COMPLETED = 'COMPLETED', 'Completed'

    # Primary Key
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Basic Information
    title = models.CharField(max_length=255)
    description = models.TextField(max_length=500, blank=True, default="")
    venue = models.CharField(max_length=255, blank=True, default="")

    # Geospatial Data
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
        help_text="ACTIVE, CANCELLED, COMPLETED. Only ACTIVE events are recommended."
    )

    created_by = models.ForeignKey(
        'user.UserProfile',
        on_delete=models.CASCADE,
        related_name='created_events',
        help_text="Organizer of the event"
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'events_event'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='events_even_status_5c1b8e_idx'),
            models.Index(fields=['-created_at'], name='events_even_created_3f0e2a_idx'),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        """
        Overridden save method to ensure coordinates are either both present
        or both absent, and within range when present.
        """
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("Latitude and longitude must be provided together")

        if self.latitude is not None:
            if not (-90 <= self.latitude <= 90 and -180 <= self.longitude <= 180):
                raise ValueError("Invalid coordinates: latitude must be -90 to 90, longitude must be -180 to 180")

        super().save(*args, **kwargs)

    def get_lat_lon(self):
        """Returns (latitude, longitude) or None when the event has no location."""
        if self.latitude is not None:
            return (self.latitude, self.longitude)
        return None

    def tag_keys(self) -> set:
        return set(self.tags.values_list('tag', flat=True))


class EventTag(models.Model):
    """Assigns one InterestCategory to an event."""
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name='tags')
    tag = models.CharField(max_length=30, choices=InterestCategory.choices)

    class Meta:
        db_table = 'events_event_tag'
        unique_together = ('event', 'tag')

    def __str__(self):
        return f"{self.event.title} - {self.tag}"


class EventEnrollment(models.Model):
    """A user's enrollment (attendance) in an event."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('user.UserProfile', on_delete=models.CASCADE, related_name='enrollments')
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name='enrollments')
    enrolled_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'events_event_enrollment'
        unique_together = ('user', 'event')

    def __str__(self):
        return f"{self.user} -> {self.event.title}"


class EventInterest(models.Model):
    """A user marked an event as interesting."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('user.UserProfile', on_delete=models.CASCADE, related_name='event_interests')
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name='interests')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'events_event_interest'
        unique_together = ('user', 'event')
