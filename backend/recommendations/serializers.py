"""
Serializers for the recommendations module.
"""
from rest_framework import serializers


class RecommendationQuerySerializer(serializers.Serializer):
    """Validates query parameters of the recommendation endpoints"""
    user_id = serializers.UUIDField()
    lat = serializers.FloatField(required=False, min_value=-90, max_value=90)
    lon = serializers.FloatField(required=False, min_value=-180, max_value=180)
    # non-positive values are accepted and replaced by the default limit
    limit = serializers.IntegerField(required=False)


class ScoreBreakdownSerializer(serializers.Serializer):
    """Serializer for ScoreBreakdown DTO"""
    content_score = serializers.FloatField()
    location_score = serializers.FloatField()
    social_boost = serializers.FloatField()
    distance_km = serializers.FloatField(allow_null=True)


class ScoredEventSerializer(serializers.Serializer):
    """Serializer for ScoredEvent DTO"""
    id = serializers.CharField(source='event.event_id')
    title = serializers.CharField(source='event.title')
    venue = serializers.CharField(source='event.venue')
    latitude = serializers.FloatField(source='event.latitude', allow_null=True)
    longitude = serializers.FloatField(source='event.longitude', allow_null=True)
    organizer_id = serializers.CharField(source='event.creator_id')
    event_status = serializers.CharField(source='event.status')
    created_at = serializers.DateTimeField(source='event.created_at')
    tags = serializers.SerializerMethodField()
    final_score = serializers.FloatField(source='score', allow_null=True)
    breakdown = ScoreBreakdownSerializer(allow_null=True)

    def get_tags(self, obj):
        return sorted(obj.event.tags or [])
