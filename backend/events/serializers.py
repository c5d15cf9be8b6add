from rest_framework import serializers

from .models import Event


class EventSerializer(serializers.ModelSerializer):
    organizer_id = serializers.UUIDField(source='created_by_id', read_only=True)
    organizer_name = serializers.CharField(source='created_by.user.username', read_only=True)
    tags = serializers.SerializerMethodField()
    interest_count = serializers.SerializerMethodField()

    class Meta:
        model = Event
        fields = [
            'id', 'title', 'description', 'venue', 'latitude', 'longitude',
            'status', 'organizer_id', 'organizer_name', 'tags', 'interest_count',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields

    def get_tags(self, obj):
        return sorted(tag.tag for tag in obj.tags.all())

    def get_interest_count(self, obj):
        return obj.interests.count()


class InterestCategorySerializer(serializers.Serializer):
    name = serializers.CharField()
    display_name = serializers.CharField()
