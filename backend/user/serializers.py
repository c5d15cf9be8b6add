from rest_framework import serializers

from events.models import InterestCategory
from .models import UserProfile


class UserProfileSerializer(serializers.ModelSerializer):
    username= serializers.CharField(source="user.username",read_only=True)
    email = serializers.CharField(source="user.email",read_only=True)
    interests = serializers.SerializerMethodField()

    class Meta:
        model = UserProfile
        fields = [
            "id",
            "username",
            "email",
            "full_name",
            "avatar_url",
            "bio",
            "followers_count",
            "following_count",
            "is_verified",
            "interests",
        ]

    def get_interests(self,obj):
        return sorted(obj.interest_keys())

class FollowActionSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField()

class UpdateInterestsSerializer(serializers.Serializer):
    interests = serializers.ListField(
        child=serializers.ChoiceField(choices=InterestCategory.choices),
        allow_empty=True,
    )
