from django.contrib import admin
from .models import UserProfile, FollowRelation, UserInterest


class UserInterestInline(admin.TabularInline):
    model = UserInterest
    extra = 0


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'followers_count', 'following_count', 'is_verified']
    search_fields = ['user__username', 'full_name']
    readonly_fields = ['id', 'followers_count', 'following_count']
    inlines = [UserInterestInline]


@admin.register(FollowRelation)
class FollowRelationAdmin(admin.ModelAdmin):
    list_display = ['follower', 'following', 'created_at']
    readonly_fields = ['created_at', 'updated_at']
