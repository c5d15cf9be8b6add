from django.urls import path
from .views import ProfileView, FollowView, UnfollowView, InterestsView

urlpatterns = [
    path("<uuid:id>/", ProfileView.as_view(), name="profile"),
    path("<uuid:id>/follow/", FollowView.as_view(), name="follow"),
    path("<uuid:id>/unfollow/", UnfollowView.as_view(), name="unfollow"),
    path("<uuid:id>/interests/", InterestsView.as_view(), name="interests"),
]
