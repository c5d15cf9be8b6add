from rest_framework import status
from rest_framework.generics import get_object_or_404
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import UserProfile
from .serializers import UserProfileSerializer, FollowActionSerializer, UpdateInterestsSerializer


class ProfileView(APIView):

    def get(self,request,id):
        profile = get_object_or_404(UserProfile,id=id)
        serializer = UserProfileSerializer(profile)
        return Response(serializer.data)

class FollowView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self,request,id):
        follower = request.user.profile
        followed_profile = get_object_or_404(UserProfile,id=id)

        if follower == followed_profile:
            return self._result(False,"An account can not follow itself",status.HTTP_400_BAD_REQUEST)
        if follower.is_following(followed_profile):
            return self._result(False,"Followed account is already followed",status.HTTP_400_BAD_REQUEST)

        follower.follow(followed_profile)
        return self._result(True,"Successfully followed",status.HTTP_200_OK)

    @staticmethod
    def _result(success,message,code):
        return Response(FollowActionSerializer({"success":success,"message":message}).data,status=code)

class UnfollowView(FollowView):

    def post(self,request,id):
        follower = request.user.profile
        followed = get_object_or_404(UserProfile,id=id)

        if follower == followed:
            return self._result(False,"An account can not unfollow itself",status.HTTP_400_BAD_REQUEST)
        if not follower.is_following(followed):
            return self._result(False,"Account is not followed",status.HTTP_400_BAD_REQUEST)

        follower.unfollow(followed)
        return self._result(True,"Successfully unfollowed",status.HTTP_200_OK)

class InterestsView(APIView):
    """
    GET  /api/user/<id>/interests/  -> {"interests": [...]}
    PUT  /api/user/<id>/interests/  body {"interests": ["SPORTS", ...]} replaces them (owner only)
    """

    def get_permissions(self):
        if self.request.method == "GET":
            return []
        return [IsAuthenticated()]

    def get(self,request,id):
        profile = get_object_or_404(UserProfile,id=id)
        return Response({"interests":sorted(profile.interest_keys())})

    def put(self,request,id):
        profile = get_object_or_404(UserProfile,id=id)
        if request.user.profile != profile:
            return Response(
                {"error":"Only the owner can change interests"},
                status=status.HTTP_403_FORBIDDEN,
            )

        serializer = UpdateInterestsSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"error":serializer.errors},status=status.HTTP_400_BAD_REQUEST)

        profile.set_interests(serializer.validated_data["interests"])
        return Response({"interests":sorted(profile.interest_keys())},status=status.HTTP_200_OK)
