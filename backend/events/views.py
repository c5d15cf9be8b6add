"""
Read-only views for browsing events and the interest vocabulary.
"""
from rest_framework import viewsets
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import Event, InterestCategory
from .serializers import EventSerializer, InterestCategorySerializer


class EventViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Explore ACTIVE events, newest first.
    """
    serializer_class = EventSerializer

    def get_queryset(self):
        return (
            Event.objects.filter(status=Event.Status.ACTIVE)
            .select_related('created_by__user')
            .prefetch_related('tags')
            .order_by('-created_at')
        )


class InterestCategoryListView(APIView):
    """
    GET /api/events/interests/
    Lists every interest category available for tagging events and user preferences.
    """

    def get(self, request):
        categories = [
            {'name': category.value, 'display_name': category.label}
            for category in InterestCategory
        ]
        serializer = InterestCategorySerializer(categories, many=True)
        return Response({'interests': serializer.data})
