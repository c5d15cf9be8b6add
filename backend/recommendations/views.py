"""
Views for the recommendations module.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from recommendations.catalog import EventCatalog
from recommendations.exceptions import UserNotFound
from recommendations.ranker import RecommendationRanker
from recommendations.scoring_service import ScoringEngine
from recommendations.serializers import RecommendationQuerySerializer, ScoredEventSerializer

logger = logging.getLogger(__name__)


class BaseRecommendationView(APIView):
    """
    Shared request handling: validates the query, builds a fresh ranker
    per request and maps engine errors to HTTP responses.
    """

    def get(self, request):
        query = RecommendationQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(
                {'error': query.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        ranker = RecommendationRanker(EventCatalog(), ScoringEngine.from_settings())

        try:
            recommendations = self.rank(ranker, query.validated_data)
        except UserNotFound as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except Exception as e:
            logger.exception(f"Failed to generate recommendations: {str(e)}")
            return Response(
                {'error': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        serializer = ScoredEventSerializer(recommendations, many=True)
        return Response(
            {'recommendations': serializer.data},
            status=status.HTTP_200_OK
        )

    def rank(self, ranker, params):
        raise NotImplementedError


class RecommendationsView(BaseRecommendationView):
    """
    API endpoint for personalized event recommendations.

    GET /api/recommendations/?user_id=<uuid>&lat=27.7172&lon=85.3240&limit=10
    """

    def rank(self, ranker, params):
        return ranker.recommend(
            params['user_id'],
            user_lat=params.get('lat'),
            user_lon=params.get('lon'),
            limit=params.get('limit'),
        )


class InterestRecommendationsView(BaseRecommendationView):
    """
    API endpoint for recommendations based on interest tags only.

    GET /api/recommendations/interests/?user_id=<uuid>&limit=10
    """

    def rank(self, ranker, params):
        return ranker.recommend_by_interests(params['user_id'], limit=params.get('limit'))


class SocialRecommendationsView(BaseRecommendationView):
    """
    API endpoint for recommendations based on followed users' activity.

    GET /api/recommendations/social/?user_id=<uuid>&limit=10
    """

    def rank(self, ranker, params):
        return ranker.recommend_social(params['user_id'], limit=params.get('limit'))
