"""
URL configuration for the recommendations module.
"""
from django.urls import path
from recommendations.views import (
    RecommendationsView, InterestRecommendationsView, SocialRecommendationsView
)

app_name = 'recommendations'

urlpatterns = [
    path('', RecommendationsView.as_view(), name='recommendations'),
    path('interests/', InterestRecommendationsView.as_view(), name='interest_recommendations'),
    path('social/', SocialRecommendationsView.as_view(), name='social_recommendations'),
]
