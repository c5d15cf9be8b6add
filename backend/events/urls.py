"""
URL routing for events app.
"""
from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import EventViewSet, InterestCategoryListView

router = SimpleRouter()
router.register(r'', EventViewSet, basename='event')

app_name = 'events'

urlpatterns = [
    path('interests/', InterestCategoryListView.as_view(), name='interest-categories'),
    path('', include(router.urls)),
]
