"""
Recommendations Module Summary
==============================

Ranks ACTIVE events for a user by combining three signals:
interest-tag overlap, distance to the event and activity in the user's follow graph.

Components:
1. SimilarityCalculator, GeoDistanceCalculator, SocialBoostCalculator - pure signal calculators
2. ScoringEngine - weighted combination of the signals
3. RecommendationRanker - loads candidates, scores, filters, sorts and truncates
4. EventCatalog - ORM-backed read queries consumed by the ranker
5. REST API endpoints for the main, interest-only and social rankings
"""
