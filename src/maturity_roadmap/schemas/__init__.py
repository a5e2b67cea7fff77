"""Pydantic schemas for roadmap output."""

from maturity_roadmap.schemas.roadmap import (
    DependencySummary,
    DurationRange,
    ImplementationRoadmap,
    LocalisedTextSchema,
    Recommendation,
    RecommendationDetail,
    RoadmapPhase,
    RoadmapSummary,
)

__all__ = [
    "DependencySummary",
    "DurationRange",
    "ImplementationRoadmap",
    "LocalisedTextSchema",
    "Recommendation",
    "RecommendationDetail",
    "RoadmapPhase",
    "RoadmapSummary",
]
