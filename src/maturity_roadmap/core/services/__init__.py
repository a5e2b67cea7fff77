"""Service layer for the roadmap core."""

from maturity_roadmap.core.services.roadmap_service import CatalogSource, RoadmapService

__all__ = ["CatalogSource", "RoadmapService"]
