"""Roadmap assembly: final ordering, phase bands, and display metadata.

Ordering is priority descending, then impact weight descending, then catalog
position. The catalog-position tie-break is carried explicitly on every item
so the result never depends on incidental iteration order.
"""

import math
from collections.abc import Iterable

from maturity_roadmap.core.interfaces import ICapabilityCatalog
from maturity_roadmap.core.models import RoadmapItem
from maturity_roadmap.core.stretch import StretchGoalInjector
from maturity_roadmap.schemas.roadmap import (
    DurationRange,
    ImplementationRoadmap,
    LocalisedTextSchema,
    Recommendation,
    RoadmapPhase,
)

# (band, inclusive upper bound in weeks); the last band is open-ended
PHASE_BANDS: list[tuple[str, float]] = [
    ("short", 12),
    ("medium", 24),
    ("long", math.inf),
]

# Impact area -> qualitative impact level for display
IMPACT_LEVELS: dict[str, str] = {
    "DP": "High",  # Developer productivity
    "TM": "High",  # Time to market
    "IM": "Medium",  # Incident management
    "OE": "Medium",  # Operational efficiency
    "IC": "Low",  # Infrastructure cost
}


def band_for_duration(duration_weeks: int) -> tuple[int, str]:
    """Return (band index, band label) for a duration in weeks."""
    for index, (band, upper) in enumerate(PHASE_BANDS):
        if duration_weeks <= upper:
            return index, band
    return len(PHASE_BANDS) - 1, PHASE_BANDS[-1][0]


def impact_level(impact_area: str) -> str:
    return IMPACT_LEVELS.get(impact_area, "Medium")


def effort_level(effort_points: int) -> str:
    if effort_points <= 2:
        return "Low"
    if effort_points <= 5:
        return "Medium"
    return "High"


def timeline_for(duration_weeks: int) -> DurationRange:
    """Widen a point estimate into a display range (-20% / +20%).

    Zero-duration placeholders get a 0-0 window.
    """
    if duration_weeks <= 0:
        return DurationRange(min=0, max=0, unit="weeks")
    # integer arithmetic: floor(d * 0.8) and ceil(d * 1.2)
    return DurationRange(
        min=max(1, duration_weeks * 4 // 5),
        max=-(-duration_weeks * 6 // 5),
        unit="weeks",
    )


class RoadmapAssembler:
    """Sorts roadmap items and packages them into phases.

    Args:
        catalog: Catalog snapshot providing impact weights.
        injector: Source of stretch considerations for placeholder items.
    """

    def __init__(
        self,
        catalog: ICapabilityCatalog,
        injector: StretchGoalInjector | None = None,
    ) -> None:
        self._catalog = catalog
        self._injector = injector or StretchGoalInjector()

    def sort_items(self, items: Iterable[RoadmapItem]) -> list[RoadmapItem]:
        """Order items by priority, then impact weight, then catalog position."""
        return sorted(
            items,
            key=lambda item: (
                -item.priority,
                -self._catalog.impact_weight(item.step),
                item.original_index,
            ),
        )

    def to_recommendation(
        self,
        item: RoadmapItem,
        rank: int,
        language: str = "en",
    ) -> Recommendation:
        step = item.step
        considerations: list[str] | None = None
        if item.considerations_only:
            stretch = self._injector.considerations_for(step.category)
            if stretch is not None:
                considerations = stretch.for_language(language)

        return Recommendation(
            id=step.id,
            step_ref=step.id,
            category=step.category,
            impact_area=step.impact_area,
            priority_rank=rank,
            impact_level=impact_level(step.impact_area),
            effort_level=effort_level(step.effort_points),
            roi_score=item.priority,
            timeline=timeline_for(item.duration_weeks),
            duration_weeks=item.duration_weeks,
            quick_win=step.quick_win,
            considerations_only=item.considerations_only,
            label=LocalisedTextSchema(en=step.label.en, ja=step.label.ja),
            description=LocalisedTextSchema(
                en=step.description.en, ja=step.description.ja
            ),
            phase=step.phase,
            considerations=considerations,
        )

    def assemble(
        self,
        assessment_id: int | str,
        items: Iterable[RoadmapItem],
        language: str = "en",
    ) -> ImplementationRoadmap:
        """Build the final roadmap structure.

        Args:
            assessment_id: Assessment snapshot id to attach.
            items: Candidate and stretch items, in any order.
            language: Language for stretch considerations.

        Returns:
            ImplementationRoadmap with one phase per duration band, shortest
            first. Bands without items keep an empty recommendation list.
        """
        ordered = self.sort_items(items)

        buckets: list[list[Recommendation]] = [[] for _ in PHASE_BANDS]
        recommendations_by_id: dict[str, Recommendation] = {}
        for rank, item in enumerate(ordered, start=1):
            recommendation = self.to_recommendation(item, rank, language)
            band_index, _ = band_for_duration(item.duration_weeks)
            buckets[band_index].append(recommendation)
            recommendations_by_id[recommendation.id] = recommendation

        phases = [
            RoadmapPhase(
                index=band_index,
                band=PHASE_BANDS[band_index][0],
                recommendations=recommendations,
            )
            for band_index, recommendations in enumerate(buckets)
        ]

        return ImplementationRoadmap(
            assessment_id=assessment_id,
            phases=phases,
            recommendations_by_id=recommendations_by_id,
        )
