"""Pydantic output schemas for the implementation roadmap.

The roadmap is an in-memory structure handed to an outer boundary for
serialisation. Field names are snake_case in Python and camelCase on the
wire (``model_dump(by_alias=True)`` / ``model_dump_json(by_alias=True)``).
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

QualitativeLevel = Literal["Low", "Medium", "High"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class LocalisedTextSchema(_CamelModel):
    """Bilingual display text."""

    en: str
    ja: str


class DurationRange(_CamelModel):
    """Suggested timeline window, e.g. '3-5 weeks'.

    Attributes:
        min: Inclusive lower bound.
        max: Inclusive upper bound.
        unit: Time unit of the bounds.
    """

    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)
    unit: Literal["weeks", "months"] = "weeks"


class Recommendation(_CamelModel):
    """One roadmap action, ranked and bucketed for display.

    Attributes:
        id: Stable recommendation id (the capability step id).
        step_ref: Capability step this recommendation comes from.
        category: Assessment category addressed.
        impact_area: Impact area symbol (IC/OE/DP/IM/TM).
        priority_rank: 1-based position in the final sort (1 = highest).
        impact_level: Qualitative impact bucket.
        effort_level: Qualitative effort bucket.
        roi_score: Raw priority score.
        timeline: Suggested duration window.
        duration_weeks: Scheduler estimate in whole weeks.
        quick_win: Quick-win flag from the catalog.
        considerations_only: True for stretch placeholders.
        label: Localised title.
        description: Localised description.
        phase: Difficulty phase from the catalog.
        considerations: Stretch suggestions (stretch placeholders only).
    """

    id: str
    step_ref: str
    category: str
    impact_area: str
    priority_rank: int = Field(..., ge=1)
    impact_level: QualitativeLevel
    effort_level: QualitativeLevel
    roi_score: int
    timeline: DurationRange
    duration_weeks: int = Field(..., ge=0)
    quick_win: bool = False
    considerations_only: bool = False
    label: LocalisedTextSchema
    description: LocalisedTextSchema
    phase: str | None = None
    considerations: list[str] | None = None


class RoadmapPhase(_CamelModel):
    """Duration band with its recommendations in priority order.

    Attributes:
        index: Band index (0 = short, 1 = medium, 2 = long).
        band: Duration band label.
        recommendations: Recommendations in priority-rank order.
    """

    index: int
    band: Literal["short", "medium", "long"]
    recommendations: list[Recommendation] = Field(default_factory=list)


class ImplementationRoadmap(_CamelModel):
    """The full plan for one assessment.

    Attributes:
        assessment_id: Assessment snapshot the roadmap is based on.
        phases: One entry per duration band (short, medium, long), in that
            order; a band without recommendations has an empty list.
        recommendations_by_id: Lookup table for detail views.
    """

    assessment_id: int | str
    phases: list[RoadmapPhase] = Field(default_factory=list)
    recommendations_by_id: dict[str, Recommendation] = Field(default_factory=dict)

    def all_recommendations(self) -> list[Recommendation]:
        """Return every recommendation in priority-rank order."""
        return sorted(
            self.recommendations_by_id.values(),
            key=lambda recommendation: recommendation.priority_rank,
        )


class DependencySummary(_CamelModel):
    """Direct prerequisite shown in a recommendation detail view."""

    id: str
    label: LocalisedTextSchema
    description: LocalisedTextSchema


class RecommendationDetail(_CamelModel):
    """Expanded view of a single capability step.

    Attributes:
        id: Capability step id.
        category: Assessment category.
        phase: Difficulty phase.
        label: Localised title.
        description: Localised description.
        effort_points: Effort estimate.
        impact_area: Impact area symbol.
        quick_win: Quick-win flag.
        dependencies: Resolved direct prerequisites.
        considerations: Stretch suggestions for the category, if any.
        implementation_steps: Suggested delivery steps.
        success_criteria: How to tell the step has landed.
    """

    id: str
    category: str
    phase: str
    label: LocalisedTextSchema
    description: LocalisedTextSchema
    effort_points: int
    impact_area: str
    quick_win: bool
    dependencies: list[DependencySummary] = Field(default_factory=list)
    considerations: list[str] | None = None
    implementation_steps: list[str] = Field(default_factory=list)
    success_criteria: list[str] = Field(default_factory=list)


class RoadmapSummary(_CamelModel):
    """Counts used for logging and reporting."""

    total: int
    short: int
    medium: int
    long: int
    quick_wins: int
    considerations_only: int
