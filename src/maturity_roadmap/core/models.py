"""Domain models for the capability catalog and the roadmap pipeline.

Catalog entities (CapabilityStep, VelocityTable) are frozen dataclasses built
once at load time and shared read-only between requests. RoadmapItem and
RoadmapCandidate are created fresh per roadmap request.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

CapabilityPhase = Literal["beginner", "intermediate", "advanced"]
ImpactArea = Literal["IC", "OE", "DP", "IM", "TM"]
OrgSizeBucket = Literal["xs", "sm", "md", "lg"]
PhaseBand = Literal["short", "medium", "long"]

ORG_SIZE_BUCKETS: tuple[str, ...] = ("xs", "sm", "md", "lg")
IMPACT_AREAS: tuple[str, ...] = ("IC", "OE", "DP", "IM", "TM")
CAPABILITY_PHASES: tuple[str, ...] = ("beginner", "intermediate", "advanced")

# Fibonacci-style t-shirt sizing
EFFORT_POINT_SCALE: tuple[int, ...] = (1, 2, 3, 5, 8, 13)


@dataclass(frozen=True)
class LocalisedText:
    """Bilingual text container. Both languages are always present.

    Attributes:
        en: English text.
        ja: Japanese text.
    """

    en: str
    ja: str

    def get(self, language: str) -> str:
        """Return the text for a language, falling back to English."""
        return self.ja if language == "ja" else self.en


@dataclass(frozen=True)
class QuestionDependency:
    """Evidence rule: a strong enough answer retires a capability step.

    Attributes:
        question_id: Assessment question identifier (e.g., 'sc_1').
        min_value: Minimum question score (0-100) that counts as satisfied.
    """

    question_id: str
    min_value: float


@dataclass(frozen=True)
class CapabilityStep:
    """A single improvement action in the capability matrix.

    Attributes:
        id: Globally unique kebab/snake-cased identifier.
        category: Assessment category this step improves.
        phase: Difficulty phase (beginner/intermediate/advanced).
        order: 1-based display order within (category, phase). Display only.
        label: Localised card title.
        description: Localised short paragraph.
        effort_points: Fibonacci effort estimate, 1-13.
        impact_area: Impact area symbol (IC/OE/DP/IM/TM).
        quick_win: Surfaces in the quick-win view when True.
        dependencies: Direct prerequisite step ids. Not consulted by the pipeline.
        question_dependencies: Evidence rules for the short-circuit filter.
    """

    id: str
    category: str
    phase: CapabilityPhase
    order: int
    label: LocalisedText
    description: LocalisedText
    effort_points: int
    impact_area: ImpactArea
    quick_win: bool = False
    dependencies: tuple[str, ...] = ()
    question_dependencies: tuple[QuestionDependency, ...] = ()


@dataclass(frozen=True)
class VelocityTable:
    """Throughput model converting effort points into calendar time.

    Attributes:
        points_per_ideal_day: Effort points one stream completes per ideal day.
        ideal_days_per_sprint: Ideal days of work in one two-week sprint.
        parallel_streams: Org size bucket -> number of parallel delivery streams.
    """

    points_per_ideal_day: float
    ideal_days_per_sprint: float
    parallel_streams: Mapping[str, int] = field(default_factory=dict)

    def streams_for(self, org_size: str | None) -> int | None:
        """Return the stream count for a bucket, or None when the bucket is unknown."""
        if org_size is None:
            return None
        return self.parallel_streams.get(org_size)


@dataclass(frozen=True)
class RoadmapCandidate:
    """A capability step that survived the gap and eligibility filter.

    Attributes:
        step: The eligible capability step.
        gap: 100 - category score (101 for a knowledge-gap category).
        original_index: Position of the step in the catalog listing.
    """

    step: CapabilityStep
    gap: float
    original_index: int


@dataclass(frozen=True)
class RoadmapItem:
    """A scheduled, prioritised capability step ready for assembly.

    Attributes:
        step: Source capability step (or synthesised stretch placeholder).
        priority: Priority score. Not clamped; category boosts may push it past 100.
        duration_weeks: Calendar duration in whole weeks, always >= 0.
        considerations_only: True for informational stretch placeholders.
        original_index: Catalog position used as the final sort tie-break.
    """

    step: CapabilityStep
    priority: int
    duration_weeks: int
    considerations_only: bool = False
    original_index: int = 0

    @property
    def id(self) -> str:
        return self.step.id

    @property
    def category(self) -> str:
        return self.step.category


@dataclass
class FilterResult:
    """Output of the gap and eligibility filter for one request.

    Attributes:
        candidates: Surviving steps in catalog order.
        high_performing_categories: Assessed categories scoring >= the
            high-performer threshold, in assessment-module order.
    """

    candidates: list[RoadmapCandidate] = field(default_factory=list)
    high_performing_categories: list[str] = field(default_factory=list)
