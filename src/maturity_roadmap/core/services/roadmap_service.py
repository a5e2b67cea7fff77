"""Service layer producing implementation roadmaps from assessment scores.

Pipeline for one request (pure and synchronous):
    1. GapFilter: eligible candidates + high-performing categories
    2. PriorityScorer: priority per candidate
    3. Scheduler: duration per candidate
    4. StretchGoalInjector: placeholders for matured categories
    5. RoadmapAssembler: ordering, phase bands, recommendation metadata

The service takes one catalog snapshot at the start of each request, so a
concurrent catalog reload never mixes two catalogs inside one roadmap.
"""

from collections.abc import Mapping
from typing import Protocol, cast

from maturity_roadmap.core.assembler import PHASE_BANDS, RoadmapAssembler
from maturity_roadmap.core.categories import (
    categories_for_assessment_type,
    org_size_bucket_for,
)
from maturity_roadmap.core.details import implementation_steps, success_criteria
from maturity_roadmap.core.filtering import GapFilter
from maturity_roadmap.core.interfaces import ICapabilityCatalog
from maturity_roadmap.core.models import RoadmapItem
from maturity_roadmap.core.scheduling import Scheduler
from maturity_roadmap.core.scoring import PriorityScorer
from maturity_roadmap.core.stretch import StretchGoalInjector
from maturity_roadmap.errors import RecommendationNotFoundError
from maturity_roadmap.observability import get_logger
from maturity_roadmap.schemas.roadmap import (
    DependencySummary,
    ImplementationRoadmap,
    LocalisedTextSchema,
    RecommendationDetail,
    RoadmapSummary,
)

logger = get_logger(__name__)


class CatalogSource(Protocol):
    """Anything exposing the current catalog snapshot (e.g. CatalogProvider)."""

    @property
    def current(self) -> ICapabilityCatalog: ...


class RoadmapService:
    """Builds implementation roadmaps against a shared, read-only catalog.

    Exactly one of ``catalog`` or ``catalog_source`` must be given.

    Args:
        catalog: Fixed catalog used for every request.
        catalog_source: Reloadable holder; its ``current`` snapshot is read
            once per request.
        injector: Stretch-goal injector (built-in considerations when None).
        boosts: Category boost policy (built-in table when None).
        default_org_size: Bucket used when neither org size nor a known
            company size is supplied; None means a single stream.
        default_assessment_type: Assessment type used when none is supplied.
        default_language: Language used when none is supplied.
    """

    def __init__(
        self,
        catalog: ICapabilityCatalog | None = None,
        *,
        catalog_source: CatalogSource | None = None,
        injector: StretchGoalInjector | None = None,
        boosts: dict[str, int] | None = None,
        default_org_size: str | None = None,
        default_assessment_type: str = "comprehensive",
        default_language: str = "en",
    ) -> None:
        if (catalog is None) == (catalog_source is None):
            raise ValueError("Provide exactly one of catalog or catalog_source")
        self._catalog = catalog
        self._catalog_source = catalog_source
        self._injector = injector or StretchGoalInjector()
        self._boosts = boosts
        self._default_org_size = default_org_size
        self._default_assessment_type = default_assessment_type
        self._default_language = default_language

    def _snapshot(self) -> ICapabilityCatalog:
        if self._catalog_source is not None:
            return self._catalog_source.current
        # exactly one of the two is set, enforced in __init__
        return cast(ICapabilityCatalog, self._catalog)

    def build_items(
        self,
        category_scores: Mapping[str, float],
        org_size: str | None = None,
        assessment_type: str | None = None,
        question_scores: Mapping[str, float] | None = None,
        catalog: ICapabilityCatalog | None = None,
    ) -> list[RoadmapItem]:
        """Run filter, scorer, scheduler and stretch injection.

        Args:
            category_scores: Category id -> score in [-1, 100].
            org_size: Org size bucket; None or unknown means a single stream.
            assessment_type: quick|standard|comprehensive; default when None.
            question_scores: Question id -> score, for evidence short-circuits.
            catalog: Snapshot to use; taken from the service when None.

        Returns:
            Roadmap items in final priority order.

        Raises:
            UnknownAssessmentTypeError: If the assessment type is not recognised.
        """
        if catalog is None:
            catalog = self._snapshot()
        assessment_type = assessment_type or self._default_assessment_type
        allowed = categories_for_assessment_type(assessment_type)

        filtered = GapFilter(catalog).filter(
            category_scores, question_scores or {}, allowed
        )
        scorer = PriorityScorer(catalog, self._boosts)
        scheduler = Scheduler(catalog.velocity_table(), org_size)

        items = [
            RoadmapItem(
                step=candidate.step,
                priority=scorer.score(candidate),
                duration_weeks=scheduler.duration_weeks(candidate.step.effort_points),
                original_index=candidate.original_index,
            )
            for candidate in filtered.candidates
        ]
        items.extend(
            self._injector.inject(
                filtered.high_performing_categories,
                items,
                first_index=len(catalog.list_all()),
            )
        )

        logger.debug(
            "Roadmap items built",
            assessment_type=assessment_type,
            org_size=org_size,
            parallel_streams=scheduler.parallel_streams,
            catalog_size=len(catalog.list_all()),
            item_count=len(items),
        )
        return RoadmapAssembler(catalog, self._injector).sort_items(items)

    def generate_roadmap(
        self,
        assessment_id: int | str,
        category_scores: Mapping[str, float],
        question_scores: Mapping[str, float] | None = None,
        org_size: str | None = None,
        assessment_type: str | None = None,
        language: str | None = None,
        company_size: str | None = None,
    ) -> ImplementationRoadmap:
        """Generate the phased implementation roadmap for one assessment.

        Args:
            assessment_id: Assessment snapshot id attached to the result.
            category_scores: Category id -> score in [-1, 100]. Categories
                that were never assessed must be absent.
            question_scores: Question id -> score in [-1, 100].
            org_size: Org size bucket; derived from ``company_size`` when None.
            assessment_type: quick|standard|comprehensive.
            language: Language for stretch considerations ('en' or 'ja').
            company_size: Free-text headcount range (e.g. '51-100').

        Returns:
            ImplementationRoadmap. Empty phases when nothing is actionable.
        """
        catalog = self._snapshot()
        if org_size is None:
            org_size = org_size_bucket_for(company_size, self._default_org_size)
        language = language or self._default_language

        items = self.build_items(
            category_scores,
            org_size=org_size,
            assessment_type=assessment_type,
            question_scores=question_scores,
            catalog=catalog,
        )
        roadmap = RoadmapAssembler(catalog, self._injector).assemble(
            assessment_id, items, language
        )

        summary = self.summarize(roadmap)
        logger.info(
            "Implementation roadmap generated",
            assessment_id=assessment_id,
            org_size=org_size,
            total=summary.total,
            short_term=summary.short,
            medium_term=summary.medium,
            long_term=summary.long,
            quick_wins=summary.quick_wins,
            considerations_only=summary.considerations_only,
        )
        return roadmap

    def summarize(self, roadmap: ImplementationRoadmap) -> RoadmapSummary:
        """Count recommendations per band, quick wins and stretch placeholders."""
        counts = {band: 0 for band, _ in PHASE_BANDS}
        for phase in roadmap.phases:
            counts[phase.band] += len(phase.recommendations)
        recommendations = list(roadmap.recommendations_by_id.values())
        return RoadmapSummary(
            total=len(recommendations),
            short=counts["short"],
            medium=counts["medium"],
            long=counts["long"],
            quick_wins=sum(1 for rec in recommendations if rec.quick_win),
            considerations_only=sum(
                1 for rec in recommendations if rec.considerations_only
            ),
        )

    def recommendation_detail(
        self,
        step_id: str,
        language: str | None = None,
    ) -> RecommendationDetail:
        """Return the expanded detail view for one capability step.

        Args:
            step_id: Capability step id.
            language: 'en' or 'ja'; the configured default when None.

        Returns:
            RecommendationDetail with resolved direct dependencies, stretch
            considerations, implementation steps and success criteria.

        Raises:
            RecommendationNotFoundError: If no step has the given id.
        """
        catalog = self._snapshot()
        language = language or self._default_language

        step = catalog.get_by_id(step_id)
        if step is None:
            raise RecommendationNotFoundError(f"Recommendation not found: {step_id!r}")

        dependencies: list[DependencySummary] = []
        for dependency_id in catalog.deps_of(step_id):
            dependency = catalog.get_by_id(dependency_id)
            if dependency is None:
                continue
            dependencies.append(
                DependencySummary(
                    id=dependency.id,
                    label=LocalisedTextSchema(en=dependency.label.en, ja=dependency.label.ja),
                    description=LocalisedTextSchema(
                        en=dependency.description.en, ja=dependency.description.ja
                    ),
                )
            )

        stretch = self._injector.considerations_for(step.category)
        return RecommendationDetail(
            id=step.id,
            category=step.category,
            phase=step.phase,
            label=LocalisedTextSchema(en=step.label.en, ja=step.label.ja),
            description=LocalisedTextSchema(en=step.description.en, ja=step.description.ja),
            effort_points=step.effort_points,
            impact_area=step.impact_area,
            quick_win=step.quick_win,
            dependencies=dependencies,
            considerations=stretch.for_language(language) if stretch else None,
            implementation_steps=implementation_steps(step, language),
            success_criteria=success_criteria(step, language),
        )


__all__ = ["CatalogSource", "RoadmapService"]
