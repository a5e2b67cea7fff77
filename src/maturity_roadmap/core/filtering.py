"""Gap and eligibility filter for capability steps.

Decides which capability steps are actionable for one assessment. Rules are
applied to each step in catalog order:

    1. category must belong to the assessment type's module
    2. category must have a score (never recommend against absent data)
    3. evidence short-circuit: every question dependency met -> step retired
    4. gap = 100 - score; reject when gap < 10 or score >= 85

A score of -1 marks a knowledge gap ("I don't know") and yields gap 101, so
such categories always pass rule 4.
"""

from collections.abc import Iterable, Mapping

from maturity_roadmap.core.interfaces import ICapabilityCatalog
from maturity_roadmap.core.models import (
    CapabilityStep,
    FilterResult,
    RoadmapCandidate,
)
from maturity_roadmap.observability import get_logger

logger = get_logger(__name__)

HIGH_PERFORMER_THRESHOLD: float = 85.0
MIN_ACTIONABLE_GAP: float = 10.0
KNOWLEDGE_GAP_SCORE: float = -1.0


def compute_gap(category_score: float) -> float:
    """Return the shortfall from full maturity (101 for the knowledge-gap sentinel)."""
    return 100.0 - category_score


def question_dependencies_satisfied(
    step: CapabilityStep,
    question_scores: Mapping[str, float],
) -> bool:
    """Return True when a step's evidence rules show it is already in place.

    A step without question dependencies is never satisfied. A question with
    no recorded score counts as unmet.

    Args:
        step: Capability step to check.
        question_scores: Question id -> score (0-100, or -1 for knowledge gap).

    Returns:
        True if every question dependency meets its minimum value.
    """
    if not step.question_dependencies:
        return False
    for dependency in step.question_dependencies:
        # unanswered is not evidence, even for a zero threshold
        score = question_scores.get(dependency.question_id)
        if score is None or score < dependency.min_value:
            return False
    return True


class GapFilter:
    """Selects roadmap candidates from the capability catalog.

    Args:
        catalog: Catalog snapshot for this request.
        high_performer_threshold: Category score at or above which a category
            is routed to stretch considerations instead of recommendations.
        min_gap: Smallest gap still worth acting on.
    """

    def __init__(
        self,
        catalog: ICapabilityCatalog,
        high_performer_threshold: float = HIGH_PERFORMER_THRESHOLD,
        min_gap: float = MIN_ACTIONABLE_GAP,
    ) -> None:
        self._catalog = catalog
        self._high_performer_threshold = high_performer_threshold
        self._min_gap = min_gap

    def high_performing_categories(
        self,
        category_scores: Mapping[str, float],
        allowed_categories: Iterable[str],
    ) -> list[str]:
        """Return assessed categories at or above the high-performer threshold.

        Args:
            category_scores: Category id -> score.
            allowed_categories: Module categories in display order.

        Returns:
            High-performing category ids, in module order.
        """
        return [
            category
            for category in allowed_categories
            if category in category_scores
            and category_scores[category] >= self._high_performer_threshold
        ]

    def filter(
        self,
        category_scores: Mapping[str, float],
        question_scores: Mapping[str, float],
        allowed_categories: Iterable[str],
    ) -> FilterResult:
        """Run the eligibility rules over the whole catalog.

        Args:
            category_scores: Category id -> score in [-1, 100].
            question_scores: Question id -> score in [-1, 100].
            allowed_categories: Categories assessed by the assessment type.

        Returns:
            FilterResult with surviving candidates (tagged with their catalog
            position) and the high-performing categories.
        """
        allowed = list(allowed_categories)
        allowed_set = set(allowed)
        result = FilterResult(
            high_performing_categories=self.high_performing_categories(
                category_scores, allowed
            )
        )

        for index, step in enumerate(self._catalog.list_all()):
            if step.category not in allowed_set:
                continue

            if step.category not in category_scores:
                logger.debug(
                    "Skipping capability: category not scored",
                    step_id=step.id,
                    category=step.category,
                )
                continue

            if question_dependencies_satisfied(step, question_scores):
                logger.debug(
                    "Skipping capability: question evidence already satisfied",
                    step_id=step.id,
                    question_ids=[dep.question_id for dep in step.question_dependencies],
                )
                continue

            category_score = category_scores[step.category]
            gap = compute_gap(category_score)
            if gap < self._min_gap or category_score >= self._high_performer_threshold:
                logger.debug(
                    "Skipping capability: category performing well",
                    step_id=step.id,
                    category=step.category,
                    score=category_score,
                    gap=gap,
                )
                continue

            result.candidates.append(
                RoadmapCandidate(step=step, gap=gap, original_index=index)
            )

        logger.debug(
            "Eligibility filter complete",
            candidate_count=len(result.candidates),
            high_performing=result.high_performing_categories,
        )
        return result
