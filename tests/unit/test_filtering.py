"""Unit tests for the gap and eligibility filter.

Tests cover:
- compute_gap including the -1 knowledge-gap sentinel
- question_dependencies_satisfied: all-met, partially met, missing scores
- GapFilter rule order: module membership, unscored categories, evidence
  short-circuit, minimum gap, high-performer threshold
- High-performing categories are reported in module order
- Candidates carry their catalog position
"""

import pytest
from factories import make_step

from maturity_roadmap.adapters.catalog_repository import CapabilityCatalog
from maturity_roadmap.core.categories import COMPREHENSIVE_CATEGORIES, CORE_CATEGORIES
from maturity_roadmap.core.filtering import (
    GapFilter,
    compute_gap,
    question_dependencies_satisfied,
)
from maturity_roadmap.core.models import VelocityTable


@pytest.fixture()
def gap_filter(small_catalog: CapabilityCatalog) -> GapFilter:
    """Provide a GapFilter over the small in-memory catalog."""
    return GapFilter(small_catalog)


def _candidate_ids(gap_filter: GapFilter, scores: dict, questions: dict | None = None,
                   allowed: list[str] = COMPREHENSIVE_CATEGORIES) -> list[str]:
    result = gap_filter.filter(scores, questions or {}, allowed)
    return [candidate.step.id for candidate in result.candidates]


class TestComputeGap:
    """Verify gap arithmetic."""

    def test_gap_is_distance_to_full_maturity(self) -> None:
        """Gap must be 100 minus the score."""
        assert compute_gap(40) == 60
        assert compute_gap(100) == 0

    def test_knowledge_gap_sentinel(self) -> None:
        """A score of -1 must yield gap 101."""
        assert compute_gap(-1) == 101


class TestQuestionDependencies:
    """Verify the evidence short-circuit predicate."""

    def test_no_dependencies_never_satisfied(self) -> None:
        """A step without evidence rules is never retired by evidence."""
        assert question_dependencies_satisfied(make_step("s"), {"q": 100}) is False

    def test_all_met(self) -> None:
        """Every rule at or above its minimum retires the step."""
        step = make_step("s", question_dependencies=(("q1", 75), ("q2", 50)))
        assert question_dependencies_satisfied(step, {"q1": 75, "q2": 50}) is True

    def test_one_unmet(self) -> None:
        """A single rule below its minimum keeps the step."""
        step = make_step("s", question_dependencies=(("q1", 75), ("q2", 50)))
        assert question_dependencies_satisfied(step, {"q1": 90, "q2": 49}) is False

    def test_missing_score_counts_as_unmet(self) -> None:
        """An unanswered question must never satisfy a rule, even at min 0."""
        step = make_step("s", question_dependencies=(("q1", 0),))
        assert question_dependencies_satisfied(step, {}) is False

    def test_knowledge_gap_answer_unmet(self) -> None:
        """A -1 answer is below any threshold."""
        step = make_step("s", question_dependencies=(("q1", 0),))
        assert question_dependencies_satisfied(step, {"q1": -1}) is False


class TestGapFilter:
    """Verify eligibility rules over a catalog."""

    def test_only_assessed_module_categories(self, gap_filter: GapFilter) -> None:
        """Categories outside the assessment module must produce no candidates."""
        ids = _candidate_ids(
            gap_filter,
            {"observability": 20, "cicd_practices": 20},
            allowed=CORE_CATEGORIES,
        )
        assert ids == ["cicd-pipeline", "cicd-gitops"]

    def test_unscored_category_skipped(self, gap_filter: GapFilter) -> None:
        """Categories absent from the score map must produce no candidates."""
        ids = _candidate_ids(gap_filter, {"observability": 20})
        assert ids == ["obs-logging"]

    def test_evidence_short_circuit(self, gap_filter: GapFilter) -> None:
        """A met evidence rule retires exactly that step."""
        ids = _candidate_ids(gap_filter, {"security_compliance": 40}, {"sc_1": 80})
        assert ids == ["sec-policy", "sec-zero-trust"]

    def test_partial_evidence_keeps_step(self, gap_filter: GapFilter) -> None:
        """All evidence rules must be met for the short-circuit to apply."""
        ids = _candidate_ids(
            gap_filter, {"security_compliance": 40}, {"sc_3": 90, "sc_4": 10}
        )
        assert "sec-zero-trust" in ids
        ids = _candidate_ids(
            gap_filter, {"security_compliance": 40}, {"sc_3": 90, "sc_4": 50}
        )
        assert "sec-zero-trust" not in ids

    def test_dependencies_do_not_gate_eligibility(self, gap_filter: GapFilter) -> None:
        """A step stays eligible even when its prerequisite is retired."""
        ids = _candidate_ids(gap_filter, {"security_compliance": 40}, {"sc_1": 100})
        assert "sec-policy" in ids

    @pytest.mark.parametrize("score", [85, 90, 91, 100])
    def test_well_performing_category_dropped(self, gap_filter: GapFilter, score: float) -> None:
        """Scores at or above 85, or gaps below 10, must produce no candidates."""
        assert _candidate_ids(gap_filter, {"cicd_practices": score}) == []

    def test_score_just_below_threshold_kept(self, gap_filter: GapFilter) -> None:
        """A score of 84 (gap 16) must still produce candidates."""
        assert _candidate_ids(gap_filter, {"cicd_practices": 84}) == [
            "cicd-pipeline",
            "cicd-gitops",
        ]

    def test_knowledge_gap_always_actionable(self, gap_filter: GapFilter) -> None:
        """A -1 category score must carry gap 101 into the candidates."""
        result = gap_filter.filter({"cicd_practices": -1}, {}, COMPREHENSIVE_CATEGORIES)
        assert [candidate.gap for candidate in result.candidates] == [101, 101]

    def test_candidates_carry_catalog_position(self, gap_filter: GapFilter) -> None:
        """original_index must be the step's position in the full catalog."""
        result = gap_filter.filter(
            {"cicd_practices": 10, "foundations_culture": 10}, {}, COMPREHENSIVE_CATEGORIES
        )
        assert [(c.step.id, c.original_index) for c in result.candidates] == [
            ("cicd-pipeline", 3),
            ("cicd-gitops", 4),
            ("fc-vision", 6),
        ]

    def test_high_performers_in_module_order(self, gap_filter: GapFilter) -> None:
        """High-performing categories must follow module order, not input order."""
        result = gap_filter.filter(
            {"observability": 95, "foundations_culture": 85, "cicd_practices": 84},
            {},
            COMPREHENSIVE_CATEGORIES,
        )
        assert result.high_performing_categories == ["foundations_culture", "observability"]

    def test_high_performers_limited_to_module(self, gap_filter: GapFilter) -> None:
        """A high score outside the module is not reported."""
        result = gap_filter.filter({"observability": 95}, {}, CORE_CATEGORIES)
        assert result.high_performing_categories == []
        assert result.candidates == []

    def test_custom_thresholds(self, small_catalog: CapabilityCatalog) -> None:
        """Thresholds are constructor parameters."""
        strict = GapFilter(small_catalog, high_performer_threshold=50, min_gap=10)
        result = strict.filter({"cicd_practices": 60}, {}, COMPREHENSIVE_CATEGORIES)
        assert result.candidates == []
        assert result.high_performing_categories == ["cicd_practices"]

    def test_zero_threshold_needs_an_answer(self, velocity: VelocityTable) -> None:
        """An unanswered question keeps the step even when its threshold is 0."""
        catalog = CapabilityCatalog(
            [make_step("cicd-any", "cicd_practices", question_dependencies=(("cicd_9", 0),))],
            velocity,
        )
        gap_filter = GapFilter(catalog)
        assert _candidate_ids(gap_filter, {"cicd_practices": 40}) == ["cicd-any"]
        assert _candidate_ids(gap_filter, {"cicd_practices": 40}, {"cicd_9": 0}) == []
