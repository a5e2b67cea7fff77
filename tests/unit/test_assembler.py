"""Unit tests for roadmap assembly.

Tests cover:
- Phase band boundaries (12 / 24 weeks)
- Display timeline window and qualitative levels
- Sort order: priority, then impact weight, then catalog position
- All three bands in order, so list position equals band index
- 1-based priority ranks and the recommendations_by_id lookup
- Considerations attached to stretch placeholders only
- Empty input yields three empty bands
"""

import pytest
from factories import make_step

from maturity_roadmap.adapters.catalog_repository import CapabilityCatalog
from maturity_roadmap.core.assembler import (
    RoadmapAssembler,
    band_for_duration,
    effort_level,
    impact_level,
    timeline_for,
)
from maturity_roadmap.core.models import RoadmapItem
from maturity_roadmap.core.stretch import consideration_step


def _item(step_id: str, priority: int, weeks: int, index: int, impact_area: str = "DP",
          effort: int = 3) -> RoadmapItem:
    return RoadmapItem(
        step=make_step(step_id, effort_points=effort, impact_area=impact_area),
        priority=priority,
        duration_weeks=weeks,
        original_index=index,
    )


@pytest.fixture()
def assembler(small_catalog: CapabilityCatalog) -> RoadmapAssembler:
    """Provide an assembler using the small catalog's impact weights."""
    return RoadmapAssembler(small_catalog)


class TestBands:
    """Verify duration band boundaries."""

    @pytest.mark.parametrize(
        ("weeks", "expected"),
        [
            (0, (0, "short")),
            (2, (0, "short")),
            (12, (0, "short")),
            (13, (1, "medium")),
            (24, (1, "medium")),
            (25, (2, "long")),
            (104, (2, "long")),
        ],
    )
    def test_band_for_duration(self, weeks: int, expected: tuple[int, str]) -> None:
        """Bands are inclusive at their upper bound."""
        assert band_for_duration(weeks) == expected


class TestDisplayMetadata:
    """Verify timeline and qualitative levels."""

    @pytest.mark.parametrize(
        ("weeks", "expected"),
        [(4, (3, 5)), (2, (1, 3)), (10, (8, 12)), (1, (1, 2)), (0, (0, 0))],
    )
    def test_timeline_window(self, weeks: int, expected: tuple[int, int]) -> None:
        """Timeline spans 80% to 120% of the estimate, at least one week."""
        window = timeline_for(weeks)
        assert (window.min, window.max) == expected
        assert window.unit == "weeks"

    def test_impact_levels(self) -> None:
        """DP and TM are high impact; IM and OE medium; IC low."""
        assert [impact_level(area) for area in ("DP", "TM", "IM", "OE", "IC")] == [
            "High", "High", "Medium", "Medium", "Low",
        ]

    @pytest.mark.parametrize(
        ("effort", "expected"),
        [(1, "Low"), (2, "Low"), (3, "Medium"), (5, "Medium"), (8, "High"), (13, "High")],
    )
    def test_effort_levels(self, effort: int, expected: str) -> None:
        """Effort points map onto Low/Medium/High."""
        assert effort_level(effort) == expected


class TestSortItems:
    """Verify the final ordering."""

    def test_priority_descending(self, assembler: RoadmapAssembler) -> None:
        """Higher priority comes first."""
        ordered = assembler.sort_items([_item("a", 50, 2, 0), _item("b", 80, 2, 1)])
        assert [item.id for item in ordered] == ["b", "a"]

    def test_impact_weight_breaks_ties(self, assembler: RoadmapAssembler) -> None:
        """Among equal priorities, the higher impact weight wins (DP 0.25 > TM 0.15)."""
        ordered = assembler.sort_items(
            [_item("tm", 70, 2, 0, impact_area="TM"), _item("dp", 70, 2, 1, impact_area="DP")]
        )
        assert [item.id for item in ordered] == ["dp", "tm"]

    def test_catalog_position_breaks_remaining_ties(self, assembler: RoadmapAssembler) -> None:
        """Full ties fall back to catalog position, regardless of input order."""
        items = [_item("late", 70, 2, 9), _item("early", 70, 2, 2), _item("mid", 70, 2, 5)]
        ordered = assembler.sort_items(items)
        assert [item.id for item in ordered] == ["early", "mid", "late"]
        assert [item.id for item in assembler.sort_items(reversed(items))] == [
            "early", "mid", "late",
        ]


class TestAssemble:
    """Verify the assembled roadmap."""

    def test_empty_roadmap(self, assembler: RoadmapAssembler) -> None:
        """No items still yields all three bands, each empty."""
        roadmap = assembler.assemble(7, [])
        assert roadmap.assessment_id == 7
        assert [(phase.index, phase.band, phase.recommendations) for phase in roadmap.phases] == [
            (0, "short", []),
            (1, "medium", []),
            (2, "long", []),
        ]
        assert roadmap.recommendations_by_id == {}

    def test_phase_position_matches_band_index(self, assembler: RoadmapAssembler) -> None:
        """Every band is present in order, so phases[i].index == i."""
        roadmap = assembler.assemble(
            "a-1", [_item("quick", 90, 4, 0), _item("slow", 60, 30, 1)]
        )
        assert [
            (phase.index, phase.band, [r.id for r in phase.recommendations])
            for phase in roadmap.phases
        ] == [
            (0, "short", ["quick"]),
            (1, "medium", []),
            (2, "long", ["slow"]),
        ]
        assert all(position == phase.index for position, phase in enumerate(roadmap.phases))

    def test_ranks_follow_global_order(self, assembler: RoadmapAssembler) -> None:
        """Ranks are 1-based over the whole roadmap, not per band."""
        roadmap = assembler.assemble(
            1,
            [_item("c", 50, 4, 2), _item("a", 90, 20, 0), _item("b", 70, 4, 1)],
        )
        short, medium, long = roadmap.phases
        assert [(r.id, r.priority_rank) for r in short.recommendations] == [("b", 2), ("c", 3)]
        assert [(r.id, r.priority_rank) for r in medium.recommendations] == [("a", 1)]
        assert long.recommendations == []
        assert [r.id for r in roadmap.all_recommendations()] == ["a", "b", "c"]

    def test_recommendation_fields(self, assembler: RoadmapAssembler) -> None:
        """Recommendations carry step data and display metadata."""
        roadmap = assembler.assemble(1, [_item("a", 88, 4, 0, impact_area="IM", effort=2)])
        recommendation = roadmap.recommendations_by_id["a"]
        assert recommendation.step_ref == "a"
        assert recommendation.roi_score == 88
        assert recommendation.duration_weeks == 4
        assert (recommendation.timeline.min, recommendation.timeline.max) == (3, 5)
        assert recommendation.impact_level == "Medium"
        assert recommendation.effort_level == "Low"
        assert recommendation.considerations is None
        assert recommendation.label.en == "a label"

    def test_placeholder_gets_considerations(self, assembler: RoadmapAssembler) -> None:
        """Stretch placeholders carry considerations in the requested language."""
        placeholder = RoadmapItem(
            step=consideration_step("observability"),
            priority=0,
            duration_weeks=0,
            considerations_only=True,
            original_index=7,
        )
        roadmap = assembler.assemble(1, [_item("a", 60, 4, 0), placeholder], language="ja")
        recommendation = roadmap.recommendations_by_id["consideration-observability"]
        assert recommendation.considerations_only is True
        assert recommendation.priority_rank == 2
        assert (recommendation.timeline.min, recommendation.timeline.max) == (0, 0)
        assert recommendation.considerations is not None
        assert "異常検知のためのAIOpsの実装" in recommendation.considerations

    def test_camel_case_serialisation(self, assembler: RoadmapAssembler) -> None:
        """Serialised output uses camelCase field names."""
        roadmap = assembler.assemble(1, [_item("a", 60, 4, 0)])
        payload = roadmap.model_dump(by_alias=True)
        assert "recommendationsById" in payload
        assert "priorityRank" in payload["phases"][0]["recommendations"][0]
