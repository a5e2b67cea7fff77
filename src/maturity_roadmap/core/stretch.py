"""Stretch-goal placeholders for fully matured categories.

A high-performing category has every step filtered out, which would make it
disappear from the rendered roadmap. When stretch content exists for such a
category, one informational "top of the trail" item is emitted instead.
"""

from collections.abc import Iterable, Mapping, Sequence

from maturity_roadmap.core.models import CapabilityStep, RoadmapItem
from maturity_roadmap.core.stretch_goals import (
    CONSIDERATION_MAP,
    TOP_OF_TRAIL_DESCRIPTION,
    TOP_OF_TRAIL_LABEL,
    StretchGoal,
)
from maturity_roadmap.observability import get_logger

logger = get_logger(__name__)

CONSIDERATION_ID_PREFIX = "consideration-"


def consideration_step(category: str) -> CapabilityStep:
    """Build the synthetic capability step behind a stretch placeholder."""
    return CapabilityStep(
        id=f"{CONSIDERATION_ID_PREFIX}{category}",
        category=category,
        phase="advanced",
        order=1,
        label=TOP_OF_TRAIL_LABEL,
        description=TOP_OF_TRAIL_DESCRIPTION,
        effort_points=1,
        impact_area="TM",
        quick_win=False,
        dependencies=(),
        question_dependencies=(),
    )


class StretchGoalInjector:
    """Emits considerations-only items for matured categories.

    Args:
        considerations: Category -> stretch content; the built-in map when None.
    """

    def __init__(self, considerations: Mapping[str, StretchGoal] | None = None) -> None:
        self._considerations = CONSIDERATION_MAP if considerations is None else considerations

    def considerations_for(self, category: str) -> StretchGoal | None:
        return self._considerations.get(category)

    def inject(
        self,
        high_performing_categories: Iterable[str],
        items: Sequence[RoadmapItem],
        first_index: int = 0,
    ) -> list[RoadmapItem]:
        """Return stretch placeholders for matured categories without items.

        Args:
            high_performing_categories: Categories scoring as high performers.
            items: Ordinary roadmap items already produced.
            first_index: Tie-break index for the first placeholder; later
                placeholders follow consecutively.

        Returns:
            One considerations-only item per qualifying category.
        """
        covered = {item.category for item in items}
        stretch_items: list[RoadmapItem] = []

        for category in high_performing_categories:
            if category in covered or category not in self._considerations:
                continue
            logger.debug("Adding considerations-only item", category=category)
            stretch_items.append(
                RoadmapItem(
                    step=consideration_step(category),
                    priority=0,
                    duration_weeks=0,
                    considerations_only=True,
                    original_index=first_index + len(stretch_items),
                )
            )
        return stretch_items
