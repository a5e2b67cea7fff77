"""Priority scoring for roadmap candidates.

    costImpact     = min(2_000_000, 1_000_000 * impactWeight)
    normalisedCost = min(100, log10(costImpact + 1) * 20)
    score          = round(0.45*gap + 0.35*normalisedCost + 0.20*(10 - effort)*10)
    priority       = score + categoryBoost

The category boost is an organisation policy layered on top of the formula.
The result is not clamped after the boost, so priorities above 100 are valid.
"""

import math

from maturity_roadmap.core.categories import category_boost
from maturity_roadmap.core.interfaces import ICapabilityCatalog
from maturity_roadmap.core.models import RoadmapCandidate

GAP_WEIGHT: float = 0.45
COST_WEIGHT: float = 0.35
COMPLEXITY_WEIGHT: float = 0.20

COST_IMPACT_SCALE: float = 1_000_000.0
COST_IMPACT_CAP: float = 2_000_000.0


def normalised_cost(cost_impact: float) -> float:
    """Log-scale a cost impact figure onto 0-100."""
    return min(100.0, math.log10(cost_impact + 1) * 20)


def priority_score(
    gap_pct: float,
    cost_impact: float,
    complexity: int,
    boost: int = 0,
) -> int:
    """Compute a candidate's priority.

    Lower complexity (effort points) raises the priority.

    Args:
        gap_pct: Gap between the category score and full maturity.
        cost_impact: Estimated cost impact (currency units).
        complexity: Effort points of the step.
        boost: Category policy boost added after rounding.

    Returns:
        Integer priority; may exceed 100 once the boost is applied.
    """
    score = (
        GAP_WEIGHT * gap_pct
        + COST_WEIGHT * normalised_cost(cost_impact)
        + COMPLEXITY_WEIGHT * (10 - complexity) * 10
    )
    # half-up rounding
    return math.floor(score + 0.5) + boost


class PriorityScorer:
    """Assigns priorities to filtered candidates.

    Args:
        catalog: Catalog snapshot providing impact weights.
        boosts: Category boost policy; the built-in table when None.
    """

    def __init__(
        self,
        catalog: ICapabilityCatalog,
        boosts: dict[str, int] | None = None,
    ) -> None:
        self._catalog = catalog
        self._boosts = boosts

    def cost_impact(self, candidate: RoadmapCandidate) -> float:
        return min(
            COST_IMPACT_CAP,
            COST_IMPACT_SCALE * self._catalog.impact_weight(candidate.step),
        )

    def score(self, candidate: RoadmapCandidate) -> int:
        """Return the boosted priority for a candidate."""
        return priority_score(
            gap_pct=candidate.gap,
            cost_impact=self.cost_impact(candidate),
            complexity=candidate.step.effort_points,
            boost=category_boost(candidate.step.category, self._boosts),
        )
