"""Velocity-based duration estimates for roadmap items.

    idealDays    = effort_points / pointsPerIdealDay
    sprints      = ceil(idealDays / idealDaysPerSprint)
    durationWks  = ceil(sprints / parallelStreams[orgSize]) * 2

Each item is estimated as if it had the team's full parallel capacity to
itself. This is a per-item static estimate, not a shared-capacity schedule.
"""

import math

from maturity_roadmap.core.models import VelocityTable
from maturity_roadmap.observability import get_logger

logger = get_logger(__name__)

SPRINT_LENGTH_WEEKS: int = 2
DEFAULT_PARALLEL_STREAMS: int = 1


def _ceil(value: float) -> int:
    # float noise from the divisions must not push a whole number up a step
    return math.ceil(round(value, 9))


class Scheduler:
    """Converts effort points into calendar weeks for one organisation size.

    Args:
        velocity: Velocity model from the catalog.
        org_size: Org size bucket (xs/sm/md/lg). Unknown or missing buckets
            fall back to a single delivery stream.
    """

    def __init__(self, velocity: VelocityTable, org_size: str | None) -> None:
        self._velocity = velocity
        streams = velocity.streams_for(org_size)
        if streams is None:
            logger.warning(
                "Unknown org size bucket, assuming a single delivery stream",
                org_size=org_size,
            )
            streams = DEFAULT_PARALLEL_STREAMS
        self._streams = streams

    @property
    def parallel_streams(self) -> int:
        return self._streams

    def sprints_for(self, effort_points: int) -> int:
        ideal_days = effort_points / self._velocity.points_per_ideal_day
        return _ceil(ideal_days / self._velocity.ideal_days_per_sprint)

    def duration_weeks(self, effort_points: int) -> int:
        """Return the calendar duration in whole weeks.

        Args:
            effort_points: Effort estimate of the step.

        Returns:
            Non-negative whole number of weeks (a multiple of the sprint length).
        """
        return _ceil(self.sprints_for(effort_points) / self._streams) * SPRINT_LENGTH_WEEKS
