"""Abstract interfaces (Protocol classes) for the roadmap core.

The filter, scorer, scheduler and service depend on ICapabilityCatalog rather
than the file-backed implementation, so tests can inject small in-memory
catalogs. The concrete implementation lives in
``adapters/catalog_repository.py``.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from maturity_roadmap.core.models import CapabilityStep, VelocityTable


@runtime_checkable
class ICapabilityCatalog(Protocol):
    """Read-only access to the capability matrix and velocity model."""

    def list_all(self) -> Sequence[CapabilityStep]:
        """Return every capability step in catalog order."""
        ...

    def list_by_category(self, category: str) -> list[CapabilityStep]:
        """Return the steps for one category in catalog order."""
        ...

    def get_by_id(self, step_id: str) -> CapabilityStep | None:
        """Return a step by id, or None if it does not exist."""
        ...

    def deps_of(self, step_id: str) -> tuple[str, ...]:
        """Return the direct prerequisite ids of a step (no transitive expansion)."""
        ...

    def impact_weight(self, step: CapabilityStep) -> float:
        """Return the 0-1 impact weight for the step's impact area."""
        ...

    def velocity_table(self) -> VelocityTable:
        """Return the velocity model."""
        ...
