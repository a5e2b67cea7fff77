"""File-backed capability catalog for the roadmap core.

Loads the capability matrix and velocity table from JSON, validates them with
Pydantic, and exposes them as an immutable ``CapabilityCatalog``. Any problem
with the data raises ``CatalogLoadError`` at construction time; a catalog
object that exists is always complete and consistent.

``CatalogProvider`` holds the current catalog for long-running processes and
swaps in a freshly built catalog on ``reload()``. Callers grab ``current``
once per request, so a request always works against a single snapshot.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from importlib import resources
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from maturity_roadmap.core.categories import ALL_CATEGORIES
from maturity_roadmap.core.models import (
    EFFORT_POINT_SCALE,
    ORG_SIZE_BUCKETS,
    CapabilityPhase,
    CapabilityStep,
    ImpactArea,
    LocalisedText,
    QuestionDependency,
    VelocityTable,
)
from maturity_roadmap.errors import CatalogLoadError
from maturity_roadmap.observability import get_logger

logger = get_logger(__name__)

MATRIX_FILENAME = "capability_matrix.json"
VELOCITY_FILENAME = "velocity_table.json"

# Impact area -> weight; weights sum to 1.0
IMPACT_WEIGHTS: dict[str, float] = {
    "IC": 0.20,  # Infrastructure cost
    "OE": 0.20,  # Operational efficiency
    "DP": 0.25,  # Developer productivity
    "IM": 0.20,  # Incident management
    "TM": 0.15,  # Time to market
}


# ---------------------------------------------------------------------------
# File schemas
# ---------------------------------------------------------------------------


class _LocalisedTextSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    en: str = Field(..., min_length=1)
    ja: str = Field(..., min_length=1)


class _QuestionDependencySchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    question_id: str = Field(..., min_length=1)
    min_value: float = Field(..., ge=0.0, le=100.0)


class _CapabilityStepSchema(BaseModel):
    """One row of capability_matrix.json."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    category: str
    phase: CapabilityPhase
    order: int = Field(..., ge=1)
    label: _LocalisedTextSchema
    description: _LocalisedTextSchema
    effort_points: int
    impact_area: ImpactArea
    quick_win: bool = False
    dependencies: list[str] = Field(default_factory=list)
    question_dependencies: list[_QuestionDependencySchema] = Field(default_factory=list)

    @field_validator("category")
    @classmethod
    def _known_category(cls, value: str) -> str:
        if value not in ALL_CATEGORIES:
            raise ValueError(f"unknown category {value!r}")
        return value

    @field_validator("effort_points")
    @classmethod
    def _fibonacci_effort(cls, value: int) -> int:
        if value not in EFFORT_POINT_SCALE:
            raise ValueError(
                f"effort_points must be one of {EFFORT_POINT_SCALE}, got {value!r}"
            )
        return value

    def to_step(self) -> CapabilityStep:
        return CapabilityStep(
            id=self.id,
            category=self.category,
            phase=self.phase,
            order=self.order,
            label=LocalisedText(en=self.label.en, ja=self.label.ja),
            description=LocalisedText(en=self.description.en, ja=self.description.ja),
            effort_points=self.effort_points,
            impact_area=self.impact_area,
            quick_win=self.quick_win,
            dependencies=tuple(self.dependencies),
            question_dependencies=tuple(
                QuestionDependency(question_id=dep.question_id, min_value=dep.min_value)
                for dep in self.question_dependencies
            ),
        )


class _VelocityTableSchema(BaseModel):
    """velocity_table.json."""

    model_config = ConfigDict(extra="forbid")

    points_per_ideal_day: float = Field(..., gt=0.0)
    ideal_days_per_sprint: float = Field(..., gt=0.0)
    parallel_streams: dict[str, int]

    @field_validator("parallel_streams")
    @classmethod
    def _all_buckets_positive(cls, value: dict[str, int]) -> dict[str, int]:
        missing = [bucket for bucket in ORG_SIZE_BUCKETS if bucket not in value]
        if missing:
            raise ValueError(f"parallel_streams missing buckets {missing}")
        for bucket, streams in value.items():
            if streams < 1:
                raise ValueError(
                    f"parallel_streams[{bucket!r}] must be a positive integer, got {streams!r}"
                )
        return value

    def to_table(self) -> VelocityTable:
        return VelocityTable(
            points_per_ideal_day=self.points_per_ideal_day,
            ideal_days_per_sprint=self.ideal_days_per_sprint,
            parallel_streams=MappingProxyType(dict(self.parallel_streams)),
        )


_MATRIX_ADAPTER: TypeAdapter[list[_CapabilityStepSchema]] = TypeAdapter(
    list[_CapabilityStepSchema]
)


def parse_capability_matrix(raw: str | bytes, source: str = MATRIX_FILENAME) -> list[CapabilityStep]:
    """Parse and validate capability matrix JSON.

    Args:
        raw: JSON document containing a list of capability steps.
        source: Name used in error messages.

    Returns:
        Capability steps in file order.

    Raises:
        CatalogLoadError: If the JSON is malformed or any row fails validation.
    """
    try:
        rows = _MATRIX_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise CatalogLoadError(f"invalid capability matrix: {exc}", source=source) from exc
    return [row.to_step() for row in rows]


def parse_velocity_table(raw: str | bytes, source: str = VELOCITY_FILENAME) -> VelocityTable:
    """Parse and validate velocity table JSON.

    Raises:
        CatalogLoadError: If the JSON is malformed, a rate is not strictly
            positive, or a parallel-stream bucket is missing or below 1.
    """
    try:
        schema = _VelocityTableSchema.model_validate_json(raw)
    except ValidationError as exc:
        raise CatalogLoadError(f"invalid velocity table: {exc}", source=source) from exc
    return schema.to_table()


def _read_source(path: Path | None, filename: str) -> tuple[bytes, str]:
    try:
        if path is not None:
            return path.read_bytes(), str(path)
        packaged = resources.files("maturity_roadmap.adapters").joinpath("data", filename)
        return packaged.read_bytes(), f"package:{filename}"
    except OSError as exc:
        raise CatalogLoadError(f"cannot read catalog data: {exc}", source=str(path or filename)) from exc


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class CapabilityCatalog:
    """Immutable, validated capability matrix plus velocity model.

    Implements the ICapabilityCatalog interface. Instances are safe to share
    between concurrent requests: nothing mutates them after construction.

    Args:
        steps: Capability steps in catalog order.
        velocity: Velocity model used by the scheduler.

    Raises:
        CatalogLoadError: On duplicate ids or dependencies on unknown steps.
    """

    def __init__(self, steps: Sequence[CapabilityStep], velocity: VelocityTable) -> None:
        if velocity.points_per_ideal_day <= 0 or velocity.ideal_days_per_sprint <= 0:
            raise CatalogLoadError("velocity rates must be strictly positive")

        by_id: dict[str, CapabilityStep] = {}
        for step in steps:
            if step.id in by_id:
                raise CatalogLoadError(f"duplicate capability step id {step.id!r}")
            by_id[step.id] = step

        for step in steps:
            unknown = [dep for dep in step.dependencies if dep not in by_id]
            if unknown:
                raise CatalogLoadError(
                    f"step {step.id!r} depends on unknown steps {unknown}"
                )

        self._steps: tuple[CapabilityStep, ...] = tuple(steps)
        self._by_id = MappingProxyType(by_id)
        self._velocity = velocity

    @classmethod
    def from_files(
        cls,
        matrix_path: Path | None = None,
        velocity_path: Path | None = None,
    ) -> CapabilityCatalog:
        """Load a catalog from JSON files, defaulting to the packaged data.

        Args:
            matrix_path: Capability matrix override; packaged file if None.
            velocity_path: Velocity table override; packaged file if None.

        Returns:
            Fully validated catalog.

        Raises:
            CatalogLoadError: If either file is missing or invalid.
        """
        matrix_raw, matrix_source = _read_source(matrix_path, MATRIX_FILENAME)
        velocity_raw, velocity_source = _read_source(velocity_path, VELOCITY_FILENAME)

        try:
            steps = parse_capability_matrix(matrix_raw, source=matrix_source)
            velocity = parse_velocity_table(velocity_raw, source=velocity_source)
            catalog = cls(steps, velocity)
        except CatalogLoadError as exc:
            logger.error("Capability catalog failed to load", error=str(exc))
            raise

        logger.info(
            "Capability catalog loaded",
            matrix_source=matrix_source,
            velocity_source=velocity_source,
            step_count=len(steps),
            quick_win_count=sum(1 for step in steps if step.quick_win),
        )
        return catalog

    def list_all(self) -> tuple[CapabilityStep, ...]:
        return self._steps

    def list_by_category(self, category: str) -> list[CapabilityStep]:
        return [step for step in self._steps if step.category == category]

    def get_by_id(self, step_id: str) -> CapabilityStep | None:
        return self._by_id.get(step_id)

    def deps_of(self, step_id: str) -> tuple[str, ...]:
        """Return immediate prerequisites (no transitive expansion)."""
        step = self._by_id.get(step_id)
        return step.dependencies if step is not None else ()

    def impact_weight(self, step: CapabilityStep) -> float:
        return IMPACT_WEIGHTS[step.impact_area]

    def velocity_table(self) -> VelocityTable:
        return self._velocity

    def __len__(self) -> int:
        return len(self._steps)


class CatalogProvider:
    """Holds the current catalog and supports copy-on-write reloads.

    Args:
        matrix_path: Capability matrix override passed to every load.
        velocity_path: Velocity table override passed to every load.
    """

    def __init__(
        self,
        matrix_path: Path | None = None,
        velocity_path: Path | None = None,
    ) -> None:
        self._matrix_path = matrix_path
        self._velocity_path = velocity_path
        self._reload_lock = threading.Lock()
        self._catalog: CapabilityCatalog = CapabilityCatalog.from_files(
            matrix_path, velocity_path
        )

    @property
    def current(self) -> CapabilityCatalog:
        """The catalog snapshot to use for a request."""
        return self._catalog

    def reload(self) -> CapabilityCatalog:
        """Build a new catalog from disk and swap it in.

        The new catalog is fully validated before the reference changes; if
        loading fails the previous catalog stays in place and the error
        propagates.

        Returns:
            The newly active catalog.
        """
        with self._reload_lock:
            fresh = CapabilityCatalog.from_files(self._matrix_path, self._velocity_path)
            self._catalog = fresh
        logger.info("Capability catalog reloaded", step_count=len(fresh))
        return fresh
