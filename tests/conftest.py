"""Test fixtures for maturity-roadmap.

Provides the packaged catalog, a small in-memory catalog, and on-disk catalog
files so unit tests can pin exact priorities and durations.
"""

import json
from pathlib import Path

import pytest
from factories import VALID_VELOCITY, make_step, step_row

from maturity_roadmap.adapters.catalog_repository import CapabilityCatalog
from maturity_roadmap.core.models import VelocityTable
from maturity_roadmap.core.services import RoadmapService


@pytest.fixture()
def velocity() -> VelocityTable:
    """Velocity model with round numbers: 1 point per day, 5 days per sprint."""
    return VelocityTable(
        points_per_ideal_day=1,
        ideal_days_per_sprint=5,
        parallel_streams={"xs": 1, "sm": 2, "md": 3, "lg": 4},
    )


@pytest.fixture()
def small_catalog(velocity: VelocityTable) -> CapabilityCatalog:
    """Four-category catalog covering evidence rules and impact-weight ties."""
    steps = [
        make_step("sec-scan", "security_compliance", effort_points=2, impact_area="IM",
                  question_dependencies=(("sc_1", 75),)),
        make_step("sec-policy", "security_compliance", effort_points=5, impact_area="OE",
                  dependencies=("sec-scan",)),
        make_step("sec-zero-trust", "security_compliance", effort_points=13, impact_area="IM",
                  question_dependencies=(("sc_3", 75), ("sc_4", 50))),
        make_step("cicd-pipeline", "cicd_practices", effort_points=2, impact_area="DP",
                  quick_win=True),
        make_step("cicd-gitops", "cicd_practices", effort_points=8, impact_area="OE"),
        make_step("obs-logging", "observability", effort_points=3, impact_area="IM"),
        make_step("fc-vision", "foundations_culture", effort_points=2, impact_area="TM"),
    ]
    return CapabilityCatalog(steps, velocity)


@pytest.fixture(scope="session")
def packaged_catalog() -> CapabilityCatalog:
    """The catalog shipped with the package."""
    return CapabilityCatalog.from_files()


@pytest.fixture()
def service(packaged_catalog: CapabilityCatalog) -> RoadmapService:
    """RoadmapService over the packaged catalog."""
    return RoadmapService(packaged_catalog)


@pytest.fixture()
def catalog_files(tmp_path: Path) -> tuple[Path, Path]:
    """Write a minimal valid matrix and velocity table to disk."""
    matrix_path = tmp_path / "capability_matrix.json"
    velocity_path = tmp_path / "velocity_table.json"
    matrix_path.write_text(
        json.dumps([step_row("cicd-one"), step_row("cicd-two", dependencies=["cicd-one"])]),
        encoding="utf-8",
    )
    velocity_path.write_text(json.dumps(VALID_VELOCITY), encoding="utf-8")
    return matrix_path, velocity_path
