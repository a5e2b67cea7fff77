"""Maturity Roadmap entry point.

Loads settings, configures logging and loads the capability catalog once.
A broken catalog stops start-up here rather than failing individual requests.
"""

from maturity_roadmap.adapters.catalog_repository import CatalogProvider
from maturity_roadmap.core.services import RoadmapService
from maturity_roadmap.observability import configure_logging, get_logger
from maturity_roadmap.settings import Settings

logger = get_logger(__name__)


def create_roadmap_service(settings: Settings | None = None) -> RoadmapService:
    """Build a ready-to-use RoadmapService.

    Args:
        settings: Service settings; read from the environment when None.

    Returns:
        RoadmapService backed by a reloadable CatalogProvider.

    Raises:
        CatalogLoadError: If the capability matrix or velocity table is invalid.
    """
    settings = settings or Settings()
    configure_logging(settings.log_level, settings.log_json)

    provider = CatalogProvider(settings.catalog_path, settings.velocity_path)
    logger.info(
        "Roadmap service ready",
        service_name=settings.service_name,
        step_count=len(provider.current),
        default_org_size=settings.default_org_size,
        default_assessment_type=settings.default_assessment_type,
    )
    return RoadmapService(
        catalog_source=provider,
        default_org_size=settings.default_org_size,
        default_assessment_type=settings.default_assessment_type,
        default_language=settings.default_language,
    )
