"""Service settings for maturity-roadmap.

Values are read once at startup. Environment variable prefix: MATURITY_ROADMAP_
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the roadmap core.

    Environment variable prefix: MATURITY_ROADMAP_
    """

    service_name: str = "maturity-roadmap"

    # Catalog sources (None -> packaged data files)
    catalog_path: Path | None = None
    velocity_path: Path | None = None

    # Request defaults
    # None -> single delivery stream when the caller supplies no size
    default_org_size: str | None = None
    default_assessment_type: str = "comprehensive"
    default_language: str = "en"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(env_prefix="MATURITY_ROADMAP_")
