"""Exception types raised by the roadmap core.

Load-time problems with the catalog are fatal and surface as CatalogLoadError.
Once a catalog has loaded, roadmap generation itself never raises for score
data; only caller mistakes (unknown assessment type, unknown step id) do.
"""


class RoadmapError(Exception):
    """Base class for all maturity-roadmap errors."""


class CatalogLoadError(RoadmapError):
    """Raised when the capability matrix or velocity table cannot be loaded.

    Attributes:
        source: File or logical source that failed validation.
    """

    def __init__(self, message: str, source: str = "") -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source


class UnknownAssessmentTypeError(RoadmapError, ValueError):
    """Raised when an assessment type outside quick|standard|comprehensive is requested."""


class RecommendationNotFoundError(RoadmapError, LookupError):
    """Raised when a recommendation detail is requested for an unknown step id."""
