"""Assessment categories, module membership, and category policy tables.

Categories:
    foundations_culture             culture and operating model
    business_value_strategy         why the transformation is happening
    application_architecture        target design
    app_migration_modernization     moving and modernising workloads
    container_infrastructure        container platform fundamentals
    cicd_practices                  how code ships
    dora_metrics                    delivery performance measurement
    security_compliance             baseline safety gate
    infrastructure_platform         higher-level platform concerns
    data_management                 data stewardship
    observability                   detect and debug
    finops_cost_management          cost control
    operations_resilience           resilience and uptime
    multicloud_hybrid_governance    multi-cloud governance
    ai_ml_integration               AI/ML on the platform
"""

from maturity_roadmap.errors import UnknownAssessmentTypeError

CORE_CATEGORIES: list[str] = [
    "foundations_culture",
    "business_value_strategy",
    "application_architecture",
    "cicd_practices",
    "security_compliance",
]

STANDARD_CATEGORIES: list[str] = [
    # Context
    "foundations_culture",
    "business_value_strategy",
    # Design & modernise
    "application_architecture",
    "app_migration_modernization",
    # Build & ship
    "container_infrastructure",
    "cicd_practices",
    "dora_metrics",
    # Protect & manage
    "security_compliance",
    # Observe & optimise
    "observability",
    "finops_cost_management",
]

COMPREHENSIVE_CATEGORIES: list[str] = [
    # Context
    "foundations_culture",
    "business_value_strategy",
    # Design & modernise
    "application_architecture",
    "app_migration_modernization",
    # Build & ship
    "container_infrastructure",
    "cicd_practices",
    "dora_metrics",
    # Protect & manage
    "security_compliance",
    "infrastructure_platform",
    "data_management",
    # Observe & optimise
    "observability",
    "finops_cost_management",
    "operations_resilience",
    # Future-proof
    "multicloud_hybrid_governance",
    "ai_ml_integration",
]

ALL_CATEGORIES: list[str] = list(COMPREHENSIVE_CATEGORIES)

ASSESSMENT_MODULES: dict[str, list[str]] = {
    "quick": CORE_CATEGORIES,
    "standard": STANDARD_CATEGORIES,
    "comprehensive": COMPREHENSIVE_CATEGORIES,
}

# Organisation-level policy boosts added on top of the data-driven priority.
# Categories missing from this table get no boost.
BASE_CATEGORY_BOOSTS: dict[str, int] = {
    "security_compliance": 10,
    "observability": 5,
    "dora_metrics": 3,
    "finops_cost_management": 4,
    "operations_resilience": 4,
    "application_architecture": 3,
    "cicd_practices": 3,
    "container_infrastructure": 2,
    "infrastructure_platform": 2,
    "data_management": 2,
    "ai_ml_integration": 1,
    "multicloud_hybrid_governance": 2,
    "foundations_culture": 2,
    "business_value_strategy": 3,
    "app_migration_modernization": 2,
}

# Free-text headcount range -> org size bucket
COMPANY_SIZE_BUCKETS: dict[str, str] = {
    "1-10": "xs",
    "11-50": "xs",
    "51-100": "sm",
    "101-250": "sm",
    "251-500": "md",
    "501-2000": "md",
    "2001-5000": "lg",
    "5001+": "lg",
}


def categories_for_assessment_type(assessment_type: str) -> list[str]:
    """Return the category subset assessed by an assessment type.

    Args:
        assessment_type: One of 'quick', 'standard', 'comprehensive'.

    Returns:
        Ordered list of category ids in the module.

    Raises:
        UnknownAssessmentTypeError: If the assessment type is not recognised.
    """
    try:
        return ASSESSMENT_MODULES[assessment_type]
    except KeyError:
        raise UnknownAssessmentTypeError(
            f"Unknown assessment type: {assessment_type!r} "
            f"(expected one of {sorted(ASSESSMENT_MODULES)})"
        ) from None


def category_boost(category: str, boosts: dict[str, int] | None = None) -> int:
    """Return the policy boost for a category (0 when none is defined)."""
    table = BASE_CATEGORY_BOOSTS if boosts is None else boosts
    return table.get(category, 0)


def org_size_bucket_for(company_size: str | None, default: str | None = None) -> str | None:
    """Map a free-text headcount range (e.g. '51-100') to an org size bucket.

    Args:
        company_size: Headcount range as captured on the organisation profile.
        default: Bucket to use when the range is missing or unrecognised.

    Returns:
        One of 'xs', 'sm', 'md', 'lg', or ``default``.
    """
    if not company_size:
        return default
    return COMPANY_SIZE_BUCKETS.get(company_size.strip(), default)
