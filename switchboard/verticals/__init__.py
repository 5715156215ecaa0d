"""Vertical registry, classification and resolution.

A vertical is an industry category (plumbing, dentistry, towing...) that
selects the default behavior of the conversational agent.
"""

from switchboard.verticals.compliance import (
    LEGAL_VERTICAL_IDS,
    MEDICAL_VERTICAL_IDS,
    ComplianceClassification,
    classify_vertical,
    get_compliance_modifiers,
)
from switchboard.verticals.overrides import build_feature_overrides
from switchboard.verticals.registry import (
    get_vertical_config,
    list_vertical_configs,
    list_vertical_ids,
)
from switchboard.verticals.resolver import (
    DEFAULT_VERTICAL_ID,
    VERTICAL_KEYWORDS,
    normalize_business_type,
    resolve_vertical_id,
)

__all__ = [
    # Registry
    "get_vertical_config",
    "list_vertical_configs",
    "list_vertical_ids",
    # Compliance
    "LEGAL_VERTICAL_IDS",
    "MEDICAL_VERTICAL_IDS",
    "ComplianceClassification",
    "classify_vertical",
    "get_compliance_modifiers",
    # Resolution
    "DEFAULT_VERTICAL_ID",
    "VERTICAL_KEYWORDS",
    "normalize_business_type",
    "resolve_vertical_id",
    "build_feature_overrides",
]
