"""Free-text business type to vertical id resolution.

Matching is first-match-wins over an ordered keyword table, so the order
of VERTICAL_KEYWORDS is part of the behavior: "tree_service_and_plumbing"
resolves to plumbing because plumbing is declared first.
"""

import re

from switchboard.observability.logging import get_logger
from switchboard.observability.metrics import VERTICAL_FALLBACKS

logger = get_logger(__name__)

DEFAULT_VERTICAL_ID = 0

VERTICAL_KEYWORDS: tuple[tuple[str, int], ...] = (
    ("plumbing", 1),
    ("plumber", 1),
    ("hvac", 2),
    ("heating", 2),
    ("cooling", 2),
    ("air_conditioning", 2),
    ("electrician", 3),
    ("electrical", 3),
    ("roofing", 4),
    ("roofer", 4),
    ("water_damage", 5),
    ("restoration", 5),
    ("locksmith", 6),
    ("towing", 7),
    ("tow_truck", 7),
    ("auto_repair", 8),
    ("mechanic", 8),
    ("tree_service", 9),
    ("tree_removal", 9),
    ("garage_door", 10),
    ("appliance_repair", 11),
    ("pest_control", 12),
    ("exterminator", 12),
    ("junk_removal", 13),
    ("bail_bonds", 14),
    ("criminal_defense", 15),
    ("personal_injury", 16),
    ("pi_attorney", 16),
    ("dentist", 17),
    ("dental", 17),
    ("property_management", 18),
    ("moving", 19),
    ("movers", 19),
    ("concrete", 20),
    ("masonry", 20),
)

_SEPARATORS = re.compile(r"[\s-]+")


def normalize_business_type(business_type: str) -> str:
    """Lowercase and collapse whitespace/hyphen runs into underscores."""
    return _SEPARATORS.sub("_", business_type.lower())


def resolve_vertical_id(business_type: str | None) -> int:
    """Resolve a free-text business type to a vertical id.

    Tries an exact keyword match first, then a bidirectional substring
    match in table order. Anything unresolvable maps to the generic
    vertical.

    Args:
        business_type: Business type as entered by the customer

    Returns:
        Vertical id, DEFAULT_VERTICAL_ID when nothing matches
    """
    if not business_type:
        logger.warning("business_type_missing", fallback_id=DEFAULT_VERTICAL_ID)
        VERTICAL_FALLBACKS.labels(reason="business_type_missing").inc()
        return DEFAULT_VERTICAL_ID

    normalized = normalize_business_type(business_type)

    for keyword, vertical_id in VERTICAL_KEYWORDS:
        if keyword == normalized:
            return vertical_id

    for keyword, vertical_id in VERTICAL_KEYWORDS:
        if keyword in normalized or normalized in keyword:
            return vertical_id

    logger.warning(
        "business_type_unresolved",
        business_type=business_type,
        fallback_id=DEFAULT_VERTICAL_ID,
    )
    VERTICAL_FALLBACKS.labels(reason="business_type_unresolved").inc()
    return DEFAULT_VERTICAL_ID
