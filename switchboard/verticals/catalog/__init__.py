"""Static vertical catalog.

Each module holds fully populated VerticalPromptConfig records for one
family of verticals. The registry is the only reader of this package.
"""

from switchboard.verticals.catalog.generic import GENERIC_LOCAL_BUSINESS, GENERIC_VERTICAL_ID
from switchboard.verticals.catalog.health import HEALTH_VERTICALS
from switchboard.verticals.catalog.legal import LEGAL_VERTICALS
from switchboard.verticals.catalog.property import PROPERTY_VERTICALS
from switchboard.verticals.catalog.roadside import ROADSIDE_VERTICALS
from switchboard.verticals.catalog.trades import TRADE_VERTICALS

ALL_VERTICALS = (
    GENERIC_LOCAL_BUSINESS,
    *TRADE_VERTICALS,
    *ROADSIDE_VERTICALS,
    *LEGAL_VERTICALS,
    *HEALTH_VERTICALS,
    *PROPERTY_VERTICALS,
)

__all__ = [
    "ALL_VERTICALS",
    "GENERIC_LOCAL_BUSINESS",
    "GENERIC_VERTICAL_ID",
]
