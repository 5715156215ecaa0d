"""Vertical registry.

The single read path into the static catalog. Lookups never fail: an
unknown id resolves to the generic fallback vertical.
"""

from types import MappingProxyType

from switchboard.observability.logging import get_logger
from switchboard.observability.metrics import VERTICAL_FALLBACKS
from switchboard.verticals.catalog import ALL_VERTICALS, GENERIC_LOCAL_BUSINESS
from switchboard.verticals.models import VerticalPromptConfig

logger = get_logger(__name__)

_VERTICALS: MappingProxyType[int, VerticalPromptConfig] = MappingProxyType(
    {config.id: config for config in ALL_VERTICALS}
)

if len(_VERTICALS) != len(ALL_VERTICALS):
    raise RuntimeError("Duplicate vertical id in catalog")


def get_vertical_config(vertical_id: int) -> VerticalPromptConfig:
    """Get the configuration for a vertical.

    Args:
        vertical_id: Vertical identifier

    Returns:
        The vertical's configuration, or the generic fallback (id 0)
        when the id is not registered
    """
    config = _VERTICALS.get(vertical_id)
    if config is None:
        logger.warning(
            "unknown_vertical_id_fallback",
            vertical_id=vertical_id,
            fallback_id=GENERIC_LOCAL_BUSINESS.id,
        )
        VERTICAL_FALLBACKS.labels(reason="unknown_vertical_id").inc()
        return GENERIC_LOCAL_BUSINESS
    return config


def list_vertical_ids() -> list[int]:
    """Return all registered vertical ids in ascending order."""
    return sorted(_VERTICALS)


def list_vertical_configs() -> list[VerticalPromptConfig]:
    """Return all registered configurations ordered by id."""
    return [_VERTICALS[vertical_id] for vertical_id in list_vertical_ids()]
