"""Translate customer settings into feature flag overrides."""

from switchboard.observability.logging import get_logger
from switchboard.verticals.models import (
    AfterHoursBehavior,
    CustomerSettings,
    FeatureFlag,
    FeatureOverrides,
)

logger = get_logger(__name__)

# after_hours_behavior -> (after_hours_handling, emergency_escalation)
_AFTER_HOURS_FLAGS: dict[AfterHoursBehavior, tuple[FeatureFlag, FeatureFlag]] = {
    AfterHoursBehavior.VOICEMAIL: (FeatureFlag.OFF, FeatureFlag.OFF),
    AfterHoursBehavior.LEAD_CAPTURE: (FeatureFlag.ON, FeatureFlag.OFF),
    AfterHoursBehavior.EMERGENCY_ONLY: (FeatureFlag.ON, FeatureFlag.ON),
}


def build_feature_overrides(settings: CustomerSettings) -> FeatureOverrides:
    """Build the partial flag mapping implied by customer settings.

    Only keys the settings actually speak to are present; a missing
    setting leaves the vertical default in place.

    Args:
        settings: Customer settings, any field may be None

    Returns:
        Partial feature configuration
    """
    overrides: FeatureOverrides = {}

    if settings.lead_capture_enabled is False:
        overrides["lead_capture"] = FeatureFlag.OFF

    if settings.appointments_enabled is not None:
        overrides["appointment_booking"] = (
            FeatureFlag.ON if settings.appointments_enabled else FeatureFlag.OFF
        )

    if settings.after_hours_behavior is not None:
        # Assignment and model_construct skip the field validator
        flags = _AFTER_HOURS_FLAGS.get(settings.after_hours_behavior)
        if flags is None:
            logger.warning(
                "unknown_after_hours_behavior",
                after_hours_behavior=settings.after_hours_behavior,
            )
        else:
            overrides["after_hours_handling"], overrides["emergency_escalation"] = flags

    if not settings.transfer_number:
        overrides["transfer_to_human"] = FeatureFlag.OFF

    return overrides
