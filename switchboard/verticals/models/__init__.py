"""Vertical domain models.

Contains all Pydantic models for the policy engine:
- Enums for flags, channels and text-template keys
- Vertical configuration records (brain rules, features, permissions,
  channel behavior)
- Customer settings consumed as pipeline input
"""

from switchboard.verticals.models.customer import BusinessHours, CustomerSettings
from switchboard.verticals.models.enums import (
    AfterHoursBehavior,
    Channel,
    FeatureFlag,
    GreetingStyle,
    ResponseLength,
    UrgencyLevel,
)
from switchboard.verticals.models.vertical import (
    FEATURE_KEYS,
    BrainRules,
    ChannelBehavior,
    ChannelOverrides,
    FeatureConfig,
    FeatureKey,
    FeatureOverrides,
    VerticalPromptConfig,
    WorkflowPermissions,
)

__all__ = [
    # Enums
    "AfterHoursBehavior",
    "Channel",
    "FeatureFlag",
    "GreetingStyle",
    "ResponseLength",
    "UrgencyLevel",
    # Vertical configuration
    "FEATURE_KEYS",
    "BrainRules",
    "ChannelBehavior",
    "ChannelOverrides",
    "FeatureConfig",
    "FeatureKey",
    "FeatureOverrides",
    "VerticalPromptConfig",
    "WorkflowPermissions",
    # Customer input
    "BusinessHours",
    "CustomerSettings",
]
