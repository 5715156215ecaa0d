"""Configuration model exports.

This module exports all configuration models for easy access:

    from switchboard.config.models import APIConfig, EngineConfig
"""

from switchboard.config.models.api import APIConfig
from switchboard.config.models.engine import EngineConfig
from switchboard.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)

__all__ = [
    # API
    "APIConfig",
    # Engine
    "EngineConfig",
    # Observability
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
]
