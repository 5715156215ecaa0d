"""Prometheus metrics for Switchboard.

Counters only: the engine never blocks or waits, so there are no latency
histograms worth keeping.
"""

from prometheus_client import Counter

# Fallback metrics
VERTICAL_FALLBACKS = Counter(
    "switchboard_vertical_fallback_total",
    "Number of times resolution fell back to the generic vertical",
    labelnames=["reason"],
)

# Resolution metrics
ACTION_POLICIES_BUILT = Counter(
    "switchboard_action_policies_built_total",
    "Total number of action policies built",
    labelnames=["channel"],
)

PROMPTS_GENERATED = Counter(
    "switchboard_prompts_generated_total",
    "Total number of system prompts generated",
    labelnames=["channel"],
)
