"""Tests for Prometheus metrics."""

from prometheus_client import REGISTRY, generate_latest

from switchboard.observability.metrics import (
    ACTION_POLICIES_BUILT,
    PROMPTS_GENERATED,
    VERTICAL_FALLBACKS,
)


def _sample(name: str, **labels: str) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestVerticalFallbacks:
    """Tests for VERTICAL_FALLBACKS counter."""

    def test_counter_increment(self) -> None:
        """Should increment per reason label."""
        before = _sample("switchboard_vertical_fallback_total", reason="test_reason")
        VERTICAL_FALLBACKS.labels(reason="test_reason").inc()
        assert _sample("switchboard_vertical_fallback_total", reason="test_reason") == before + 1


class TestResolutionCounters:
    """Tests for policy and prompt counters."""

    def test_policies_counter_accepts_channel(self) -> None:
        """Should accept the channel label."""
        ACTION_POLICIES_BUILT.labels(channel="phone").inc()
        assert _sample("switchboard_action_policies_built_total", channel="phone") >= 1

    def test_prompts_counter_accepts_channel(self) -> None:
        """Should accept the channel label."""
        PROMPTS_GENERATED.labels(channel="web_chat").inc()
        assert _sample("switchboard_prompts_generated_total", channel="web_chat") >= 1

    def test_exposition_includes_counters(self) -> None:
        """Should appear in the Prometheus text exposition."""
        text = generate_latest(REGISTRY).decode()
        assert "switchboard_vertical_fallback_total" in text
        assert "switchboard_action_policies_built_total" in text
        assert "switchboard_prompts_generated_total" in text
