"""Unit tests for content guardrails."""

import pytest

from switchboard.policy import (
    REFUSAL_TEMPLATES,
    build_action_policy,
    generate_enforcement_prompt_section,
    get_topic_refusal,
    is_topic_restricted,
)
from switchboard.verticals.models import Channel, FeatureFlag


class TestIsTopicRestricted:
    """Tests for is_topic_restricted."""

    def test_safety_topic_everywhere(self) -> None:
        """DIY electrical work is restricted for every vertical."""
        assert is_topic_restricted("DIY electrical", build_action_policy(1, Channel.PHONE))
        assert is_topic_restricted("DIY electrical", build_action_policy(17, Channel.SMS))

    def test_medical_topic_only_for_medical(self) -> None:
        """Medical diagnosis is restricted for dentists, not plumbers."""
        assert is_topic_restricted("medical diagnosis", build_action_policy(17, Channel.PHONE))
        assert not is_topic_restricted("medical diagnosis", build_action_policy(1, Channel.PHONE))

    def test_financial_topic_depends_on_pricing(self) -> None:
        """Binding quotes are restricted unless pricing is ON."""
        assert is_topic_restricted("binding quote", build_action_policy(1, Channel.PHONE))
        assert not is_topic_restricted("binding quote", build_action_policy(7, Channel.PHONE))


class TestGetTopicRefusal:
    """Tests for get_topic_refusal."""

    @pytest.mark.parametrize(
        ("topic", "template"),
        [
            ("symptom check", "MEDICAL_NO_DIAGNOSIS"),
            ("treatment cost", "MEDICAL_NO_DIAGNOSIS"),
            ("legal advice", "LEGAL_NO_ADVICE"),
            ("settlement amount", "LEGAL_NO_ADVICE"),
            ("fix my furnace", "DIY_SAFETY_REFUSAL"),
            ("cost estimate", "PRICING_VARIES"),
        ],
    )
    def test_keyword_priority(self, topic: str, template: str) -> None:
        """Medical beats legal, which beats safety, which beats pricing."""
        policy = build_action_policy(1, Channel.PHONE)
        assert get_topic_refusal(topic, policy) == REFUSAL_TEMPLATES[template]

    def test_falls_back_to_primary_refusal(self) -> None:
        """Unmatched topics use the vertical's primary refusal."""
        assert get_topic_refusal("weather", build_action_policy(17, Channel.PHONE)) == (
            REFUSAL_TEMPLATES["MEDICAL_NO_DIAGNOSIS"]
        )
        assert get_topic_refusal("weather", build_action_policy(1, Channel.PHONE)) == (
            REFUSAL_TEMPLATES["GENERIC_INTAKE"]
        )


class TestEnforcementPromptSection:
    """Tests for generate_enforcement_prompt_section."""

    def test_everything_enabled(self) -> None:
        """Only the universal rules render when nothing is disabled."""
        policy = build_action_policy(
            7, Channel.PHONE, {"appointment_booking": FeatureFlag.ON}
        )
        assert generate_enforcement_prompt_section(policy) == (
            "## Action Restrictions\n"
            "\n## Universal Safety Rules\n"
            "- Never provide DIY instructions for electrical, gas, or structural work\n"
            "- Never guarantee specific outcomes or timelines\n"
            "- Never make commitments on behalf of the business owner"
        )

    def test_disabled_features_listed(self) -> None:
        """Each disabled feature gets a restriction line."""
        policy = build_action_policy(
            1,
            Channel.PHONE,
            {"appointment_booking": FeatureFlag.OFF, "transfer_to_human": FeatureFlag.OFF},
        )
        section = generate_enforcement_prompt_section(policy)
        assert "- **Booking DISABLED**" in section
        assert "- **Pricing DISABLED**" in section
        assert "- **Transfer DISABLED**" in section
        assert "**Escalation DISABLED**" not in section

    def test_medical_guardrails(self) -> None:
        """Medical verticals quote the no-diagnosis refusal."""
        section = generate_enforcement_prompt_section(build_action_policy(17, Channel.PHONE))
        assert "\n## Compliance Guardrails\n- **NEVER diagnose conditions**" in section
        assert f'"{REFUSAL_TEMPLATES["MEDICAL_NO_DIAGNOSIS"]}"' in section
        assert "NEVER provide legal advice" not in section

    def test_legal_guardrails(self) -> None:
        """Legal verticals quote the no-advice refusal."""
        section = generate_enforcement_prompt_section(build_action_policy(16, Channel.PHONE))
        assert "- **NEVER provide legal advice** or interpret laws" in section
        assert "- **NEVER predict case outcomes** or guarantee settlements" in section
        assert "NEVER diagnose conditions" not in section

    def test_universal_rules_last(self) -> None:
        """Universal safety rules always close the section."""
        section = generate_enforcement_prompt_section(build_action_policy(16, Channel.SMS))
        assert section.endswith("- Never make commitments on behalf of the business owner")
        assert section.index("## Compliance Guardrails") < section.index("## Universal Safety Rules")
