"""End-to-end resolution: settings in, policy, filtered tools and prompt out."""

import pytest

from switchboard.policy import (
    PRIMARY_REFUSAL_KEY,
    REFUSAL_TEMPLATES,
    RESTRICTED_TOPICS,
    build_action_policy,
    build_action_policy_from_settings,
    filter_tool_schemas,
    generate_enforcement_prompt_section,
    get_tool_refusal,
    is_tool_allowed,
)
from switchboard.prompting import generate_prompt_from_settings, resolve_prompt_context
from switchboard.verticals import resolve_vertical_id
from switchboard.verticals.models import Channel, CustomerSettings
from tests.factories import CustomerSettingsFactory

pytestmark = pytest.mark.integration

TOOL_SCHEMAS = [
    {"name": "create_booking", "description": "Book an appointment"},
    {"type": "function", "function": {"name": "live_transfer"}},
    {"name": "capture_lead"},
    {"name": "get_quote"},
    {"name": "lookup_hours"},
]


class TestPlumbingCustomer:
    """A plumbing company with default toggles."""

    def test_resolves_and_escalates(self) -> None:
        """Plumbing resolves to vertical 1 with escalation enabled."""
        vertical_id = resolve_vertical_id("Plumbing Company")
        assert vertical_id == 1

        policy = build_action_policy(vertical_id, Channel.PHONE)
        assert policy.features.escalation_enabled is True
        assert policy.features.booking_enabled is True
        assert policy.features.pricing_enabled is False

    def test_tool_schemas_filtered(self) -> None:
        """Pricing tools are stripped, booking and transfer survive."""
        settings = CustomerSettingsFactory.create(business_type="Plumbing Company")
        policy = build_action_policy_from_settings(settings, Channel.PHONE)

        names = [
            tool.get("name") or tool["function"]["name"]
            for tool in filter_tool_schemas(TOOL_SCHEMAS, policy)
        ]
        assert names == ["create_booking", "live_transfer", "capture_lead", "lookup_hours"]
        assert get_tool_refusal("get_quote", policy) == REFUSAL_TEMPLATES["PRICING_VARIES"]


class TestDentistCustomer:
    """A dental office that books through its own front desk."""

    @pytest.fixture
    def settings(self) -> CustomerSettings:
        """Dentist settings with booking off and no transfer number."""
        return CustomerSettings.model_validate(
            {
                "business_name": "Bright Smiles",
                "business_type": "dentist",
                "appointments_enabled": False,
                "lead_capture_enabled": True,
                "after_hours_behavior": None,
                "transfer_number": None,
            }
        )

    def test_policy(self, settings: CustomerSettings) -> None:
        """Booking and transfer are off, medical guardrails on."""
        policy = build_action_policy_from_settings(settings, Channel.PHONE)

        assert policy.features.booking_enabled is False
        assert "create_booking" in policy.disabled_tools
        assert policy.features.transfer_enabled is False
        assert policy.is_medical_vertical is True
        assert policy.refusal_templates[PRIMARY_REFUSAL_KEY] == (
            REFUSAL_TEMPLATES["MEDICAL_NO_DIAGNOSIS"]
        )
        assert not is_tool_allowed("Book Appointment", policy)

    def test_prompt_and_enforcement_agree(self, settings: CustomerSettings) -> None:
        """Prompt capabilities and enforcement section describe one policy."""
        prompt = generate_prompt_from_settings(settings, Channel.PHONE)
        context = resolve_prompt_context(settings, Channel.PHONE)
        enforcement = generate_enforcement_prompt_section(
            build_action_policy(context.vertical_id, Channel.PHONE, context.custom_overrides)
        )

        assert "- Do NOT attempt to book appointments" in prompt
        assert "## Compliance & Safety Requirements" in prompt
        assert "**Booking DISABLED**" in enforcement
        assert "**Transfer DISABLED**" in enforcement
        assert "**NEVER diagnose conditions**" in enforcement


class TestGenericSms:
    """The generic vertical on SMS."""

    def test_policy(self) -> None:
        """No guardrails; safety and financial topics restricted."""
        policy = build_action_policy(0, Channel.SMS)

        assert policy.requires_compliance_guardrails is False
        assert policy.restricted_topics == [
            *RESTRICTED_TOPICS["safety"],
            *RESTRICTED_TOPICS["financial"],
        ]

    def test_enforcement_section(self) -> None:
        """Only escalation and pricing restrictions plus universal rules render."""
        policy = build_action_policy(0, Channel.SMS)

        assert generate_enforcement_prompt_section(policy) == (
            "## Action Restrictions\n"
            "- **Escalation DISABLED**: Do not offer to transfer calls or dispatch "
            "immediately. Capture details instead.\n"
            "- **Pricing DISABLED**: Do not quote specific prices. "
            "Explain that pricing varies and offer follow-up.\n"
            "\n## Universal Safety Rules\n"
            "- Never provide DIY instructions for electrical, gas, or structural work\n"
            "- Never guarantee specific outcomes or timelines\n"
            "- Never make commitments on behalf of the business owner"
        )


class TestIdempotence:
    """Repeated resolution yields identical results."""

    @pytest.mark.parametrize("channel", list(Channel))
    def test_policy_and_prompt_repeatable(self, channel: Channel) -> None:
        """Same settings and channel always give the same output."""
        settings = CustomerSettingsFactory.create(
            business_type="criminal defense",
            after_hours_behavior="emergency_only",
            knowledge_content="Free consultations on Fridays.",
        )

        assert build_action_policy_from_settings(
            settings, channel
        ) == build_action_policy_from_settings(settings, channel)
        assert generate_prompt_from_settings(settings, channel) == generate_prompt_from_settings(
            settings, channel
        )
