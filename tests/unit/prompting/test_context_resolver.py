"""Unit tests for resolving customer settings into prompt context."""

from datetime import UTC, datetime

from switchboard.prompting import (
    build_additional_instructions,
    compute_config_version,
    create_inline_settings,
    generate_prompt_from_settings,
    resolve_prompt_context,
)
from switchboard.verticals.models import BusinessHours, Channel, CustomerSettings, FeatureFlag
from tests.factories import CustomerSettingsFactory


class TestBuildAdditionalInstructions:
    """Tests for build_additional_instructions."""

    def test_minimal_settings(self) -> None:
        """Empty settings still name the assistant."""
        assert build_additional_instructions(CustomerSettings()) == "Your name is Ashley."

    def test_default_ai_name_override(self) -> None:
        """The fallback name can be configured."""
        text = build_additional_instructions(CustomerSettings(), default_ai_name="Max")
        assert text == "Your name is Max."

    def test_full_settings(self) -> None:
        """All populated blocks render in order."""
        settings = CustomerSettingsFactory.create(
            ai_name="Sam",
            website_url="https://acme.test",
            voice_instructions="Always mention our warranty.",
            business_hours={
                "tuesday": BusinessHours(open="9:00 AM", close="5:00 PM"),
                "monday": BusinessHours(open="8:00 AM", close="4:00 PM"),
            },
            lead_email="leads@acme.test",
            lead_sms_number="+15555550111",
            knowledge_content="We serve the north side.",
        )
        assert build_additional_instructions(settings) == (
            "Your name is Sam.\n"
            "The business website is https://acme.test.\n"
            "\nCustom Instructions:\nAlways mention our warranty.\n"
            "\nBusiness Hours:\n"
            "- Monday: 8:00 AM - 4:00 PM\n"
            "- Tuesday: 9:00 AM - 5:00 PM\n"
            "\nLead Routing:\n"
            "- Email leads to: leads@acme.test\n"
            "- SMS notifications to: +15555550111\n"
            "\n=== KNOWLEDGE BASE ===\nWe serve the north side."
        )

    def test_hours_ordered_monday_first(self) -> None:
        """Days are listed Monday through Sunday regardless of input order."""
        hours = {
            day: BusinessHours(open="9", close="5")
            for day in ("sunday", "friday", "monday", "wednesday")
        }
        text = build_additional_instructions(CustomerSettings(business_hours=hours))
        days = [line.split(":")[0] for line in text.splitlines() if line.startswith("- ")]
        assert days == ["- Monday", "- Wednesday", "- Friday", "- Sunday"]

    def test_unrecognised_days(self) -> None:
        """Hours with no known weekday say so."""
        hours = {"funday": BusinessHours(open="9", close="5")}
        text = build_additional_instructions(CustomerSettings(business_hours=hours))
        assert "Business Hours:\nHours not specified" in text

    def test_sms_only_lead_routing(self) -> None:
        """Lead routing renders with only one destination."""
        text = build_additional_instructions(CustomerSettings(lead_sms_number="+15555550111"))
        assert text.endswith("\nLead Routing:\n- SMS notifications to: +15555550111")

    def test_knowledge_truncated(self) -> None:
        """Knowledge beyond the limit is cut and marked."""
        settings = CustomerSettings(knowledge_content="abcdefghij")
        text = build_additional_instructions(settings, knowledge_max_chars=4)
        assert text.endswith("=== KNOWLEDGE BASE ===\nabcd...")

    def test_knowledge_at_limit_untouched(self) -> None:
        """Knowledge exactly at the limit is kept whole."""
        settings = CustomerSettings(knowledge_content="abcd")
        text = build_additional_instructions(settings, knowledge_max_chars=4)
        assert text.endswith("=== KNOWLEDGE BASE ===\nabcd")


class TestResolvePromptContext:
    """Tests for resolve_prompt_context."""

    def test_resolves_vertical_and_overrides(self) -> None:
        """Business type and toggles flow into the context."""
        settings = CustomerSettingsFactory.create(
            business_name="Bright Smiles",
            business_type="Dental Clinic",
            appointments_enabled=False,
        )
        context = resolve_prompt_context(settings, Channel.WEB_CHAT)
        assert context.channel == Channel.WEB_CHAT
        assert context.business_name == "Bright Smiles"
        assert context.vertical_id == 17
        assert context.custom_overrides == {"appointment_booking": FeatureFlag.OFF}

    def test_default_business_name(self) -> None:
        """A missing business name falls back."""
        context = resolve_prompt_context(CustomerSettings(), Channel.PHONE)
        assert context.business_name == "the business"
        assert context.vertical_id == 0

    def test_configured_defaults(self) -> None:
        """Fallback values can be supplied by the caller."""
        context = resolve_prompt_context(
            CustomerSettings(),
            Channel.PHONE,
            default_business_name="our office",
            default_ai_name="Max",
        )
        assert context.business_name == "our office"
        assert context.additional_instructions == "Your name is Max."


class TestGeneratePromptFromSettings:
    """Tests for generate_prompt_from_settings."""

    def test_renders_full_prompt(self) -> None:
        """Settings render straight into a prompt."""
        settings = CustomerSettingsFactory.create(ai_name="Sam")
        prompt = generate_prompt_from_settings(settings, Channel.PHONE)
        assert prompt.startswith("# Acme Plumbing AI Assistant\n*Plumbing Specialist*")
        assert prompt.endswith("## Business-Specific Instructions\nYour name is Sam.")

    def test_missing_transfer_number_restricts_transfer(self) -> None:
        """Without a transfer number the transfer capability disappears."""
        settings = CustomerSettingsFactory.create(transfer_number=None)
        prompt = generate_prompt_from_settings(settings, Channel.PHONE)
        assert "Transfer to a human when requested or necessary" not in prompt


class TestCreateInlineSettings:
    """Tests for create_inline_settings."""

    def test_defaults(self) -> None:
        """Inline settings describe a freshly onboarded customer."""
        settings = create_inline_settings("Acme")
        assert settings.customer_id == "inline"
        assert settings.business_name == "Acme"
        assert settings.ai_name == "Ashley"
        assert settings.lead_capture_enabled is True
        assert settings.appointments_enabled is False
        assert settings.business_type is None

    def test_empty_strings_become_none(self) -> None:
        """Blank optional values are stored as missing."""
        settings = create_inline_settings("Acme", business_type="", website_url="")
        assert settings.business_type is None
        assert settings.website_url is None

    def test_values_kept(self) -> None:
        """Provided values are used as-is."""
        settings = create_inline_settings(
            "Acme", business_type="hvac", ai_name="Max", knowledge_content="FAQ"
        )
        assert settings.business_type == "hvac"
        assert settings.ai_name == "Max"
        assert settings.knowledge_content == "FAQ"


class TestComputeConfigVersion:
    """Tests for compute_config_version."""

    def test_no_timestamps(self) -> None:
        """Settings without timestamps have no version."""
        assert compute_config_version(CustomerSettings()) == "no-version"

    def test_latest_timestamp_wins(self) -> None:
        """The most recent of the three timestamps is the version."""
        settings = CustomerSettings(
            settings_updated_at=datetime(2024, 1, 1, tzinfo=UTC),
            calendar_updated_at=datetime(2024, 3, 1, tzinfo=UTC),
            voice_updated_at=datetime(2024, 2, 1, tzinfo=UTC),
        )
        assert compute_config_version(settings) == "2024-03-01T00:00:00+00:00"

    def test_mixed_naive_and_aware(self) -> None:
        """Naive timestamps compare as UTC."""
        settings = CustomerSettings(
            settings_updated_at=datetime(2024, 5, 1, 12, 0),
            voice_updated_at=datetime(2024, 5, 1, 11, 0, tzinfo=UTC),
        )
        assert compute_config_version(settings) == "2024-05-01T12:00:00"
