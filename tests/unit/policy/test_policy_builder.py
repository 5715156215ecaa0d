"""Unit tests for action policy construction."""

import pytest
from prometheus_client import REGISTRY

from switchboard.policy import (
    PRIMARY_REFUSAL_KEY,
    REFUSAL_TEMPLATES,
    RESTRICTED_TOPICS,
    TOOL_FEATURE_MAP,
    build_action_policy,
    build_action_policy_from_settings,
    derive_policy_features,
)
from switchboard.verticals import (
    LEGAL_VERTICAL_IDS,
    MEDICAL_VERTICAL_IDS,
    get_vertical_config,
    list_vertical_ids,
)
from switchboard.verticals.models import Channel, CustomerSettings, FeatureFlag
from tests.factories import CustomerSettingsFactory


class TestDerivePolicyFeatures:
    """Tests for derive_policy_features."""

    def test_optional_counts_as_enabled(self) -> None:
        """OPTIONAL booking and transfer are enabled."""
        flags = get_vertical_config(0).feature_config.with_overrides(
            {"transfer_to_human": FeatureFlag.OPTIONAL}
        )
        features = derive_policy_features(flags)
        assert features.booking_enabled is True
        assert features.transfer_enabled is True

    def test_pricing_requires_on(self) -> None:
        """OPTIONAL pricing is not enough; only ON enables it."""
        hvac = get_vertical_config(2).feature_config
        assert hvac.price_quoting == FeatureFlag.OPTIONAL
        assert derive_policy_features(hvac).pricing_enabled is False

        on = hvac.with_overrides({"price_quoting": FeatureFlag.ON})
        assert derive_policy_features(on).pricing_enabled is True


class TestBuildActionPolicy:
    """Tests for build_action_policy."""

    def test_generic_vertical_tool_sets(self) -> None:
        """Disabled tools follow table order, then forbidden workflow actions."""
        policy = build_action_policy(0, Channel.PHONE)
        assert policy.disabled_tools == [
            "live_transfer",
            "emergency_dispatch",
            "escalate_urgent",
            "quote_estimate",
            "provide_pricing",
            "get_quote",
            "collect_insurance",
            "insurance_intake",
            "provide_medical_diagnosis",
            "provide_legal_advice",
            "quote_specific_prices",
            "make_binding_commitments",
            "diagnose_technical_issues",
        ]
        assert "create_booking" in policy.allowed_tools
        assert "transfer_to_human" in policy.allowed_tools

    def test_every_table_tool_is_allowed_or_disabled(self) -> None:
        """Each gated tool lands in exactly one of the two lists."""
        policy = build_action_policy(1, Channel.WEB_CHAT)
        for tool, _ in TOOL_FEATURE_MAP:
            assert (tool in policy.allowed_tools) != (tool in policy.disabled_tools)

    def test_none_vertical_is_generic(self) -> None:
        """A missing vertical id builds the generic policy."""
        policy = build_action_policy(None, Channel.SMS)
        assert policy.vertical_id == 0
        assert policy.vertical_name == "Generic Local Business"

    def test_unknown_vertical_keeps_requested_id(self) -> None:
        """Unknown ids keep their id but use the generic configuration."""
        policy = build_action_policy(999, Channel.PHONE)
        assert policy.vertical_id == 999
        assert policy.vertical_name == "Generic Local Business"
        assert policy.requires_compliance_guardrails is False

    def test_reserved_medical_id_is_medical(self) -> None:
        """Compliance follows the requested id even without a catalog entry."""
        policy = build_action_policy(85, Channel.PHONE)
        assert policy.vertical_name == "Generic Local Business"
        assert policy.is_medical_vertical is True
        assert set(RESTRICTED_TOPICS["medical"]) <= set(policy.restricted_topics)

    def test_overrides_disable_tools(self) -> None:
        """Overriding a flag OFF moves its tools to the disabled list."""
        policy = build_action_policy(
            1, Channel.PHONE, {"appointment_booking": FeatureFlag.OFF}
        )
        assert policy.features.booking_enabled is False
        for tool in ("create_booking", "schedule_appointment", "book_appointment"):
            assert tool in policy.disabled_tools
            assert tool not in policy.allowed_tools

    def test_forbidden_actions_are_normalized(self) -> None:
        """Forbidden workflow actions are lowercased with underscores."""
        policy = build_action_policy(1, Channel.PHONE)
        assert "diagnose_issue" in policy.disabled_tools
        assert all(tool == tool.lower() and " " not in tool for tool in policy.disabled_tools)

    def test_no_duplicate_disabled_tools(self) -> None:
        """A forbidden action that is also a gated tool is listed once."""
        for vertical_id in list_vertical_ids():
            policy = build_action_policy(vertical_id, Channel.PHONE)
            assert len(policy.disabled_tools) == len(set(policy.disabled_tools))

    def test_channel_is_recorded(self) -> None:
        """The policy carries the channel it was built for."""
        assert build_action_policy(1, Channel.WEB_VOICE).channel == Channel.WEB_VOICE

    def test_counts_policies_built(self) -> None:
        """Each build increments the per-channel counter."""
        labels = {"channel": "sms"}
        before = REGISTRY.get_sample_value("switchboard_action_policies_built_total", labels) or 0.0
        build_action_policy(3, Channel.SMS)
        after = REGISTRY.get_sample_value("switchboard_action_policies_built_total", labels)
        assert after == before + 1


class TestRestrictedTopics:
    """Tests for restricted topic assembly."""

    @pytest.mark.parametrize("vertical_id", [*range(21), 68, 85, 999])
    def test_safety_topics_always_present(self, vertical_id: int) -> None:
        """Every policy restricts the safety topics."""
        policy = build_action_policy(vertical_id, Channel.PHONE)
        assert set(RESTRICTED_TOPICS["safety"]) <= set(policy.restricted_topics)

    def test_financial_topics_when_pricing_off(self) -> None:
        """Without ON pricing, financial topics are restricted."""
        policy = build_action_policy(1, Channel.PHONE)
        assert set(RESTRICTED_TOPICS["financial"]) <= set(policy.restricted_topics)

    def test_no_financial_topics_when_pricing_on(self) -> None:
        """Verticals that quote prices do not restrict financial topics."""
        policy = build_action_policy(7, Channel.PHONE)
        assert policy.features.pricing_enabled is True
        assert not set(RESTRICTED_TOPICS["financial"]) & set(policy.restricted_topics)

    def test_topic_order(self) -> None:
        """Topics are safety, then medical, then financial for dentists."""
        policy = build_action_policy(17, Channel.PHONE)
        assert policy.restricted_topics == [
            *RESTRICTED_TOPICS["safety"],
            *RESTRICTED_TOPICS["medical"],
            *RESTRICTED_TOPICS["financial"],
        ]

    def test_legal_topics(self) -> None:
        """Legal verticals restrict legal topics and not medical ones."""
        policy = build_action_policy(15, Channel.PHONE)
        assert set(RESTRICTED_TOPICS["legal"]) <= set(policy.restricted_topics)
        assert not set(RESTRICTED_TOPICS["medical"]) & set(policy.restricted_topics)


class TestRefusalTemplates:
    """Tests for refusal template assembly."""

    def test_all_templates_present(self) -> None:
        """The policy carries every template plus the primary refusal."""
        policy = build_action_policy(1, Channel.PHONE)
        assert set(policy.refusal_templates) == {*REFUSAL_TEMPLATES, PRIMARY_REFUSAL_KEY}

    @pytest.mark.parametrize("vertical_id", sorted(MEDICAL_VERTICAL_IDS))
    def test_primary_refusal_medical(self, vertical_id: int) -> None:
        """Medical verticals refuse with the no-diagnosis template."""
        policy = build_action_policy(vertical_id, Channel.PHONE)
        assert (
            policy.refusal_templates[PRIMARY_REFUSAL_KEY]
            == REFUSAL_TEMPLATES["MEDICAL_NO_DIAGNOSIS"]
        )

    @pytest.mark.parametrize("vertical_id", sorted(LEGAL_VERTICAL_IDS))
    def test_primary_refusal_legal(self, vertical_id: int) -> None:
        """Legal verticals refuse with the no-advice template."""
        policy = build_action_policy(vertical_id, Channel.PHONE)
        assert policy.refusal_templates[PRIMARY_REFUSAL_KEY] == REFUSAL_TEMPLATES["LEGAL_NO_ADVICE"]

    def test_primary_refusal_generic(self) -> None:
        """Other verticals refuse with the generic intake template."""
        policy = build_action_policy(9, Channel.PHONE)
        assert policy.refusal_templates[PRIMARY_REFUSAL_KEY] == REFUSAL_TEMPLATES["GENERIC_INTAKE"]

    def test_policies_do_not_share_template_dicts(self) -> None:
        """Each policy owns its template mapping."""
        first = build_action_policy(1, Channel.PHONE)
        second = build_action_policy(1, Channel.PHONE)
        assert first == second
        assert first.refusal_templates is not second.refusal_templates


class TestBuildActionPolicyFromSettings:
    """Tests for build_action_policy_from_settings."""

    def test_dentist_settings(self) -> None:
        """Settings overrides flow into the policy."""
        settings = CustomerSettings(
            business_type="dentist",
            appointments_enabled=False,
            lead_capture_enabled=True,
        )
        policy = build_action_policy_from_settings(settings, Channel.PHONE)
        assert policy.vertical_id == 17
        assert policy.is_medical_vertical is True
        assert policy.features.booking_enabled is False
        assert policy.features.transfer_enabled is False
        assert "create_booking" in policy.disabled_tools

    def test_fuzzy_only_matching(self) -> None:
        """Descriptive business types match by substring."""
        settings = CustomerSettingsFactory.create(business_type="Joe's Towing Co")
        assert build_action_policy_from_settings(settings, Channel.SMS).vertical_id == 7

    def test_empty_settings_are_generic(self) -> None:
        """Settings without a business type build the generic policy."""
        policy = build_action_policy_from_settings(CustomerSettings(), Channel.PHONE)
        assert policy.vertical_id == 0
        assert policy.features.transfer_enabled is False

    def test_unmatched_business_type_is_generic(self) -> None:
        """Unmatched business types build the generic policy."""
        settings = CustomerSettingsFactory.create(business_type="bakery")
        assert build_action_policy_from_settings(settings, Channel.PHONE).vertical_id == 0

    def test_transfer_number_keeps_transfer(self) -> None:
        """A configured transfer number leaves transfer enabled."""
        settings = CustomerSettingsFactory.create()
        policy = build_action_policy_from_settings(settings, Channel.PHONE)
        assert policy.vertical_id == 1
        assert policy.features.transfer_enabled is True
