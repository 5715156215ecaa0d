"""Legal verticals. Every entry here is also listed in LEGAL_VERTICAL_IDS."""

from switchboard.verticals.models import (
    BrainRules,
    ChannelBehavior,
    ChannelOverrides,
    FeatureConfig,
    FeatureFlag,
    GreetingStyle,
    ResponseLength,
    UrgencyLevel,
    VerticalPromptConfig,
    WorkflowPermissions,
)


BAIL_BONDS = VerticalPromptConfig(
    id=14,
    name="Bail Bonds",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.CRITICAL,
        always_collect=[
            "defendant_name",
            "jail_location",
            "charge_type",
            "callback_number",
            "relationship",
        ],
        never_do=["provide_legal_advice", "guarantee_release_time", "discuss_case_details"],
        escalation_triggers=["all_calls_are_urgent", "weekend_arrest", "high_bail_amount"],
        tone_guidance="Calm, professional, non-judgmental. Efficient under stress.",
        compliance_notes=[
            "Licensed bondsman requirements",
            "Fee disclosure requirements",
            "No legal advice",
        ],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.OFF,
        emergency_escalation=FeatureFlag.ON,
        after_hours_handling=FeatureFlag.ON,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.OFF,
        insurance_info_collection=FeatureFlag.OFF,
        price_quoting=FeatureFlag.ON,
        location_verification=FeatureFlag.ON,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "collect_defendant_info",
            "explain_process",
            "provide_fee_info",
            "dispatch_agent",
            "verify_jail_info",
        ],
        forbidden=["give_legal_advice", "guarantee_timing", "discuss_case_merits"],
        requires_confirmation=["payment_arrangement", "collateral_discussion"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Rapid intake, explain fees, dispatch bondsman",
            greeting_style=GreetingStyle.EMPATHETIC,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Allow all - callers are stressed",
            fallback_behavior="Must capture jail and name before ending",
        ),
        web_chat=ChannelBehavior(
            primary_action="Basic intake, escalate to phone",
            greeting_style=GreetingStyle.EMPATHETIC,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Priority",
            fallback_behavior="Click-to-call prominent",
        ),
        web_voice=ChannelBehavior(
            primary_action="Phone-equivalent intake",
            greeting_style=GreetingStyle.EMPATHETIC,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Full allow",
            fallback_behavior="Immediate phone transfer",
        ),
        sms=ChannelBehavior(
            primary_action="Status updates only",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Phone for all new requests",
        ),
    ),
)


CRIMINAL_DEFENSE_ATTORNEYS = VerticalPromptConfig(
    id=15,
    name="Criminal Defense Attorneys",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.CRITICAL,
        always_collect=[
            "defendant_name",
            "charge_type",
            "arrest_status",
            "callback_number",
            "jurisdiction",
        ],
        never_do=[
            "provide_legal_advice",
            "predict_outcomes",
            "discuss_fees_in_detail",
            "record_case_details",
        ],
        escalation_triggers=[
            "active_arrest",
            "arraignment_imminent",
            "serious_felony",
            "juvenile_case",
        ],
        tone_guidance="Confidential, professional, reassuring. Urgent but not panicked.",
        compliance_notes=[
            "Attorney-client privilege starts at intake",
            "No specific legal advice",
            "Conflict check required",
        ],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.ON,
        after_hours_handling=FeatureFlag.ON,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.ON,
        insurance_info_collection=FeatureFlag.OFF,
        price_quoting=FeatureFlag.OFF,
        location_verification=FeatureFlag.ON,
        sms_follow_up=FeatureFlag.OPTIONAL,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "capture_basic_case_info",
            "schedule_consultation",
            "emergency_attorney_dispatch",
            "provide_general_process_info",
            "verify_jurisdiction",
        ],
        forbidden=[
            "provide_legal_advice",
            "discuss_fees",
            "predict_outcomes",
            "record_detailed_statements",
        ],
        requires_confirmation=["emergency_representation", "weekend_consultation"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Assess urgency, capture minimal info, connect to attorney",
            greeting_style=GreetingStyle.EMPATHETIC,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Priority for urgency",
            fallback_behavior="Attorney callback within 15 minutes for arrests",
        ),
        web_chat=ChannelBehavior(
            primary_action="Confidential intake form, schedule consultation",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue",
            fallback_behavior="Secure callback request",
        ),
        web_voice=ChannelBehavior(
            primary_action="Verbal intake with privacy emphasis",
            greeting_style=GreetingStyle.EMPATHETIC,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Allow",
            fallback_behavior="Phone transfer for sensitive matters",
        ),
        sms=ChannelBehavior(
            primary_action="Appointment confirmations only - no case discussion",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Phone required for all case matters",
        ),
    ),
)


PERSONAL_INJURY_ATTORNEYS = VerticalPromptConfig(
    id=16,
    name="Personal Injury Attorneys",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.HIGH,
        always_collect=[
            "incident_type",
            "incident_date",
            "injury_description",
            "callback_number",
            "insurance_status",
        ],
        never_do=[
            "provide_legal_advice",
            "promise_outcomes",
            "discuss_settlement_values",
            "discourage_medical_treatment",
        ],
        escalation_triggers=[
            "statute_of_limitations_near",
            "severe_injury",
            "wrongful_death",
            "commercial_vehicle",
        ],
        tone_guidance="Compassionate and understanding. Professional confidence without promises.",
        compliance_notes=[
            "No case evaluation over phone",
            "Medical treatment always priority",
            "Statute of limitations awareness",
        ],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.OPTIONAL,
        after_hours_handling=FeatureFlag.OPTIONAL,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.ON,
        insurance_info_collection=FeatureFlag.ON,
        price_quoting=FeatureFlag.OFF,
        location_verification=FeatureFlag.OPTIONAL,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "capture_incident_info",
            "schedule_consultation",
            "collect_insurance_info",
            "explain_general_process",
            "qualify_case_type",
        ],
        forbidden=[
            "evaluate_case_value",
            "provide_legal_advice",
            "discourage_treatment",
            "promise_outcomes",
        ],
        requires_confirmation=["priority_callback", "home_visit_scheduling"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Compassionate intake, qualify case type, schedule consultation",
            greeting_style=GreetingStyle.EMPATHETIC,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Patient and allowing",
            fallback_behavior="Callback scheduling with priority",
        ),
        web_chat=ChannelBehavior(
            primary_action="Guided case intake form with qualification",
            greeting_style=GreetingStyle.EMPATHETIC,
            response_length=ResponseLength.DETAILED,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue",
            fallback_behavior="Case evaluation request form",
        ),
        web_voice=ChannelBehavior(
            primary_action="Conversational intake with visual forms",
            greeting_style=GreetingStyle.EMPATHETIC,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Patient",
            fallback_behavior="Chat continuation",
        ),
        sms=ChannelBehavior(
            primary_action="Appointment reminders and document requests",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Phone for case discussion",
        ),
    ),
)


LEGAL_VERTICALS = (BAIL_BONDS, CRIMINAL_DEFENSE_ATTORNEYS, PERSONAL_INJURY_ATTORNEYS)
