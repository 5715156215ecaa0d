"""Healthcare verticals. Every entry here is also listed in MEDICAL_VERTICAL_IDS."""

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


DENTISTS = VerticalPromptConfig(
    id=17,
    name="Dentists",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.HIGH,
        always_collect=[
            "issue_type",
            "pain_level",
            "patient_name",
            "callback_number",
            "new_or_existing",
        ],
        never_do=[
            "diagnose_conditions",
            "prescribe_treatment",
            "advise_medication",
            "dismiss_pain_complaints",
        ],
        escalation_triggers=[
            "severe_pain",
            "facial_swelling",
            "knocked_out_tooth",
            "uncontrolled_bleeding",
        ],
        tone_guidance="Warm and reassuring. Calm for anxious patients. Urgent for emergencies.",
        compliance_notes=["HIPAA applies", "No medical advice", "Insurance verification offered"],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.ON,
        after_hours_handling=FeatureFlag.OPTIONAL,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.ON,
        insurance_info_collection=FeatureFlag.ON,
        price_quoting=FeatureFlag.OPTIONAL,
        location_verification=FeatureFlag.OFF,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "book_appointment",
            "capture_patient_info",
            "verify_insurance",
            "triage_emergency",
            "explain_services",
        ],
        forbidden=[
            "diagnose_conditions",
            "advise_medication",
            "provide_treatment_recommendations",
        ],
        requires_confirmation=["emergency_slot", "new_patient_comprehensive"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Assess urgency, book appropriate appointment type",
            greeting_style=GreetingStyle.WARM,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Patient and understanding",
            fallback_behavior="Emergency callback within 30 minutes",
        ),
        web_chat=ChannelBehavior(
            primary_action="Online scheduling with service selection",
            greeting_style=GreetingStyle.WARM,
            response_length=ResponseLength.DETAILED,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue",
            fallback_behavior="Appointment request form",
        ),
        web_voice=ChannelBehavior(
            primary_action="Conversational scheduling with calendar view",
            greeting_style=GreetingStyle.WARM,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Standard",
            fallback_behavior="Chat continuation",
        ),
        sms=ChannelBehavior(
            primary_action="Appointment reminders and confirmations",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Phone for emergencies",
        ),
    ),
)


HEALTH_VERTICALS = (DENTISTS,)
