"""Property management and relocation verticals."""

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


PROPERTY_MANAGEMENT = VerticalPromptConfig(
    id=18,
    name="Property Management",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.HIGH,
        always_collect=[
            "caller_type",
            "property_address",
            "unit_number",
            "issue_type",
            "callback_number",
        ],
        never_do=[
            "make_lease_decisions",
            "discuss_other_tenants",
            "promise_specific_timelines",
            "bypass_owner_approval",
        ],
        escalation_triggers=[
            "fire",
            "flood",
            "no_heat_cold_weather",
            "security_breach",
            "gas_leak",
        ],
        tone_guidance="Professional and neutral. Empathetic for maintenance emergencies.",
        compliance_notes=[
            "Fair housing compliance",
            "Tenant privacy",
            "Owner notification requirements",
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
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "log_maintenance_request",
            "dispatch_emergency_vendor",
            "route_to_manager",
            "capture_showing_request",
            "verify_tenant_status",
        ],
        forbidden=[
            "make_lease_decisions",
            "discuss_other_residents",
            "quote_rent_changes",
            "approve_repairs",
        ],
        requires_confirmation=["emergency_vendor_dispatch", "owner_notification"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Identify caller type, route appropriately, log requests",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Standard",
            fallback_behavior="Log ticket and promise callback",
        ),
        web_chat=ChannelBehavior(
            primary_action="Tenant portal integration, maintenance requests",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.DETAILED,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue",
            fallback_behavior="Maintenance request form",
        ),
        web_voice=ChannelBehavior(
            primary_action="Verbal request with visual ticket creation",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Standard",
            fallback_behavior="Chat continuation",
        ),
        sms=ChannelBehavior(
            primary_action="Maintenance updates and showing confirmations",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Phone for emergencies",
        ),
    ),
)


MOVING_COMPANIES = VerticalPromptConfig(
    id=19,
    name="Moving Companies",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.LOW,
        always_collect=[
            "move_date",
            "origin_address",
            "destination_address",
            "home_size",
            "callback_number",
        ],
        never_do=[
            "quote_binding_price_without_survey",
            "guarantee_delivery_dates_long_distance",
            "skip_inventory_questions",
        ],
        escalation_triggers=[
            "same_week_move",
            "commercial_move",
            "long_distance",
            "storage_needed",
        ],
        tone_guidance="Organized and reassuring. Patient with detail collection.",
        compliance_notes=[
            "DOT regulations for interstate",
            "Written estimates required",
            "Insurance options disclosure",
        ],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.OFF,
        after_hours_handling=FeatureFlag.OFF,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.ON,
        insurance_info_collection=FeatureFlag.OPTIONAL,
        price_quoting=FeatureFlag.OPTIONAL,
        location_verification=FeatureFlag.ON,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "capture_move_details",
            "schedule_estimate",
            "provide_range_quote",
            "explain_process",
            "discuss_packing_options",
        ],
        forbidden=["guarantee_prices", "promise_delivery_dates", "skip_inventory_assessment"],
        requires_confirmation=["long_distance_move", "commercial_move", "specialty_items"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Capture move details, provide range, schedule estimate",
            greeting_style=GreetingStyle.WARM,
            response_length=ResponseLength.DETAILED,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Patient",
            fallback_behavior="Schedule callback for estimate",
        ),
        web_chat=ChannelBehavior(
            primary_action="Guided move planner with inventory capture",
            greeting_style=GreetingStyle.WARM,
            response_length=ResponseLength.DETAILED,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue",
            fallback_behavior="Quote request form",
        ),
        web_voice=ChannelBehavior(
            primary_action="Conversational move planning",
            greeting_style=GreetingStyle.WARM,
            response_length=ResponseLength.DETAILED,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Patient",
            fallback_behavior="Chat continuation",
        ),
        sms=ChannelBehavior(
            primary_action="Move date confirmations and crew arrival updates",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Phone for changes",
        ),
    ),
)


PROPERTY_VERTICALS = (PROPERTY_MANAGEMENT, MOVING_COMPANIES)
