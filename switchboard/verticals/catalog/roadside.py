"""Lockout, towing and vehicle repair verticals."""

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


LOCKSMITHS = VerticalPromptConfig(
    id=6,
    name="Locksmiths",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.CRITICAL,
        always_collect=[
            "lockout_type",
            "exact_address",
            "callback_number",
            "vehicle_or_property",
            "id_verification_note",
        ],
        never_do=[
            "provide_lock_bypass_instructions",
            "dispatch_without_location",
            "skip_ownership_verification",
        ],
        escalation_triggers=["child_locked_in_car", "medical_access_needed", "business_lockout"],
        tone_guidance="Calm and reassuring. Clear on pricing. Verify ownership intent.",
        compliance_notes=[
            "Always mention ID verification requirement",
            "Never teach bypass methods",
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
            "immediate_dispatch",
            "provide_eta",
            "give_price_range",
            "verify_location",
            "capture_vehicle_info",
        ],
        forbidden=["teach_bypass_methods", "dispatch_without_address", "skip_id_mention"],
        requires_confirmation=["non_standard_pricing"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Verify location, provide ETA and price, dispatch",
            greeting_style=GreetingStyle.URGENT,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Allow for location correction",
            fallback_behavior="Must have address before ending call",
        ),
        web_chat=ChannelBehavior(
            primary_action="Location capture and dispatch coordination",
            greeting_style=GreetingStyle.URGENT,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Priority processing",
            fallback_behavior="Click-to-call for faster service",
        ),
        web_voice=ChannelBehavior(
            primary_action="Phone-like experience with map confirmation",
            greeting_style=GreetingStyle.URGENT,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Allow interruptions",
            fallback_behavior="Capture location via text input",
        ),
        sms=ChannelBehavior(
            primary_action="ETA updates only",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Direct to phone for new requests",
        ),
    ),
)


TOWING = VerticalPromptConfig(
    id=7,
    name="Towing",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.CRITICAL,
        always_collect=[
            "exact_location",
            "vehicle_info",
            "callback_number",
            "destination",
            "hazard_status",
        ],
        never_do=["dispatch_without_location", "underestimate_eta", "ignore_safety_situation"],
        escalation_triggers=[
            "accident_scene",
            "highway_breakdown",
            "vehicle_fire",
            "blocking_traffic",
        ],
        tone_guidance="Efficient and reassuring. Safety-focused for highway situations.",
        compliance_notes=["Verify tow destination authorization", "Note if on private property"],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.OFF,
        emergency_escalation=FeatureFlag.ON,
        after_hours_handling=FeatureFlag.ON,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.OFF,
        insurance_info_collection=FeatureFlag.OPTIONAL,
        price_quoting=FeatureFlag.ON,
        location_verification=FeatureFlag.ON,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "dispatch_immediately",
            "provide_eta",
            "quote_price",
            "verify_location",
            "capture_vehicle_details",
        ],
        forbidden=["dispatch_without_location", "give_unrealistic_eta", "tow_without_destination"],
        requires_confirmation=["long_distance_tow", "heavy_duty_equipment"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Get location, vehicle info, destination — dispatch",
            greeting_style=GreetingStyle.URGENT,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Allow for safety info",
            fallback_behavior="Must have location before ending",
        ),
        web_chat=ChannelBehavior(
            primary_action="Location and vehicle capture with map integration",
            greeting_style=GreetingStyle.URGENT,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Priority",
            fallback_behavior="Click-to-call prominently displayed",
        ),
        web_voice=ChannelBehavior(
            primary_action="Verbal location with visual map confirmation",
            greeting_style=GreetingStyle.URGENT,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Full interruption allowed",
            fallback_behavior="Text input for location",
        ),
        sms=ChannelBehavior(
            primary_action="ETA updates and driver location sharing",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Call for new requests",
        ),
    ),
)


AUTO_REPAIR = VerticalPromptConfig(
    id=8,
    name="Auto Repair",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.MEDIUM,
        always_collect=["vehicle_info", "issue_description", "callback_number", "preferred_date"],
        never_do=["diagnose_over_phone", "quote_repair_costs", "promise_same_day_completion"],
        escalation_triggers=[
            "vehicle_undrivable",
            "safety_system_failure",
            "check_engine_flashing",
        ],
        tone_guidance="Knowledgeable and trustworthy. Patient with non-technical customers.",
        compliance_notes=[
            "Cannot diagnose without inspection",
            "Written estimates required by law in most states",
        ],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.OPTIONAL,
        after_hours_handling=FeatureFlag.OPTIONAL,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.ON,
        insurance_info_collection=FeatureFlag.OPTIONAL,
        price_quoting=FeatureFlag.OFF,
        location_verification=FeatureFlag.OFF,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "book_diagnostic",
            "capture_vehicle_info",
            "provide_hours",
            "capture_symptom_details",
            "schedule_callback",
        ],
        forbidden=["diagnose_issues", "quote_repair_prices", "promise_completion_times"],
        requires_confirmation=["tow_arrangement", "rental_car_coordination"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Capture symptoms and book diagnostic appointment",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Standard conversation",
            fallback_behavior="Schedule callback with service advisor",
        ),
        web_chat=ChannelBehavior(
            primary_action="Vehicle info capture and online scheduling",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.DETAILED,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue",
            fallback_behavior="Offer scheduling calendar",
        ),
        web_voice=ChannelBehavior(
            primary_action="Conversational booking with calendar display",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Standard",
            fallback_behavior="Switch to chat for scheduling",
        ),
        sms=ChannelBehavior(
            primary_action="Status updates and pickup notifications",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Call for new appointments",
        ),
    ),
)


ROADSIDE_VERTICALS = (LOCKSMITHS, TOWING, AUTO_REPAIR)
