"""Home-service trade verticals."""

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


PLUMBING = VerticalPromptConfig(
    id=1,
    name="Plumbing",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.CRITICAL,
        always_collect=["issue_type", "address", "callback_number", "water_shutoff_status"],
        never_do=[
            "provide_diy_instructions_for_gas_lines",
            "quote_prices_without_inspection",
            "diagnose_over_phone",
        ],
        escalation_triggers=["gas_smell", "sewage_backup", "flooding", "no_water"],
        tone_guidance=(
            "Calm and reassuring during emergencies. "
            "Efficient and professional for routine calls."
        ),
        compliance_notes=[
            "Never advise on gas line work",
            "Always recommend shutting off water for active leaks",
        ],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.ON,
        after_hours_handling=FeatureFlag.ON,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.ON,
        insurance_info_collection=FeatureFlag.OPTIONAL,
        price_quoting=FeatureFlag.OFF,
        location_verification=FeatureFlag.ON,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "triage_emergency",
            "book_appointment",
            "capture_lead",
            "send_confirmation",
            "escalate_to_dispatch",
        ],
        forbidden=["provide_repair_instructions", "guarantee_pricing", "diagnose_issue"],
        requires_confirmation=["emergency_dispatch", "after_hours_callout"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Triage urgency and book or dispatch",
            greeting_style=GreetingStyle.URGENT,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Allow interruption for emergency details",
            fallback_behavior="Capture callback number and promise return call within 15 minutes",
        ),
        web_chat=ChannelBehavior(
            primary_action="Qualify issue and capture lead info",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue responses, process in order",
            fallback_behavior="Offer callback request form",
        ),
        web_voice=ChannelBehavior(
            primary_action="Mirror phone behavior with visual support",
            greeting_style=GreetingStyle.URGENT,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Allow interruption for emergency details",
            fallback_behavior="Switch to chat or capture callback",
        ),
        sms=ChannelBehavior(
            primary_action="Confirm appointments and send reminders",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async processing",
            fallback_behavior="Prompt to call for urgent issues",
        ),
    ),
)


HVAC = VerticalPromptConfig(
    id=2,
    name="HVAC",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.HIGH,
        always_collect=[
            "issue_type",
            "system_type",
            "address",
            "callback_number",
            "is_heating_or_cooling",
        ],
        never_do=[
            "diagnose_refrigerant_issues",
            "advise_on_electrical_components",
            "quote_without_inspection",
        ],
        escalation_triggers=[
            "no_heat_in_winter",
            "no_ac_in_extreme_heat",
            "gas_smell",
            "carbon_monoxide_alarm",
        ],
        tone_guidance=(
            "Empathetic for comfort emergencies. "
            "Technical confidence for maintenance inquiries."
        ),
        compliance_notes=[
            "EPA regulations on refrigerants",
            "Never advise touching electrical components",
        ],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.ON,
        after_hours_handling=FeatureFlag.ON,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.ON,
        insurance_info_collection=FeatureFlag.OFF,
        price_quoting=FeatureFlag.OPTIONAL,
        location_verification=FeatureFlag.ON,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "triage_emergency",
            "book_appointment",
            "capture_lead",
            "offer_maintenance_plan",
            "check_service_area",
        ],
        forbidden=["diagnose_technical_issues", "quote_repair_costs", "advise_diy_repairs"],
        requires_confirmation=["emergency_after_hours", "maintenance_plan_signup"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Assess urgency based on weather/comfort and dispatch or book",
            greeting_style=GreetingStyle.EMPATHETIC,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Allow for emergency clarification",
            fallback_behavior="Capture callback and prioritize based on weather conditions",
        ),
        web_chat=ChannelBehavior(
            primary_action="Qualify system type and schedule service",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue and process",
            fallback_behavior="Offer scheduling link or callback",
        ),
        web_voice=ChannelBehavior(
            primary_action="Hybrid phone/chat with visual scheduling",
            greeting_style=GreetingStyle.EMPATHETIC,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Allow interruption",
            fallback_behavior="Transition to chat for scheduling",
        ),
        sms=ChannelBehavior(
            primary_action="Appointment confirmations and maintenance reminders",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Direct to phone for emergencies",
        ),
    ),
)


ELECTRICIANS = VerticalPromptConfig(
    id=3,
    name="Electricians",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.CRITICAL,
        always_collect=[
            "issue_type",
            "address",
            "callback_number",
            "is_power_out",
            "smell_or_sparks",
        ],
        never_do=[
            "advise_touching_electrical",
            "provide_diy_wiring_help",
            "diagnose_without_inspection",
        ],
        escalation_triggers=[
            "sparking",
            "burning_smell",
            "power_outage",
            "exposed_wires",
            "water_near_electrical",
        ],
        tone_guidance=(
            "Safety-first urgency. "
            "Calm authority when advising to stay away from hazards."
        ),
        compliance_notes=[
            "All electrical work requires licensed electrician",
            "Never advise DIY for safety",
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
            "triage_safety_emergency",
            "advise_power_shutoff",
            "book_appointment",
            "capture_lead",
            "emergency_dispatch",
        ],
        forbidden=["provide_wiring_instructions", "diagnose_electrical_issues", "quote_prices"],
        requires_confirmation=["emergency_dispatch", "after_hours_service"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Safety triage first, then dispatch or book",
            greeting_style=GreetingStyle.URGENT,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Priority interruption for safety details",
            fallback_behavior="Advise turning off breaker, capture callback",
        ),
        web_chat=ChannelBehavior(
            primary_action="Qualify issue type and urgency level",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue processing",
            fallback_behavior="Escalate to phone for emergencies",
        ),
        web_voice=ChannelBehavior(
            primary_action="Safety-first verbal triage with visual aids",
            greeting_style=GreetingStyle.URGENT,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Allow safety interruptions",
            fallback_behavior="Transition to phone for true emergencies",
        ),
        sms=ChannelBehavior(
            primary_action="Confirmations only, no emergency handling",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Always direct emergencies to phone",
        ),
    ),
)


ROOFING = VerticalPromptConfig(
    id=4,
    name="Roofing",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.MEDIUM,
        always_collect=[
            "issue_type",
            "address",
            "callback_number",
            "storm_related",
            "insurance_claim",
        ],
        never_do=[
            "advise_climbing_on_roof",
            "guarantee_insurance_coverage",
            "quote_without_inspection",
        ],
        escalation_triggers=["active_leak_during_storm", "structural_damage", "tree_on_roof"],
        tone_guidance="Reassuring after storm events. Professional for estimate requests.",
        compliance_notes=["Never guarantee insurance approval", "Document storm dates for claims"],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.OPTIONAL,
        after_hours_handling=FeatureFlag.OPTIONAL,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.ON,
        insurance_info_collection=FeatureFlag.ON,
        price_quoting=FeatureFlag.OFF,
        location_verification=FeatureFlag.ON,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "book_inspection",
            "capture_lead",
            "collect_insurance_info",
            "schedule_estimate",
            "document_storm_date",
        ],
        forbidden=["guarantee_pricing", "advise_roof_access", "promise_insurance_outcome"],
        requires_confirmation=["emergency_tarp_service"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Qualify storm vs routine, book inspection",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Standard conversation flow",
            fallback_behavior="Capture lead for callback",
        ),
        web_chat=ChannelBehavior(
            primary_action="Lead capture and inspection scheduling",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.DETAILED,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue processing",
            fallback_behavior="Offer estimate request form",
        ),
        web_voice=ChannelBehavior(
            primary_action="Conversational booking with visual calendar",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Standard",
            fallback_behavior="Switch to chat for scheduling",
        ),
        sms=ChannelBehavior(
            primary_action="Appointment reminders and follow-ups",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Direct to phone",
        ),
    ),
)


WATER_DAMAGE_RESTORATION = VerticalPromptConfig(
    id=5,
    name="Water Damage / Restoration",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.CRITICAL,
        always_collect=[
            "damage_source",
            "address",
            "callback_number",
            "water_stopped",
            "insurance_info",
        ],
        never_do=[
            "delay_emergency_response",
            "advise_cleanup_before_documentation",
            "guarantee_insurance",
        ],
        escalation_triggers=["active_flooding", "sewage_backup", "fire_damage", "mold_visible"],
        tone_guidance="Urgent and action-oriented. Empathetic to property loss.",
        compliance_notes=["Document before mitigation", "IICRC standards apply"],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.ON,
        after_hours_handling=FeatureFlag.ON,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.OFF,
        insurance_info_collection=FeatureFlag.ON,
        price_quoting=FeatureFlag.OFF,
        location_verification=FeatureFlag.ON,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "immediate_dispatch",
            "collect_insurance",
            "capture_damage_details",
            "advise_water_shutoff",
            "advise_documentation",
        ],
        forbidden=["advise_cleanup_before_photos", "guarantee_insurance", "delay_for_scheduling"],
        requires_confirmation=["non_emergency_assessment"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Immediate dispatch for active emergencies",
            greeting_style=GreetingStyle.URGENT,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Priority for damage details",
            fallback_behavior="Capture location, dispatch immediately",
        ),
        web_chat=ChannelBehavior(
            primary_action="Rapid lead capture, escalate active emergencies to phone",
            greeting_style=GreetingStyle.URGENT,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Priority processing",
            fallback_behavior="Click-to-call for emergencies",
        ),
        web_voice=ChannelBehavior(
            primary_action="Mirror phone with location confirmation",
            greeting_style=GreetingStyle.URGENT,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Allow all interruptions",
            fallback_behavior="Immediate phone transfer",
        ),
        sms=ChannelBehavior(
            primary_action="Status updates only, no intake",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Direct all inquiries to phone",
        ),
    ),
)


TREE_SERVICES = VerticalPromptConfig(
    id=9,
    name="Tree Services",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.HIGH,
        always_collect=[
            "issue_type",
            "address",
            "callback_number",
            "storm_related",
            "tree_size_estimate",
        ],
        never_do=[
            "advise_diy_tree_removal",
            "guarantee_same_day_for_large_jobs",
            "quote_without_seeing",
        ],
        escalation_triggers=[
            "tree_on_structure",
            "tree_on_power_lines",
            "blocking_road",
            "storm_damage",
        ],
        tone_guidance="Calm during emergencies. Knowledgeable for routine consultations.",
        compliance_notes=["Power line work requires utility company", "Permits may be required"],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.ON,
        after_hours_handling=FeatureFlag.OPTIONAL,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.ON,
        insurance_info_collection=FeatureFlag.OPTIONAL,
        price_quoting=FeatureFlag.OFF,
        location_verification=FeatureFlag.ON,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "emergency_triage",
            "book_estimate",
            "capture_lead",
            "assess_storm_priority",
            "schedule_consultation",
        ],
        forbidden=["advise_diy_removal", "quote_prices", "touch_power_lines"],
        requires_confirmation=["emergency_removal", "crane_work"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Triage emergency vs routine, dispatch or book",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Priority for emergencies",
            fallback_behavior="Capture callback for estimate",
        ),
        web_chat=ChannelBehavior(
            primary_action="Qualify job type and schedule estimate",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.DETAILED,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue",
            fallback_behavior="Estimate request form",
        ),
        web_voice=ChannelBehavior(
            primary_action="Conversational job assessment",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Standard",
            fallback_behavior="Chat transition",
        ),
        sms=ChannelBehavior(
            primary_action="Appointment confirmations",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Phone for emergencies",
        ),
    ),
)


GARAGE_DOOR_REPAIR = VerticalPromptConfig(
    id=10,
    name="Garage Door Repair",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.HIGH,
        always_collect=["issue_type", "address", "callback_number", "door_type", "car_trapped"],
        never_do=["advise_spring_repair_diy", "ignore_safety_concerns", "diagnose_without_seeing"],
        escalation_triggers=[
            "car_trapped_inside",
            "door_fell",
            "spring_broke",
            "security_concern",
        ],
        tone_guidance="Safety-conscious. Understanding of urgency for trapped vehicles.",
        compliance_notes=[
            "Spring repair is dangerous - never DIY advice",
            "Opener codes are security-sensitive",
        ],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.ON,
        after_hours_handling=FeatureFlag.ON,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.ON,
        insurance_info_collection=FeatureFlag.OFF,
        price_quoting=FeatureFlag.OPTIONAL,
        location_verification=FeatureFlag.ON,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "emergency_dispatch",
            "book_service",
            "capture_door_info",
            "provide_safety_warnings",
            "same_day_scheduling",
        ],
        forbidden=["advise_spring_repair", "provide_opener_codes", "diagnose_remotely"],
        requires_confirmation=["after_hours_service", "new_door_installation"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Assess urgency (trapped car?), dispatch or book same-day",
            greeting_style=GreetingStyle.URGENT,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Allow for urgency details",
            fallback_behavior="Capture callback, prioritize same-day",
        ),
        web_chat=ChannelBehavior(
            primary_action="Qualify issue and schedule service",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue",
            fallback_behavior="Offer callback request",
        ),
        web_voice=ChannelBehavior(
            primary_action="Verbal triage with scheduling display",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Allow",
            fallback_behavior="Chat transition",
        ),
        sms=ChannelBehavior(
            primary_action="Appointment confirmations and ETA updates",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Phone for emergencies",
        ),
    ),
)


APPLIANCE_REPAIR = VerticalPromptConfig(
    id=11,
    name="Appliance Repair",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.MEDIUM,
        always_collect=[
            "appliance_type",
            "brand_model",
            "issue_description",
            "address",
            "callback_number",
        ],
        never_do=[
            "diagnose_over_phone",
            "advise_opening_appliance",
            "guarantee_parts_availability",
        ],
        escalation_triggers=["refrigerator_not_cooling", "gas_appliance_smell", "water_leaking"],
        tone_guidance="Helpful and knowledgeable. Patient with appliance identification.",
        compliance_notes=[
            "Gas appliances require licensed technicians",
            "Warranty status affects repair approach",
        ],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.OPTIONAL,
        after_hours_handling=FeatureFlag.OFF,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.ON,
        insurance_info_collection=FeatureFlag.OFF,
        price_quoting=FeatureFlag.OPTIONAL,
        location_verification=FeatureFlag.ON,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "book_service_call",
            "capture_appliance_info",
            "check_service_area",
            "provide_service_fee_info",
            "capture_symptoms",
        ],
        forbidden=["diagnose_issues", "advise_diy_repair", "promise_parts_availability"],
        requires_confirmation=["same_day_service", "commercial_appliance"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Capture appliance details and book service window",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Standard",
            fallback_behavior="Schedule callback",
        ),
        web_chat=ChannelBehavior(
            primary_action="Guided appliance identification and scheduling",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.DETAILED,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue",
            fallback_behavior="Form-based booking",
        ),
        web_voice=ChannelBehavior(
            primary_action="Conversational appliance intake",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Standard",
            fallback_behavior="Chat fallback",
        ),
        sms=ChannelBehavior(
            primary_action="Appointment confirmations and tech ETA",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Phone for bookings",
        ),
    ),
)


PEST_CONTROL = VerticalPromptConfig(
    id=12,
    name="Pest Control",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.MEDIUM,
        always_collect=["pest_type", "severity", "address", "callback_number", "pets_children"],
        never_do=["advise_diy_chemicals", "downplay_infestations", "guarantee_one_treatment_cure"],
        escalation_triggers=[
            "venomous_pests",
            "large_infestation",
            "bed_bugs",
            "commercial_property",
        ],
        tone_guidance="Non-judgmental and professional. Reassuring about treatment effectiveness.",
        compliance_notes=[
            "EPA regulations on pesticides",
            "Safety info for pets/children required",
        ],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.OPTIONAL,
        after_hours_handling=FeatureFlag.OFF,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.ON,
        insurance_info_collection=FeatureFlag.OFF,
        price_quoting=FeatureFlag.OPTIONAL,
        location_verification=FeatureFlag.ON,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "book_inspection",
            "capture_pest_info",
            "offer_recurring_service",
            "explain_treatment_process",
            "ask_safety_questions",
        ],
        forbidden=["advise_chemical_use", "guarantee_results", "skip_safety_questions"],
        requires_confirmation=["termite_treatment", "commercial_service"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Identify pest, assess severity, book service",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Standard",
            fallback_behavior="Capture callback",
        ),
        web_chat=ChannelBehavior(
            primary_action="Pest identification with image upload option",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.DETAILED,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue",
            fallback_behavior="Callback request",
        ),
        web_voice=ChannelBehavior(
            primary_action="Verbal pest description and booking",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Standard",
            fallback_behavior="Chat transition",
        ),
        sms=ChannelBehavior(
            primary_action="Appointment reminders and follow-up scheduling",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Phone for new issues",
        ),
    ),
)


JUNK_REMOVAL = VerticalPromptConfig(
    id=13,
    name="Junk Removal",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.LOW,
        always_collect=[
            "item_description",
            "volume_estimate",
            "address",
            "callback_number",
            "access_info",
        ],
        never_do=[
            "quote_exact_prices_without_seeing",
            "accept_hazardous_materials",
            "skip_access_questions",
        ],
        escalation_triggers=["estate_cleanout", "commercial_volume", "same_day_urgent"],
        tone_guidance="Friendly and efficient. Helpful with volume estimation.",
        compliance_notes=["Hazmat restrictions", "Donation vs disposal preferences"],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.OFF,
        after_hours_handling=FeatureFlag.OFF,
        lead_capture=FeatureFlag.ON,
        callback_scheduling=FeatureFlag.ON,
        insurance_info_collection=FeatureFlag.OFF,
        price_quoting=FeatureFlag.OPTIONAL,
        location_verification=FeatureFlag.ON,
        sms_follow_up=FeatureFlag.ON,
        transfer_to_human=FeatureFlag.ON,
    ),
    workflow_permissions=WorkflowPermissions(
        allowed=[
            "book_estimate",
            "capture_item_list",
            "provide_price_range",
            "check_service_area",
            "discuss_access",
        ],
        forbidden=["accept_hazmat", "guarantee_exact_price", "schedule_without_details"],
        requires_confirmation=["large_volume_jobs", "same_day_service"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Understand scope, provide range, book estimate or service",
            greeting_style=GreetingStyle.WARM,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Standard",
            fallback_behavior="Schedule callback",
        ),
        web_chat=ChannelBehavior(
            primary_action="Item list capture with photo upload",
            greeting_style=GreetingStyle.WARM,
            response_length=ResponseLength.DETAILED,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue",
            fallback_behavior="Quote request form",
        ),
        web_voice=ChannelBehavior(
            primary_action="Conversational scoping",
            greeting_style=GreetingStyle.WARM,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Standard",
            fallback_behavior="Chat transition",
        ),
        sms=ChannelBehavior(
            primary_action="Appointment confirmations and arrival updates",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Phone for quotes",
        ),
    ),
)


CONCRETE_MASONRY = VerticalPromptConfig(
    id=20,
    name="Concrete / Masonry",
    brain_rules=BrainRules(
        urgency_classification=UrgencyLevel.LOW,
        always_collect=["project_type", "address", "callback_number", "project_size", "timeline"],
        never_do=[
            "quote_without_seeing",
            "guarantee_weather_schedules",
            "advise_structural_decisions",
        ],
        escalation_triggers=["structural_crack", "foundation_concern", "commercial_project"],
        tone_guidance="Knowledgeable and patient. Professional for project discussions.",
        compliance_notes=[
            "Permits often required",
            "Weather dependencies",
            "Structural work needs engineering",
        ],
    ),
    feature_config=FeatureConfig(
        appointment_booking=FeatureFlag.ON,
        emergency_escalation=FeatureFlag.OFF,
        after_hours_handling=FeatureFlag.OFF,
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
            "schedule_estimate",
            "capture_project_details",
            "explain_process",
            "discuss_materials",
            "check_service_area",
        ],
        forbidden=["quote_prices", "advise_on_structural", "guarantee_weather_timing"],
        requires_confirmation=["commercial_project", "structural_work"],
    ),
    channel_overrides=ChannelOverrides(
        phone=ChannelBehavior(
            primary_action="Understand project scope, schedule on-site estimate",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=False,
            can_send_links=False,
            interruption_handling="Standard",
            fallback_behavior="Schedule callback",
        ),
        web_chat=ChannelBehavior(
            primary_action="Project inquiry with photo upload",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.DETAILED,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Queue",
            fallback_behavior="Estimate request form",
        ),
        web_voice=ChannelBehavior(
            primary_action="Conversational project scoping",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.MODERATE,
            can_show_visuals=True,
            can_send_links=True,
            interruption_handling="Standard",
            fallback_behavior="Chat continuation",
        ),
        sms=ChannelBehavior(
            primary_action="Appointment confirmations and weather updates",
            greeting_style=GreetingStyle.PROFESSIONAL,
            response_length=ResponseLength.BRIEF,
            can_show_visuals=False,
            can_send_links=True,
            interruption_handling="Async",
            fallback_behavior="Phone for project discussion",
        ),
    ),
)


TRADE_VERTICALS = (
    PLUMBING,
    HVAC,
    ELECTRICIANS,
    ROOFING,
    WATER_DAMAGE_RESTORATION,
    TREE_SERVICES,
    GARAGE_DOOR_REPAIR,
    APPLIANCE_REPAIR,
    PEST_CONTROL,
    JUNK_REMOVAL,
    CONCRETE_MASONRY,
)
