"""Static policy tables.

Tool names, feature keys and template keys are a contract with the
runtimes that consume ActionPolicy; renaming any of them is breaking.
"""

from types import MappingProxyType

from switchboard.verticals.models import FeatureKey

REFUSAL_TEMPLATES: MappingProxyType[str, str] = MappingProxyType({
    "LEGAL_NO_ADVICE": (
        "I can't provide legal advice, but I can connect you with our attorney who can "
        "help. Would you like me to schedule a consultation or have someone call you back?"
    ),
    "MEDICAL_NO_DIAGNOSIS": (
        "I'm not able to diagnose conditions, but I can help you schedule an appointment "
        "with our team who can evaluate your situation properly. What works best for you?"
    ),
    "PRICING_VARIES": (
        "Pricing depends on the specific situation. I can capture your details and have "
        "someone follow up with an accurate quote. Can I get your contact information?"
    ),
    "DIY_SAFETY_REFUSAL": (
        "For safety reasons, I can't provide instructions for that. Our licensed "
        "professionals can handle it safely. Would you like to schedule a service call?"
    ),
    "NO_GUARANTEES": (
        "I can't guarantee specific outcomes, but I can have our team review your "
        "situation and discuss options. Can I schedule that for you?"
    ),
    "BOOKING_UNAVAILABLE": (
        "I'm not able to schedule appointments directly right now, but I can take your "
        "information and have someone call you back to set that up."
    ),
    "ESCALATION_UNAVAILABLE": (
        "I can't transfer you to someone right now, but I can make sure your message "
        "gets to the right person. Can I get your callback number?"
    ),
    "AFTER_HOURS_CAPTURE": (
        "We're currently outside business hours. I can take your information and ensure "
        "someone contacts you first thing. What's the best number to reach you?"
    ),
    "GENERIC_INTAKE": (
        "I'd be happy to help. Let me get some information so the right person can "
        "assist you. Can I start with your name and callback number?"
    ),
})

# Key added to each policy's templates, pointing at the vertical's default refusal
PRIMARY_REFUSAL_KEY = "PRIMARY_REFUSAL"

RESTRICTED_TOPICS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "medical": (
        "medical_diagnosis",
        "treatment_recommendation",
        "medication_advice",
        "symptom_interpretation",
        "health_advice",
    ),
    "legal": (
        "legal_advice",
        "case_outcome_prediction",
        "legal_interpretation",
        "settlement_guarantee",
        "legal_strategy",
    ),
    "safety": (
        "diy_electrical",
        "diy_gas_work",
        "diy_structural",
        "unsafe_instructions",
    ),
    "financial": (
        "price_guarantee",
        "binding_quote",
        "insurance_promise",
    ),
})

# Ordered: disabled_tools lists tools in this order
TOOL_FEATURE_MAP: tuple[tuple[str, FeatureKey], ...] = (
    ("create_booking", "appointment_booking"),
    ("schedule_appointment", "appointment_booking"),
    ("book_appointment", "appointment_booking"),
    ("check_availability", "appointment_booking"),
    ("live_transfer", "emergency_escalation"),
    ("transfer_to_human", "transfer_to_human"),
    ("emergency_dispatch", "emergency_escalation"),
    ("escalate_urgent", "emergency_escalation"),
    ("capture_lead", "lead_capture"),
    ("save_contact", "lead_capture"),
    ("create_lead", "lead_capture"),
    ("schedule_callback", "callback_scheduling"),
    ("request_callback", "callback_scheduling"),
    ("quote_estimate", "price_quoting"),
    ("provide_pricing", "price_quoting"),
    ("get_quote", "price_quoting"),
    ("collect_insurance", "insurance_info_collection"),
    ("insurance_intake", "insurance_info_collection"),
    ("verify_location", "location_verification"),
    ("confirm_address", "location_verification"),
    ("send_sms", "sms_follow_up"),
    ("sms_confirmation", "sms_follow_up"),
)
