"""Content guardrails: restricted topics and the enforcement prompt section."""

from switchboard.policy.constants import PRIMARY_REFUSAL_KEY, REFUSAL_TEMPLATES
from switchboard.policy.models import ActionPolicy
from switchboard.policy.tool_filter import matches_any, normalize_name

_MEDICAL_TOPIC_HINTS = ("diagnos", "symptom", "treatment", "medication")
_LEGAL_TOPIC_HINTS = ("legal", "advice", "case", "settlement")
_SAFETY_TOPIC_HINTS = ("diy", "self", "fix", "repair")
_FINANCIAL_TOPIC_HINTS = ("price", "cost", "quote", "estimate")


def is_topic_restricted(topic: str, policy: ActionPolicy) -> bool:
    """Check whether a topic or intent label is restricted by the policy."""
    return matches_any(normalize_name(topic), policy.restricted_topics)


def get_topic_refusal(topic: str, policy: ActionPolicy) -> str:
    """Pick the refusal message for a restricted topic.

    Keyword priority: medical, legal, DIY safety, pricing. Anything else
    gets the policy's primary refusal.
    """
    text = topic.lower()

    if any(hint in text for hint in _MEDICAL_TOPIC_HINTS):
        return REFUSAL_TEMPLATES["MEDICAL_NO_DIAGNOSIS"]
    if any(hint in text for hint in _LEGAL_TOPIC_HINTS):
        return REFUSAL_TEMPLATES["LEGAL_NO_ADVICE"]
    if any(hint in text for hint in _SAFETY_TOPIC_HINTS):
        return REFUSAL_TEMPLATES["DIY_SAFETY_REFUSAL"]
    if any(hint in text for hint in _FINANCIAL_TOPIC_HINTS):
        return REFUSAL_TEMPLATES["PRICING_VARIES"]

    return policy.refusal_templates.get(PRIMARY_REFUSAL_KEY) or REFUSAL_TEMPLATES["GENERIC_INTAKE"]


def generate_enforcement_prompt_section(policy: ActionPolicy) -> str:
    """Render the policy's restrictions as a markdown prompt section.

    Meant to be appended to the system prompt as a second line of
    enforcement on top of tool filtering.
    """
    lines = ["## Action Restrictions"]

    if not policy.features.booking_enabled:
        lines.append(
            "- **Booking DISABLED**: Do not attempt to schedule appointments. "
            "Offer to capture details for callback."
        )
    if not policy.features.escalation_enabled:
        lines.append(
            "- **Escalation DISABLED**: Do not offer to transfer calls or dispatch "
            "immediately. Capture details instead."
        )
    if not policy.features.pricing_enabled:
        lines.append(
            "- **Pricing DISABLED**: Do not quote specific prices. "
            "Explain that pricing varies and offer follow-up."
        )
    if not policy.features.transfer_enabled:
        lines.append(
            "- **Transfer DISABLED**: Cannot transfer to a human. "
            "Focus on capturing information."
        )

    if policy.requires_compliance_guardrails:
        lines.append("\n## Compliance Guardrails")

        if policy.is_medical_vertical:
            lines.append("- **NEVER diagnose conditions** or recommend treatments")
            lines.append("- **NEVER interpret symptoms** or suggest what might be wrong")
            lines.append(
                "- When asked for medical advice, respond: "
                f'"{REFUSAL_TEMPLATES["MEDICAL_NO_DIAGNOSIS"]}"'
            )

        if policy.is_legal_vertical:
            lines.append("- **NEVER provide legal advice** or interpret laws")
            lines.append("- **NEVER predict case outcomes** or guarantee settlements")
            lines.append(
                "- When asked for legal advice, respond: "
                f'"{REFUSAL_TEMPLATES["LEGAL_NO_ADVICE"]}"'
            )

    lines.append("\n## Universal Safety Rules")
    lines.append("- Never provide DIY instructions for electrical, gas, or structural work")
    lines.append("- Never guarantee specific outcomes or timelines")
    lines.append("- Never make commitments on behalf of the business owner")

    return "\n".join(lines)
