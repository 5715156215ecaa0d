"""Enums for the vertical policy domain."""

from enum import Enum


class FeatureFlag(str, Enum):
    """Tri-state capability toggle.

    - ON: Capability is active and expected
    - OFF: Capability is disabled
    - OPTIONAL: Capability is permitted but not mandatory
    """

    ON = "ON"
    OFF = "OFF"
    OPTIONAL = "OPTIONAL"


class Channel(str, Enum):
    """Communication medium of an agent session."""

    PHONE = "phone"
    WEB_CHAT = "web_chat"
    WEB_VOICE = "web_voice"
    SMS = "sms"


class UrgencyLevel(str, Enum):
    """How time-sensitive inbound contacts for a vertical usually are."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class GreetingStyle(str, Enum):
    """Opening tone of the agent on a channel."""

    URGENT = "urgent"
    PROFESSIONAL = "professional"
    WARM = "warm"
    EMPATHETIC = "empathetic"


class ResponseLength(str, Enum):
    """Target verbosity of agent replies on a channel."""

    BRIEF = "brief"
    MODERATE = "moderate"
    DETAILED = "detailed"


class AfterHoursBehavior(str, Enum):
    """What the business wants done with contacts outside business hours.

    - VOICEMAIL: Take a message only
    - LEAD_CAPTURE: Qualify and capture the lead, no dispatch
    - EMERGENCY_ONLY: Full handling including emergency escalation
    """

    VOICEMAIL = "voicemail"
    LEAD_CAPTURE = "lead_capture"
    EMERGENCY_ONLY = "emergency_only"
