"""Compliance classification of verticals.

Medical and legal verticals carry mandatory guardrail language. The id
lists include ids reserved for verticals that are not in the catalog yet;
they must stay in sync with the registry ids.
"""

from pydantic import BaseModel, ConfigDict

MEDICAL_VERTICAL_IDS: frozenset[int] = frozenset({17, *range(81, 93)})

LEGAL_VERTICAL_IDS: frozenset[int] = frozenset({14, 15, 16, *range(66, 71)})

MEDICAL_COMPLIANCE_MODIFIERS: tuple[str, ...] = (
    "NEVER provide medical diagnosis, treatment recommendations, or health advice",
    "ALWAYS recommend consulting with a licensed healthcare professional",
    "Do NOT interpret symptoms or suggest conditions",
    "Capture intake information only and schedule appointments",
    "For emergencies, advise calling 911 immediately",
)

LEGAL_COMPLIANCE_MODIFIERS: tuple[str, ...] = (
    "NEVER provide legal advice or interpret laws",
    "ALWAYS recommend consulting with a licensed attorney",
    "Do NOT guarantee case outcomes or settlement amounts",
    "Capture case details for attorney review only",
    "Maintain strict confidentiality in all communications",
)


class ComplianceClassification(BaseModel):
    """Which regulated categories a vertical falls into."""

    model_config = ConfigDict(frozen=True)

    medical: bool = False
    legal: bool = False

    @property
    def requires_guardrails(self) -> bool:
        return self.medical or self.legal


def is_medical_vertical(vertical_id: int) -> bool:
    return vertical_id in MEDICAL_VERTICAL_IDS


def is_legal_vertical(vertical_id: int) -> bool:
    return vertical_id in LEGAL_VERTICAL_IDS


def classify_vertical(vertical_id: int) -> ComplianceClassification:
    """Classify a vertical id as medical and/or legal."""
    return ComplianceClassification(
        medical=is_medical_vertical(vertical_id),
        legal=is_legal_vertical(vertical_id),
    )


def get_compliance_modifiers(vertical_id: int) -> list[str]:
    """Return the compliance sentences for a vertical.

    Medical sentences come first, then legal ones. Non-regulated
    verticals get an empty list.
    """
    modifiers: list[str] = []
    if is_medical_vertical(vertical_id):
        modifiers.extend(MEDICAL_COMPLIANCE_MODIFIERS)
    if is_legal_vertical(vertical_id):
        modifiers.extend(LEGAL_COMPLIANCE_MODIFIERS)
    return modifiers
