"""
Intake Layer — Patient Preprocessor

Turns raw registration payloads into the numeric inputs of the engines:
  - Validation of incoming patient payloads
  - Age vulnerability scoring
  - Triage criterion rows for the decision matrix
  - Projection of the condition text into the 8-dimensional symptom space
"""

import re

from config import SYMPTOM_VECTOR_DIM
from intake_layer.records import Patient

REQUIRED_FIELDS = ["id", "age", "severity", "urgency", "resource_need", "waiting_impact"]
OPTIONAL_FIELDS = ["pain_level", "condition", "temperature", "age_vulnerability"]

# Keywords match anywhere in the condition text; "mi" must be the whole word.
SYMPTOM_KEYWORDS = {
    "cardiac":   [r"heart", r"card", r"\bmi\b", r"angina", r"myocardial"],
    "neuro":     [r"stroke", r"neuro", r"seizure", r"paralysis"],
    "trauma":    [r"trauma", r"fracture", r"injur", r"bleed", r"laceration"],
    "metabolic": [r"diabet", r"metabolic", r"keto", r"hypogly"],
}
SYMPTOM_AXES = list(SYMPTOM_KEYWORDS) + ["severity", "urgency", "pain", "age"]

_PATTERNS = {
    axis: re.compile("|".join(words), re.IGNORECASE)
    for axis, words in SYMPTOM_KEYWORDS.items()
}


def age_vulnerability(age: float) -> float:
    """Elderly and very young patients are weighted as more vulnerable."""
    if age >= 75:
        return 90.0
    if age >= 65:
        return 70.0
    if age <= 5:
        return 85.0
    if age <= 18:
        return 60.0
    return 30.0


def criteria_row(patient: Patient) -> list[float]:
    """[severity, urgency, resource_need, waiting_impact, age_vulnerability]"""
    vulnerability = patient.age_vulnerability
    if vulnerability is None:
        vulnerability = age_vulnerability(patient.age)
    return [
        patient.severity,
        patient.urgency,
        patient.resource_need,
        patient.waiting_impact,
        vulnerability,
    ]


def build_symptom_vector(condition: str, severity: float, urgency: float,
                         pain_level: float, age: float) -> list[float]:
    text = condition or ""
    flags = [1.0 if _PATTERNS[axis].search(text) else 0.0 for axis in SYMPTOM_KEYWORDS]
    vector = flags + [severity / 100, urgency / 100, pain_level / 10, age / 100]
    assert len(vector) == SYMPTOM_VECTOR_DIM
    return vector


def patient_symptom_vector(patient: Patient) -> list[float]:
    return build_symptom_vector(patient.condition, patient.severity,
                                patient.urgency, patient.pain_level, patient.age)


def validate(payload: dict) -> tuple[bool, str]:
    """Return (is_valid, error_message)."""
    if not isinstance(payload, dict):
        return False, "Payload must be a mapping"
    for name in REQUIRED_FIELDS:
        if name not in payload:
            return False, f"Missing required field: {name}"
    try:
        patient_from_payload(payload)
    except ValueError as exc:
        return False, str(exc)
    return True, ""


def patient_from_payload(payload: dict) -> Patient:
    """Build a validated Patient from a raw payload; raises ValueError."""
    missing = [name for name in REQUIRED_FIELDS if name not in payload]
    if missing:
        raise ValueError(f"Missing required field: {missing[0]}")
    known = {name: payload[name] for name in REQUIRED_FIELDS + OPTIONAL_FIELDS
             if name in payload}
    return Patient(**known)
