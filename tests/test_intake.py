import pytest

from intake_layer.preprocessor import (
    age_vulnerability, build_symptom_vector, criteria_row, patient_from_payload, validate,
)
from intake_layer.records import LiveStatus, Patient, Specialist

PAYLOAD = {
    "id": "P100", "age": 70, "severity": 85, "urgency": 75,
    "resource_need": 60, "waiting_impact": 70, "pain_level": 6,
    "condition": "Chest pain, suspected angina",
}


@pytest.mark.parametrize("age,expected", [
    (80, 90), (75, 90), (65, 70), (40, 30), (18, 60), (10, 60), (5, 85), (0, 85),
])
def test_age_vulnerability(age, expected):
    assert age_vulnerability(age) == expected


def test_symptom_vector_flags_and_scaling():
    vec = build_symptom_vector("Acute Myocardial Infarction", 90, 85, 7, 60)
    assert vec == pytest.approx([1, 0, 0, 0, 0.9, 0.85, 0.7, 0.6])


@pytest.mark.parametrize("condition,flags", [
    ("Acute Ischemic Stroke", [0, 1, 0, 0]),
    ("Fractured Arm", [0, 0, 1, 0]),
    ("Diabetic ketoacidosis", [0, 0, 0, 1]),
    ("Chronic Heart Failure", [1, 0, 0, 0]),
    ("Suspected MI", [1, 0, 0, 0]),
    ("Migraine Attack", [0, 0, 0, 0]),
    ("Supraventricular Tachycardia", [1, 0, 0, 0]),
    ("Polytrauma after collision", [0, 0, 1, 0]),
    ("Severe nosebleed", [0, 0, 1, 0]),
    ("Prediabetes workup", [0, 0, 0, 1]),
    ("", [0, 0, 0, 0]),
])
def test_symptom_keyword_matching(condition, flags):
    assert build_symptom_vector(condition, 50, 50, 5, 50)[:4] == flags


def test_criteria_row_derives_age_vulnerability():
    p = patient_from_payload(PAYLOAD)
    assert criteria_row(p) == [85, 75, 60, 70, 70]
    p.age_vulnerability = 95
    assert criteria_row(p)[-1] == 95


def test_validate_payload():
    assert validate(PAYLOAD) == (True, "")
    missing = {k: v for k, v in PAYLOAD.items() if k != "urgency"}
    assert validate(missing) == (False, "Missing required field: urgency")
    ok, err = validate({**PAYLOAD, "severity": 120})
    assert not ok and "severity" in err
    ok, err = validate({**PAYLOAD, "age": float("nan")})
    assert not ok and "age" in err


def test_patient_from_payload_rejects_partial_input():
    with pytest.raises(ValueError):
        patient_from_payload({"id": "P1", "age": 30})


def test_records_reject_bad_values():
    with pytest.raises(ValueError):
        Patient(id="", age=30, severity=1, urgency=1, resource_need=1, waiting_impact=1)
    with pytest.raises(ValueError):
        Patient(id="P1", age=30, severity=True, urgency=1, resource_need=1, waiting_impact=1)
    with pytest.raises(ValueError):
        Specialist("S1", "S", 90, 140, 80, 80, 3, "Cardiac")
    with pytest.raises(ValueError):
        LiveStatus(available="yes", current_load=10)


def test_live_status_load_is_bounded():
    assert LiveStatus(True, 100).current_load == 100.0
    with pytest.raises(ValueError):
        LiveStatus(True, 150)
    with pytest.raises(ValueError):
        LiveStatus(True, -1)
