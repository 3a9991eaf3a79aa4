import pytest

from intake_layer.records import Patient
from triage_center.triage import priority_for, run_triage


def test_sample_cohort_is_ranked(patients):
    report = run_triage(patients)
    scores = [r.topsis_score for r in report.results]
    assert scores == sorted(scores, reverse=True)
    assert [r.rank for r in report.results] == list(range(1, 11))
    assert sum(report.weights) == pytest.approx(1.0)


def test_mild_case_is_last_and_routine(patients):
    report = run_triage(patients)
    last = report.results[-1]
    assert last.patient.id == "P004"
    assert last.priority == "Low"
    assert last.fuzzy_label == "Routine"


def test_fuzzy_label_for_critical_stroke(patients):
    report = run_triage(patients)
    stroke = next(r for r in report.results if r.patient.id == "P005")
    assert stroke.fuzzy_label == "Emergency/Immediate"
    assert stroke.priority in ("Critical", "High")


def test_explicit_weights_are_used(patients):
    weights = [0.2, 0.2, 0.2, 0.2, 0.2]
    report = run_triage(patients, weights=weights)
    assert report.weights == weights


def test_single_patient_uses_defaults():
    p = Patient(id="X1", age=40, severity=70, urgency=60, resource_need=50, waiting_impact=40)
    report = run_triage([p])
    assert report.weights == [0.35, 0.30, 0.15, 0.15, 0.05]
    only = report.results[0]
    assert only.promethee_score == 0.0
    assert only.priority == "Low"


def test_empty_cohort_rejected():
    with pytest.raises(ValueError):
        run_triage([])


def test_priority_thresholds():
    assert priority_for(0.95) == "Critical"
    assert priority_for(0.8) == "Critical"
    assert priority_for(0.6) == "High"
    assert priority_for(0.4) == "Medium"
    assert priority_for(0.39) == "Low"


def test_report_to_dict(patients):
    payload = run_triage(patients).to_dict()
    assert set(payload["weights"]) == {
        "severity", "urgency", "resource_need", "waiting_impact", "age_vulnerability",
    }
    first = payload["results"][0]
    assert first["rank"] == 1
    assert {"patient_id", "topsis_score", "promethee_score", "priority",
            "fuzzy_label"} <= set(first)
