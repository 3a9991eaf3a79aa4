"""
Triage Center — Patient Triage Pipeline

Pipeline: criterion rows → dynamic weights → TOPSIS + PROMETHEE → priority,
plus an independent fuzzy urgency label per patient. Results are ordered by
TOPSIS closeness, highest priority first.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from config import PRIORITY_THRESHOLDS, PRIORITY_DEFAULT, TRIAGE_CRITERIA
from intake_layer.preprocessor import criteria_row
from intake_layer.records import Patient
from triage_center.fuzzy import fuzzy_urgency
from triage_center.topsis_promethee import calculate_promethee, calculate_topsis
from triage_center.weighting import calculate_weights

logger = logging.getLogger(__name__)


@dataclass
class TriageResult:
    patient: Patient
    criteria: list[float]
    topsis_score: float
    promethee_score: float
    priority: str
    fuzzy_score: float
    fuzzy_label: str
    rank: int = 0

    def to_dict(self) -> dict:
        return {
            "rank":            self.rank,
            "patient_id":      self.patient.id,
            "criteria":        dict(zip(TRIAGE_CRITERIA, self.criteria)),
            "topsis_score":    round(self.topsis_score, 6),
            "promethee_score": round(self.promethee_score, 6),
            "priority":        self.priority,
            "fuzzy_score":     round(self.fuzzy_score, 6),
            "fuzzy_label":     self.fuzzy_label,
        }


@dataclass
class TriageReport:
    results: list[TriageResult]
    weights: list[float] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "weights":  dict(zip(TRIAGE_CRITERIA, (round(w, 6) for w in self.weights))),
            "results":  [r.to_dict() for r in self.results],
        }


def priority_for(topsis_score: float) -> str:
    for threshold, label in PRIORITY_THRESHOLDS:
        if topsis_score >= threshold:
            return label
    return PRIORITY_DEFAULT


def run_triage(patients: list[Patient], weights: Optional[list[float]] = None) -> TriageReport:
    if not patients:
        raise ValueError("At least one patient is required for triage")

    matrix = [criteria_row(p) for p in patients]
    if weights is None:
        weights = calculate_weights(matrix)

    topsis = calculate_topsis(matrix, weights)
    promethee = calculate_promethee(matrix, weights)

    results = []
    for p, row, t_score, p_score in zip(patients, matrix, topsis, promethee):
        f_score, f_label = fuzzy_urgency(
            p.severity / 100, p.urgency / 100, p.waiting_impact / 100)
        results.append(TriageResult(
            patient=p,
            criteria=row,
            topsis_score=t_score,
            promethee_score=p_score,
            priority=priority_for(t_score),
            fuzzy_score=f_score,
            fuzzy_label=f_label,
        ))

    results.sort(key=lambda r: r.topsis_score, reverse=True)
    for rank, r in enumerate(results, 1):
        r.rank = rank

    logger.info("Triaged %d patients, top: %s (%.3f, %s)",
                len(results), results[0].patient.id,
                results[0].topsis_score, results[0].priority)
    return TriageReport(results=results, weights=list(weights))
