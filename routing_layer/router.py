"""
Routing Layer — Specialist Routing

Recommends specialists for one patient:

  available specialists → WASPAS → collaboration diffusion
                        → symptom cosine similarity → rank fusion

Each recommendation carries a confidence (the fused score), an estimated
wait and the resources to prepare. The four intermediate score maps are
always returned as the decision path so every ranking can be audited.
"""

import logging
import math
from collections import Counter
from dataclasses import dataclass, field

from config import (
    BASE_WAIT_MINUTES, CRITICAL_SEVERITY, FUSION_WEIGHTS, GNN_ETA,
    GNN_ITERATIONS, IMMEDIATE_URGENCY, PRIORITY_URGENCY, WASPAS_LAMBDA,
)
from intake_layer.preprocessor import patient_symptom_vector
from intake_layer.records import Patient, Specialist
from routing_layer.diffusion import adjust_scores
from routing_layer.fusion import aggregate_ranks
from routing_layer.reference_data import RoutingDataset
from routing_layer.waspas import calculate_waspas
from triage_center.vector_math import cosine_similarity

logger = logging.getLogger(__name__)

BASE_RESOURCE = "Medical examination room"

# specialty → (standard resources, resource added for critical severity)
SPECIALTY_RESOURCES = {
    "cardiac":          (["ECG machine", "Defibrillator"], "Cardiac catheterization lab"),
    "neurology":        (["CT scanner", "MRI machine"],    "Neurosurgery suite"),
    "trauma":           (["X-ray machine", "Orthopedic tools"], "Operating room"),
    "emergency":        (["IV equipment", "Ventilator"],   "ICU bed"),
    "general medicine": (["Basic lab equipment"],          None),
}
DEFAULT_RESOURCES = (["General medical equipment"], None)


@dataclass
class Recommendation:
    specialist_id: str
    specialist_name: str
    specialty: str
    confidence: float
    estimated_wait_minutes: int
    required_resources: list[str]
    rank: int

    def to_dict(self) -> dict:
        return {
            "rank":                   self.rank,
            "specialist_id":          self.specialist_id,
            "specialist_name":        self.specialist_name,
            "specialty":              self.specialty,
            "confidence":             round(self.confidence, 6),
            "estimated_wait_minutes": self.estimated_wait_minutes,
            "required_resources":     list(self.required_resources),
        }


@dataclass
class DecisionPath:
    waspas_scores: dict = field(default_factory=dict)
    gnn_scores: dict = field(default_factory=dict)
    similarity_scores: dict = field(default_factory=dict)
    final_scores: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "waspas_scores":     dict(self.waspas_scores),
            "gnn_scores":        dict(self.gnn_scores),
            "similarity_scores": dict(self.similarity_scores),
            "final_scores":      dict(self.final_scores),
        }


@dataclass
class RoutingResult:
    patient_id: str
    recommendations: list[Recommendation] = field(default_factory=list)
    decision_path: DecisionPath = field(default_factory=DecisionPath)

    @property
    def top(self):
        return self.recommendations[0] if self.recommendations else None

    def to_dict(self) -> dict:
        return {
            "patient_id":      self.patient_id,
            "recommendations": [r.to_dict() for r in self.recommendations],
            "decision_path":   self.decision_path.to_dict(),
        }


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def estimate_wait_minutes(specialist: Specialist) -> int:
    """Busier and less available specialists have longer waits."""
    workload_factor = specialist.workload / 10
    availability_factor = (100 - specialist.availability) / 100
    return round_half_up(
        BASE_WAIT_MINUTES * (1 + workload_factor * 0.5 + availability_factor * 0.3))


def required_resources(specialty: str, severity: float, urgency: float) -> list[str]:
    standard, critical = SPECIALTY_RESOURCES.get(specialty.lower(), DEFAULT_RESOURCES)
    resources = [BASE_RESOURCE] + list(standard)
    if critical and severity > CRITICAL_SEVERITY:
        resources.append(critical)

    if urgency > IMMEDIATE_URGENCY:
        resources.append("Immediate attention")
    elif urgency > PRIORITY_URGENCY:
        resources.append("Priority attention")
    return resources


def enhanced_specialist_routing(patient_id: str, symptom_vector: list[float],
                                severity: float, urgency: float,
                                dataset: RoutingDataset,
                                lam: float = WASPAS_LAMBDA,
                                eta: float = GNN_ETA,
                                iterations: int = GNN_ITERATIONS,
                                fusion_weights=FUSION_WEIGHTS) -> RoutingResult:
    available = [s for s in dataset.specialists if s.availability > 0]
    if not available:
        logger.warning("No available specialists for patient %s", patient_id)
        return RoutingResult(patient_id=patient_id)

    ids, waspas = calculate_waspas(available, lam)

    availability = [s.availability / 100 for s in available]
    gnn = adjust_scores(waspas, availability, dataset.subset_adjacency(ids), eta, iterations)

    similarity = [cosine_similarity(symptom_vector, dataset.symptom_vectors[sid]) for sid in ids]

    ranked_ids, final = aggregate_ranks(ids, waspas, gnn, similarity, fusion_weights)

    path = DecisionPath(
        waspas_scores=dict(zip(ids, waspas)),
        gnn_scores=dict(zip(ids, gnn)),
        similarity_scores=dict(zip(ids, similarity)),
        final_scores=dict(zip(ranked_ids, final)),
    )

    by_id = {s.id: s for s in available}
    recommendations = []
    for rank, (sid, score) in enumerate(zip(ranked_ids, final), 1):
        s = by_id[sid]
        recommendations.append(Recommendation(
            specialist_id=s.id,
            specialist_name=s.label,
            specialty=s.specialization,
            confidence=score,
            estimated_wait_minutes=estimate_wait_minutes(s),
            required_resources=required_resources(s.specialization, severity, urgency),
            rank=rank,
        ))

    logger.info("Patient %s → %s (confidence %.3f, %d candidates)",
                patient_id, recommendations[0].specialist_id,
                recommendations[0].confidence, len(recommendations))
    return RoutingResult(patient_id, recommendations, path)


def route_patient(patient: Patient, dataset: RoutingDataset, **kwargs) -> RoutingResult:
    return enhanced_specialist_routing(
        patient.id, patient_symptom_vector(patient),
        patient.severity, patient.urgency, dataset, **kwargs)


def route_patients(patients: list[Patient], dataset: RoutingDataset, **kwargs) -> dict:
    """
    Route a batch of patients.

    Returns {"results": {patient_id: RoutingResult},
             "assignments": {specialist_label: count of top recommendations}}
    """
    results = {}
    assignments = Counter()
    labels = {s.id: s.label for s in dataset.specialists}
    for patient in patients:
        result = route_patient(patient, dataset, **kwargs)
        results[patient.id] = result
        if result.top is not None:
            assignments[labels[result.top.specialist_id]] += 1
    return {"results": results, "assignments": dict(assignments)}
