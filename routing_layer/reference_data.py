"""
Routing Layer — Routing Dataset

A RoutingDataset bundles the specialists, their symptom-space projections
and the collaboration adjacency matrix (rows/columns in specialist order).
The engine never reads module-level tables; callers build or load a
dataset and pass it in. default_dataset() returns a fresh reference copy
for demos and tests.
"""

from dataclasses import dataclass

import numpy as np

from config import SYMPTOM_VECTOR_DIM
from intake_layer.records import Patient, Specialist


@dataclass
class RoutingDataset:
    specialists: list[Specialist]
    symptom_vectors: dict
    adjacency: np.ndarray

    def __post_init__(self):
        ids = [s.id for s in self.specialists]
        if len(set(ids)) != len(ids):
            raise ValueError("Specialist ids must be unique")
        self.adjacency = np.asarray(self.adjacency, dtype=float)
        n = len(ids)
        if self.adjacency.shape != (n, n):
            raise ValueError(
                f"Adjacency matrix must be {n}x{n}, got {self.adjacency.shape}")
        for sid in ids:
            vec = self.symptom_vectors.get(sid)
            if vec is None:
                raise ValueError(f"No symptom vector for specialist {sid}")
            if len(vec) != SYMPTOM_VECTOR_DIM:
                raise ValueError(
                    f"Symptom vector for {sid} must have {SYMPTOM_VECTOR_DIM} dims, got {len(vec)}")

    def index_of(self, specialist_id: str) -> int:
        for i, s in enumerate(self.specialists):
            if s.id == specialist_id:
                return i
        raise KeyError(specialist_id)

    def subset_adjacency(self, specialist_ids: list[str]) -> np.ndarray:
        idx = [self.index_of(sid) for sid in specialist_ids]
        return self.adjacency[np.ix_(idx, idx)]


def default_specialists() -> list[Specialist]:
    return [
        Specialist("CARD_01", "Specialist_1", 92, 80, 88, 90, 6, "Cardiac"),
        Specialist("NEUR_02", "Specialist_2", 89, 70, 90, 75, 4, "Neurology"),
        Specialist("TRMA_03", "Specialist_3", 95, 65, 91, 85, 9, "Trauma"),
        Specialist("GENM_04", "Specialist_4", 80, 90, 82, 70, 3, "General Medicine"),
        Specialist("EMER_05", "Specialist_5", 88, 85, 87, 80, 5, "Emergency"),
    ]


def default_dataset() -> RoutingDataset:
    #                 cardiac neuro trauma metab  sev   urg  pain  age
    vectors = {
        "CARD_01": [1.0, 0.0, 0.0, 0.0, 0.95, 0.2,  0.2, 0.1],
        "NEUR_02": [0.0, 1.0, 0.0, 0.0, 0.2,  0.95, 0.2, 0.1],
        "TRMA_03": [0.0, 0.0, 1.0, 0.0, 0.3,  0.3,  0.9, 0.1],
        "GENM_04": [0.5, 0.5, 0.2, 0.2, 0.5,  0.5,  0.5, 0.4],
        "EMER_05": [0.7, 0.6, 0.5, 0.6, 0.9,  0.8,  0.6, 0.3],
    }
    adjacency = np.array([
        [1.0, 0.2, 0.6, 0.1, 0.3],
        [0.2, 1.0, 0.2, 0.1, 0.4],
        [0.6, 0.2, 1.0, 0.1, 0.3],
        [0.1, 0.1, 0.1, 1.0, 0.2],
        [0.3, 0.4, 0.3, 0.2, 1.0],
    ])
    return RoutingDataset(default_specialists(), vectors, adjacency)


def sample_patients() -> list[Patient]:
    rows = [
        # id,    age, temp, sev, urg, res, wait, pain, condition
        ("P001", 60, 39.0, 90, 85, 80, 90, 7, "Acute Myocardial Infarction"),
        ("P002",  8, 37.5, 80, 85, 70, 80, 6, "Severe Asthma Exacerbation"),
        ("P003", 72, 38.2, 85, 90, 85, 88, 6, "Displaced Hip Fracture"),
        ("P004", 25, 36.8, 30, 25, 20, 20, 2, "Deep Laceration"),
        ("P005", 55, 39.5, 90, 95, 90, 90, 3, "Acute Ischemic Stroke"),
        ("P006", 60, 38.8, 85, 80, 75, 85, 7, "Severe Pneumonia"),
        ("P007", 35, 37.2, 70, 75, 60, 65, 8, "Appendicitis"),
        ("P008", 50, 36.9, 60, 55, 50, 60, 5, "Fractured Arm"),
        ("P009", 28, 39.2, 40, 50, 20, 30, 7, "Migraine Attack"),
        ("P010", 65, 37.8, 85, 80, 90, 85, 5, "Chronic Heart Failure"),
    ]
    return [
        Patient(id=pid, age=age, temperature=temp, severity=sev, urgency=urg,
                resource_need=res, waiting_impact=wait, pain_level=pain, condition=cond)
        for pid, age, temp, sev, urg, res, wait, pain, cond in rows
    ]
