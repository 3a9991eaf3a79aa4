"""
Routing Layer — WASPAS Specialist Scoring

Weighted Aggregated Sum Product Assessment over five specialist criteria:

  expertise | availability | success_rate | resource_access | workload (cost)

  Q = λ·WSM + (1 − λ)·WPM
"""

import logging

import numpy as np

from config import (
    EPS_PRODUCT, SPECIALIST_COST_CRITERIA, SPECIALIST_CRITERIA,
    WASPAS_LAMBDA, WASPAS_WEIGHTS,
)
from intake_layer.records import Specialist

logger = logging.getLogger(__name__)


def normalize_specialist_matrix(X: np.ndarray) -> np.ndarray:
    """Benefit columns: value / column max. Cost columns: column min / value."""
    N = np.empty_like(X)
    for j, name in enumerate(SPECIALIST_CRITERIA):
        col = X[:, j]
        if name in SPECIALIST_COST_CRITERIA:
            N[:, j] = col.min() / np.maximum(col, EPS_PRODUCT)
        else:
            col_max = col.max()
            N[:, j] = col / (col_max if col_max != 0 else 1.0)
    return N


def calculate_waspas(specialists: list[Specialist],
                     lam: float = WASPAS_LAMBDA) -> tuple[list[str], list[float]]:
    if not 0.0 <= lam <= 1.0:
        raise ValueError(f"lambda must be within [0, 1], got {lam}")
    ids = [s.id for s in specialists]
    if not specialists:
        return ids, []

    X = np.array([s.attributes for s in specialists], dtype=float)
    N = normalize_specialist_matrix(X)

    w = np.asarray(WASPAS_WEIGHTS, dtype=float)
    w = w / w.sum()

    wsm = N @ w
    wpm = np.prod(np.maximum(N, EPS_PRODUCT) ** w, axis=1)
    scores = lam * wsm + (1 - lam) * wpm

    logger.debug("WASPAS (λ=%.2f): %s", lam,
                 {i: round(float(s), 4) for i, s in zip(ids, scores)})
    return ids, [float(s) for s in scores]
