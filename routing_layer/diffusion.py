"""
Routing Layer — Collaboration Diffusion

Adjusts specialist scores with the availability of collaborating
specialists. The "GNN" is a fixed-iteration linear propagation over a
static adjacency matrix, not a trained model:

  influence_i = Σ_j A[i][j] · availability_j
  s_i ← (s_i + η · influence_i) / (1 + η · mean(A))

mean(A) is one scalar over every matrix entry, shared by all rows.
"""

import logging

import numpy as np

from config import GNN_ETA, GNN_ITERATIONS

logger = logging.getLogger(__name__)


def adjust_scores(base_scores, availability, adjacency,
                  eta: float = GNN_ETA, iterations: int = GNN_ITERATIONS) -> list[float]:
    scores = np.asarray(base_scores, dtype=float)
    avail = np.asarray(availability, dtype=float)
    A = np.asarray(adjacency, dtype=float)

    n = scores.shape[0]
    if avail.shape != (n,):
        raise ValueError(f"availability length {avail.size} does not match {n} scores")
    if A.shape != (n, n):
        raise ValueError(f"adjacency must be {n}x{n}, got {A.shape}")
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")
    if n == 0:
        return []

    influence = A @ avail
    rescale = 1.0 + eta * A.mean()
    for _ in range(iterations):
        scores = (scores + eta * influence) / rescale

    logger.debug("Diffused scores (η=%.2f, %d iterations): %s",
                 eta, iterations, np.round(scores, 4).tolist())
    return [float(s) for s in scores]
