"""
Triage Center — Dynamic Criterion Weighting

Weights each triage criterion by how much it varies across the current
cohort: the population standard deviation of every column, normalised to
sum 1. Below MIN_ROWS_FOR_VARIANCE rows the spread is not meaningful and
the fixed default weights are returned instead.
"""

import logging

import numpy as np

from config import DEFAULT_TRIAGE_WEIGHTS, MIN_ROWS_FOR_VARIANCE
from triage_center.vector_math import as_matrix

logger = logging.getLogger(__name__)


def calculate_weights(decision_matrix) -> list[float]:
    X = as_matrix(decision_matrix)
    if X.shape[0] < MIN_ROWS_FOR_VARIANCE:
        logger.debug("Only %d rows, using default weights", X.shape[0])
        return list(DEFAULT_TRIAGE_WEIGHTS)

    spread = X.std(axis=0)          # ddof=0: population variance
    total = spread.sum()
    if total == 0:
        logger.warning("All criteria are constant across %d rows; weights are all zero",
                       X.shape[0])
        total = 1.0
    weights = spread / total
    logger.debug("Variance weights: %s", np.round(weights, 4).tolist())
    return [float(w) for w in weights]
