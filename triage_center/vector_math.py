"""
Triage Center — Vector primitives shared by the ranking methods.
"""

import numpy as np
from sklearn.preprocessing import normalize

from config import EPS_DISTANCE


def as_matrix(matrix) -> np.ndarray:
    """Convert a decision matrix to a 2-D float array, rejecting ragged/empty input."""
    try:
        X = np.asarray(matrix, dtype=float)
    except ValueError as exc:
        raise ValueError(f"Decision matrix must be rectangular: {exc}") from exc
    if X.ndim != 2 or X.shape[0] == 0 or X.shape[1] == 0:
        raise ValueError(f"Decision matrix must be non-empty 2-D, got shape {X.shape}")
    if not np.all(np.isfinite(X)):
        raise ValueError("Decision matrix contains NaN or infinite values")
    return X


def as_weights(weights, n_criteria: int) -> np.ndarray:
    """Weights as a float vector re-normalised to sum 1 (sum 0 is left as-is)."""
    w = np.asarray(weights, dtype=float)
    if w.shape != (n_criteria,):
        raise ValueError(
            f"Weight vector length {w.size} does not match {n_criteria} criteria")
    if np.any(w < 0):
        raise ValueError("Weights must be non-negative")
    total = w.sum()
    return w / total if total > 0 else w


def vector_norm(v) -> float:
    return float(np.linalg.norm(np.asarray(v, dtype=float)))


def column_normalize(matrix) -> np.ndarray:
    """
    Divide each column by its Euclidean norm. All-zero columns stay zero
    (scikit-learn substitutes 1 for a zero norm).
    """
    return normalize(as_matrix(matrix), norm="l2", axis=0)


def column_min(matrix) -> np.ndarray:
    return as_matrix(matrix).min(axis=0)


def column_max(matrix) -> np.ndarray:
    return as_matrix(matrix).max(axis=0)


def cosine_similarity(a, b) -> float:
    """dot(a, b) / (|a|·|b| + eps); 0 for zero vectors, never NaN."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"Vectors must have equal length, got {a.size} and {b.size}")
    return float(a @ b / (np.linalg.norm(a) * np.linalg.norm(b) + EPS_DISTANCE))
