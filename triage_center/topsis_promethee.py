"""
Triage Center — TOPSIS / PROMETHEE Patient Ranking

  TOPSIS     —  closeness of each patient to the ideal (most critical) profile
                versus the anti-ideal profile, on vector-normalised criteria

  PROMETHEE  —  pairwise outranking cross-check: logistic preference of every
                patient over every other, netted into a single flow

Both operate on bare positional arrays; callers keep the row → patient mapping.
"""

import logging
from typing import Optional

import numpy as np
from sklearn.preprocessing import MinMaxScaler

from config import EPS_DISTANCE, PROMETHEE_STEEPNESS
from triage_center.vector_math import as_matrix, as_weights, column_normalize

logger = logging.getLogger(__name__)


def _ranked(scores: np.ndarray, labels: Optional[list], extra: dict) -> list[dict]:
    if labels is None:
        labels = list(range(len(scores)))
    order = np.argsort(-scores, kind="stable")
    results = []
    for rank, idx in enumerate(order, 1):
        row = {"rank": rank, "label": labels[idx], "score": round(float(scores[idx]), 6)}
        for key, values in extra.items():
            row[key] = round(float(values[idx]), 6)
        results.append(row)
    return results


# ── TOPSIS ───────────────────────────────────────────────────────────────────

class TOPSIS:
    """
    Technique for Order of Preference by Similarity to Ideal Solution.

    Parameters
    ----------
    decision_matrix : array-like  shape (n_patients, n_criteria)
    weights         : array-like  shape (n_criteria,), re-normalised to sum 1
    benefit_criteria: list[bool]  True = higher is better (default: all True)
    """

    def __init__(self, decision_matrix, weights, benefit_criteria: Optional[list[bool]] = None):
        self.X = as_matrix(decision_matrix)
        n_c = self.X.shape[1]
        self.w = as_weights(weights, n_c)
        if benefit_criteria is None:
            benefit_criteria = [True] * n_c
        if len(benefit_criteria) != n_c:
            raise ValueError(
                f"benefit_criteria length {len(benefit_criteria)} does not match {n_c} criteria")
        self.benefit = np.asarray(benefit_criteria, dtype=bool)
        self._d_plus: Optional[np.ndarray] = None
        self._d_minus: Optional[np.ndarray] = None

    def scores(self) -> np.ndarray:
        V = column_normalize(self.X) * self.w

        col_max = V.max(axis=0)
        col_min = V.min(axis=0)
        ideal = np.where(self.benefit, col_max, col_min)
        anti_ideal = np.where(self.benefit, col_min, col_max)

        self._d_plus = np.sqrt(((V - ideal) ** 2).sum(axis=1))
        self._d_minus = np.sqrt(((V - anti_ideal) ** 2).sum(axis=1))
        return self._d_minus / (self._d_plus + self._d_minus + EPS_DISTANCE)

    def rank(self, labels: Optional[list] = None) -> dict:
        scores = self.scores()
        return {
            "method": "TOPSIS",
            "weights": [round(float(w), 6) for w in self.w],
            "rankings": _ranked(scores, labels, {"d_plus": self._d_plus,
                                                 "d_minus": self._d_minus}),
        }


# ── PROMETHEE ────────────────────────────────────────────────────────────────

class PROMETHEE:
    """
    PROMETHEE net outranking flow with a logistic preference function.

    Each criterion difference is scaled by that criterion's range (a constant
    criterion gets range 1) and mapped through 1 / (1 + e^(-k·d)), k = 5.
    """

    def __init__(self, decision_matrix, weights):
        self.X = as_matrix(decision_matrix)
        self.w = as_weights(weights, self.X.shape[1])
        self.m = self.X.shape[0]

    def preference_matrix(self) -> np.ndarray:
        """P[i][j] = weighted preference of row i over row j; diagonal is 0."""
        # MinMaxScaler treats a zero range as 1, so differences of scaled
        # values equal raw differences divided by the safe range.
        S = MinMaxScaler().fit_transform(self.X)
        diff = S[:, None, :] - S[None, :, :]
        pref = 1.0 / (1.0 + np.exp(-PROMETHEE_STEEPNESS * diff))
        P = pref @ self.w
        np.fill_diagonal(P, 0.0)
        return P

    def flows(self) -> dict:
        if self.m < 2:
            # No other alternative to outrank
            zero = np.zeros(self.m)
            return {"phi_plus": zero, "phi_minus": zero, "net": zero}
        P = self.preference_matrix()
        phi_plus = P.sum(axis=1) / (self.m - 1)
        phi_minus = P.sum(axis=0) / (self.m - 1)
        return {"phi_plus": phi_plus, "phi_minus": phi_minus, "net": phi_plus - phi_minus}

    def scores(self) -> np.ndarray:
        return self.flows()["net"]

    def rank(self, labels: Optional[list] = None) -> dict:
        flows = self.flows()
        return {
            "method": "PROMETHEE",
            "weights": [round(float(w), 6) for w in self.w],
            "rankings": _ranked(flows["net"], labels, {"phi_plus": flows["phi_plus"],
                                                       "phi_minus": flows["phi_minus"]}),
        }


# ── Convenience functions ────────────────────────────────────────────────────

def calculate_topsis(decision_matrix, weights,
                     benefit_criteria: Optional[list[bool]] = None) -> list[float]:
    scores = TOPSIS(decision_matrix, weights, benefit_criteria).scores()
    logger.debug("TOPSIS scores: %s", np.round(scores, 4).tolist())
    return [float(s) for s in scores]


def calculate_promethee(decision_matrix, weights) -> list[float]:
    scores = PROMETHEE(decision_matrix, weights).scores()
    logger.debug("PROMETHEE net flows: %s", np.round(scores, 4).tolist())
    return [float(s) for s in scores]
