"""
Routing Layer — Rank Fusion

Scores from WASPAS, diffusion and similarity live on different scales, so
each is first replaced by its rank-like value (top → 1.0, bottom → 0.0)
and only then combined linearly.
"""

import numpy as np

from config import FUSION_WEIGHTS


def rank_like_scores(scores) -> tuple[list[float], list[int]]:
    """Return (scorelike, ranks). Equal scores keep their input order."""
    s = np.asarray(scores, dtype=float)
    n = s.shape[0]
    order = np.argsort(-s, kind="stable")
    ranks = np.empty(n, dtype=int)
    ranks[order] = np.arange(1, n + 1)
    if n > 1:
        scorelike = (n - ranks) / (n - 1)
    else:
        scorelike = np.ones(n)
    return [float(x) for x in scorelike], [int(r) for r in ranks]


def aggregate_ranks(ids: list[str], waspas_scores, gnn_scores, sim_scores,
                    weights=FUSION_WEIGHTS) -> tuple[list[str], list[float]]:
    n = len(ids)
    for name, arr in (("waspas_scores", waspas_scores), ("gnn_scores", gnn_scores),
                      ("sim_scores", sim_scores)):
        if len(arr) != n:
            raise ValueError(f"{name} length {len(arr)} does not match {n} ids")
    if len(weights) != 3:
        raise ValueError(f"Expected 3 fusion weights, got {len(weights)}")

    w_waspas, w_gnn, w_sim = weights
    fused = (w_waspas * np.asarray(rank_like_scores(waspas_scores)[0])
             + w_gnn * np.asarray(rank_like_scores(gnn_scores)[0])
             + w_sim * np.asarray(rank_like_scores(sim_scores)[0]))

    order = np.argsort(-fused, kind="stable")
    return [ids[i] for i in order], [float(fused[i]) for i in order]
