"""
Routing Layer — Live Validation and Load Balancing

Applied after ranking, against the live status reported for each
specialist ({specialist_id: LiveStatus}).
"""

import logging
from dataclasses import replace

from intake_layer.records import LiveStatus
from routing_layer.router import Recommendation, round_half_up

logger = logging.getLogger(__name__)

MAX_LOAD = 100


def validate_recommendations(recommendations: list[Recommendation],
                             live_status: dict[str, LiveStatus]) -> list[Recommendation]:
    """Keep only specialists that are live, available and not at full load."""
    kept = []
    for rec in recommendations:
        status = live_status.get(rec.specialist_id)
        if status and status.available and status.current_load < MAX_LOAD:
            kept.append(rec)
        else:
            logger.debug("Dropping %s: not available live", rec.specialist_id)
    return kept


def apply_load_balancing(recommendations: list[Recommendation],
                         live_status: dict[str, LiveStatus]) -> list[Recommendation]:
    """
    Scale confidence by spare capacity and stretch waits by current load,
    then re-rank by adjusted confidence.
    """
    adjusted = []
    for rec in recommendations:
        status = live_status.get(rec.specialist_id)
        if status is None:
            adjusted.append(rec)
            continue
        load = status.current_load
        adjusted.append(replace(
            rec,
            confidence=rec.confidence * (100 - load) / 100,
            estimated_wait_minutes=round_half_up(rec.estimated_wait_minutes * (1 + load / 50)),
        ))

    adjusted.sort(key=lambda r: r.confidence, reverse=True)
    return [replace(rec, rank=rank) for rank, rec in enumerate(adjusted, 1)]
