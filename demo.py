"""
MCDA Triage & Routing — Demo

Runs the complete pipeline over the reference data in a single process:
  - Triage of the sample patients (weights → TOPSIS + PROMETHEE + fuzzy)
  - Specialist routing for every triaged patient
  - Live validation and load balancing for the top-priority patient

Run:  python demo.py            (DEMO_JSON=1 prints the full JSON report)
"""

import json
import logging
import os

from config import LOG_LEVEL
from intake_layer.records import LiveStatus
from routing_layer.balancer import apply_load_balancing, validate_recommendations
from routing_layer.reference_data import default_dataset, sample_patients
from routing_layer.router import route_patients
from triage_center.triage import run_triage

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [TRIAGE] %(levelname)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

# Example live feed from the scheduling system
DEMO_LIVE_STATUS = {
    "CARD_01": LiveStatus(available=True,  current_load=40),
    "NEUR_02": LiveStatus(available=True,  current_load=10),
    "TRMA_03": LiveStatus(available=False, current_load=95),
    "GENM_04": LiveStatus(available=True,  current_load=100),
    "EMER_05": LiveStatus(available=True,  current_load=60),
}


def run_demo() -> dict:
    patients = sample_patients()
    dataset = default_dataset()

    report = run_triage(patients)
    for r in report.results:
        logger.info("%2d. %s  TOPSIS=%.3f  PROMETHEE=%+.3f  %-8s  %s",
                    r.rank, r.patient.id, r.topsis_score, r.promethee_score,
                    r.priority, r.fuzzy_label)

    ordered = [r.patient for r in report.results]
    routing = route_patients(ordered, dataset)
    logger.info("Top-recommendation assignments: %s", routing["assignments"])

    first = ordered[0]
    recs = routing["results"][first.id].recommendations
    live = apply_load_balancing(validate_recommendations(recs, DEMO_LIVE_STATUS),
                                DEMO_LIVE_STATUS)
    for rec in live:
        logger.info("%s live option %d: %s (confidence %.3f, ~%d min)",
                    first.id, rec.rank, rec.specialist_id, rec.confidence,
                    rec.estimated_wait_minutes)

    return {
        "triage":      report.to_dict(),
        "routing":     {pid: res.to_dict() for pid, res in routing["results"].items()},
        "assignments": routing["assignments"],
        "live_routing": {first.id: [rec.to_dict() for rec in live]},
    }


if __name__ == "__main__":
    result = run_demo()
    if os.getenv("DEMO_JSON", "").lower() in ("1", "true", "yes"):
        print(json.dumps(result, indent=2))
