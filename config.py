import os


def _float_list(raw: str) -> list[float]:
    return [float(x) for x in raw.split(",") if x.strip()]


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Triage decision-matrix criteria (order is fixed: position implies polarity)
TRIAGE_CRITERIA = [
    "severity",
    "urgency",
    "resource_need",
    "waiting_impact",
    "age_vulnerability",
]

# Fallback weights used when the cohort is too small for variance weighting
DEFAULT_TRIAGE_WEIGHTS = [0.35, 0.30, 0.15, 0.15, 0.05]
MIN_ROWS_FOR_VARIANCE = 3

# Specialist criteria; workload is the only cost criterion
SPECIALIST_CRITERIA = [
    "expertise",
    "availability",
    "success_rate",
    "resource_access",
    "workload",
]
SPECIALIST_COST_CRITERIA = {"workload"}
WASPAS_WEIGHTS = [0.35, 0.20, 0.25, 0.15, 0.05]
WASPAS_LAMBDA = float(os.getenv("WASPAS_LAMBDA", 0.5))

# Collaboration diffusion
GNN_ETA = float(os.getenv("GNN_ETA", 0.2))
GNN_ITERATIONS = int(os.getenv("GNN_ITERATIONS", 2))

# Rank fusion: WASPAS, diffusion, similarity
FUSION_WEIGHTS = tuple(_float_list(os.getenv("FUSION_WEIGHTS", "0.5,0.3,0.2")))

PROMETHEE_STEEPNESS = 5.0

# Numeric guards
EPS_DISTANCE = 1e-12
EPS_PRODUCT = 1e-9

# TOPSIS score → priority (first match wins)
PRIORITY_THRESHOLDS = [
    (0.8, "Critical"),
    (0.6, "High"),
    (0.4, "Medium"),
]
PRIORITY_DEFAULT = "Low"

# Fuzzy urgency score → label (first match wins)
FUZZY_LABELS = [
    (0.8,  "Emergency/Immediate"),
    (0.6,  "Urgent"),
    (0.35, "Semi-Urgent"),
]
FUZZY_DEFAULT_LABEL = "Routine"

# Routing annotations
BASE_WAIT_MINUTES = float(os.getenv("BASE_WAIT_MINUTES", 30))
CRITICAL_SEVERITY = 80
IMMEDIATE_URGENCY = 80
PRIORITY_URGENCY = 60

SYMPTOM_VECTOR_DIM = 8
