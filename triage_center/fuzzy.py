"""
Triage Center — Fuzzy Urgency Labelling

Mamdani-style inference over three normalised signals (severity, urgency,
waiting impact), each in [0, 1]. Rule strengths use max for OR and min for
AND; the crisp urgency score is the strength-weighted mean of the rule
consequents.

Labels:
  Emergency/Immediate  — score >= 0.80
  Urgent               — score >= 0.60
  Semi-Urgent          — score >= 0.35
  Routine              — otherwise
"""

from config import EPS_DISTANCE, FUZZY_LABELS, FUZZY_DEFAULT_LABEL


# ── Membership functions ─────────────────────────────────────────────────────

def _clamp(x: float) -> float:
    return max(0.0, min(x, 1.0))


def low(x: float) -> float:
    return _clamp((0.5 - x) / 0.5)


def med(x: float) -> float:
    return _clamp(1.0 - abs(x - 0.5) / 0.25)


def high(x: float) -> float:
    return _clamp((x - 0.5) / 0.5)


def memberships(x: float) -> dict:
    return {"low": low(x), "med": med(x), "high": high(x)}


# ── Rule base ────────────────────────────────────────────────────────────────

# (consequent, [AND-clauses joined by OR]); each clause is (signal, term) pairs
FUZZY_RULES = [
    (0.95, [[("sev", "high")], [("urg", "high")], [("wait", "high")]]),
    (0.70, [[("sev", "med"), ("urg", "med")],
            [("sev", "high"), ("urg", "med")],
            [("sev", "med"), ("urg", "high")]]),
    (0.45, [[("sev", "med"), ("urg", "low")],
            [("sev", "low"), ("urg", "med")]]),
    (0.12, [[("sev", "low"), ("urg", "low"), ("wait", "low")]]),
]


def rule_strengths(severity: float, urgency: float, waiting: float) -> list[tuple[float, float]]:
    """Return (strength, consequent) for every rule."""
    degrees = {
        "sev":  memberships(severity),
        "urg":  memberships(urgency),
        "wait": memberships(waiting),
    }
    fired = []
    for consequent, clauses in FUZZY_RULES:
        strength = max(min(degrees[sig][term] for sig, term in clause) for clause in clauses)
        fired.append((strength, consequent))
    return fired


def fuzzy_score(severity: float, urgency: float, waiting: float) -> float:
    fired = rule_strengths(severity, urgency, waiting)
    num = sum(w * c for w, c in fired)
    den = sum(w for w, _ in fired) + EPS_DISTANCE
    return num / den


def label_for(score: float) -> str:
    for threshold, label in FUZZY_LABELS:
        if score >= threshold:
            return label
    return FUZZY_DEFAULT_LABEL


def fuzzy_urgency(severity: float, urgency: float, waiting: float) -> tuple[float, str]:
    score = fuzzy_score(severity, urgency, waiting)
    return score, label_for(score)


def fuzzy_label(severity: float, urgency: float, waiting: float) -> str:
    return fuzzy_urgency(severity, urgency, waiting)[1]
