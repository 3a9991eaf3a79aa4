"""
Intake Layer — Canonical Records

Typed records consumed by the triage and routing engines. Every record is
validated once, here at the boundary; the numeric code downstream assumes
well-formed values.
"""

import math
from dataclasses import dataclass, field, asdict
from typing import Optional


def _check_number(name: str, value, lo: Optional[float] = None,
                  hi: Optional[float] = None) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Invalid value for {name}: {value!r} (expected a number)")
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"Invalid value for {name}: {value}")
    if lo is not None and value < lo:
        raise ValueError(f"Out-of-range value for {name}: {value} (expected >= {lo})")
    if hi is not None and value > hi:
        raise ValueError(f"Out-of-range value for {name}: {value} (expected <= {hi})")
    return float(value)


def _check_id(name: str, value) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Missing required field: {name}")
    return value


@dataclass
class Patient:
    """
    A patient awaiting triage.

    severity, urgency, resource_need and waiting_impact are 0-100 scores;
    pain_level is 0-10. age_vulnerability is derived from age when omitted.
    """
    id: str
    age: float
    severity: float
    urgency: float
    resource_need: float
    waiting_impact: float
    pain_level: float = 0.0
    condition: str = ""
    temperature: Optional[float] = None
    age_vulnerability: Optional[float] = None

    def __post_init__(self):
        _check_id("id", self.id)
        self.age = _check_number("age", self.age, 0, 130)
        for name in ("severity", "urgency", "resource_need", "waiting_impact"):
            setattr(self, name, _check_number(name, getattr(self, name), 0, 100))
        self.pain_level = _check_number("pain_level", self.pain_level, 0, 10)
        if not isinstance(self.condition, str):
            raise ValueError(f"Invalid value for condition: {self.condition!r}")
        if self.temperature is not None:
            self.temperature = _check_number("temperature", self.temperature, 25, 45)
        if self.age_vulnerability is not None:
            self.age_vulnerability = _check_number(
                "age_vulnerability", self.age_vulnerability, 0, 100)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Specialist:
    """A routable specialist. workload is the only lower-is-better attribute."""
    id: str
    label: str
    expertise: float
    availability: float
    success_rate: float
    resource_access: float
    workload: float
    specialization: str

    def __post_init__(self):
        _check_id("id", self.id)
        if not isinstance(self.label, str):
            raise ValueError(f"Invalid value for label: {self.label!r}")
        self.expertise = _check_number("expertise", self.expertise, 0)
        self.availability = _check_number("availability", self.availability, 0, 100)
        self.success_rate = _check_number("success_rate", self.success_rate, 0)
        self.resource_access = _check_number("resource_access", self.resource_access, 0)
        self.workload = _check_number("workload", self.workload, 0)
        if not isinstance(self.specialization, str):
            raise ValueError(f"Invalid value for specialization: {self.specialization!r}")

    @property
    def attributes(self) -> list[float]:
        return [self.expertise, self.availability, self.success_rate,
                self.resource_access, self.workload]

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class LiveStatus:
    """Live availability reported by the scheduling system for one specialist."""
    available: bool
    current_load: float = field(default=0.0)

    def __post_init__(self):
        if not isinstance(self.available, bool):
            raise ValueError(f"Invalid value for available: {self.available!r}")
        self.current_load = _check_number("current_load", self.current_load, 0, 100)
