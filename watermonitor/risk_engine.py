"""
Deterministic additive disease-risk engine.
Each contamination indicator adds a fixed weight per disease; weights are
summed, capped at 1.0 and mapped to a low/medium/high level.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from watermonitor.parameters import ReadingParameters
from watermonitor.thresholds import THRESHOLDS

LOW = "low"
MEDIUM = "medium"
HIGH = "high"

DISEASES = ("cholera", "typhoid", "hepatitis_a", "diarrhea")

# condition -> per-disease contribution
CONTRIBUTIONS: Dict[str, Dict[str, float]] = {
    "ecoli": {"cholera": 0.4, "typhoid": 0.3, "diarrhea": 0.5},
    "total_coliform": {"cholera": 0.3, "typhoid": 0.4, "hepatitis_a": 0.2, "diarrhea": 0.3},
    "turbidity": {"cholera": 0.2, "diarrhea": 0.2},
    "ph": {"typhoid": 0.1, "hepatitis_a": 0.1},
    "chlorine": {"cholera": 0.2, "typhoid": 0.2, "hepatitis_a": 0.1, "diarrhea": 0.2},
}

CONFIDENCE_BASE = 0.75
CONFIDENCE_SPAN = 0.20


def risk_level(probability: float) -> str:
    if probability < 0.3:
        return LOW
    if probability < 0.7:
        return MEDIUM
    return HIGH


@dataclass(frozen=True)
class DiseaseRisk:
    risk_level: str
    probability: float
    confidence: float


@dataclass(frozen=True)
class RiskPrediction:
    cholera: DiseaseRisk
    typhoid: DiseaseRisk
    hepatitis_a: DiseaseRisk
    diarrhea: DiseaseRisk
    overall_risk: str

    def diseases(self) -> Dict[str, DiseaseRisk]:
        return {name: getattr(self, name) for name in DISEASES}


def triggered_conditions(params: ReadingParameters):
    """Names of the risk conditions a reading meets."""
    ph = THRESHOLDS["ph"]
    conditions = []
    if params.ecoli > 0:
        conditions.append("ecoli")
    if params.total_coliform > 0:
        conditions.append("total_coliform")
    if params.turbidity > THRESHOLDS["turbidity"].max:
        conditions.append("turbidity")
    if params.ph < ph.min or params.ph > ph.max:
        conditions.append("ph")
    if params.chlorine < THRESHOLDS["chlorine"].min:
        conditions.append("chlorine")
    return conditions


class RiskEngine:
    """
    Scores a reading into per-disease risk plus an overall level.

    Confidence is an annotation only: by default 0.75 + U[0, 0.20) from a
    seedable generator; pass confidence_fn for a fixed or reading-derived value.
    """

    def __init__(self, seed: Optional[int] = None, confidence_fn: Optional[Callable[[ReadingParameters], float]] = None):
        self._rng = random.Random(seed)
        self._confidence_fn = confidence_fn

    def _confidence(self, params: ReadingParameters) -> float:
        if self._confidence_fn is not None:
            return self._confidence_fn(params)
        return CONFIDENCE_BASE + self._rng.random() * CONFIDENCE_SPAN

    def probabilities(self, params: ReadingParameters) -> Dict[str, float]:
        totals = {name: 0.0 for name in DISEASES}
        for condition in triggered_conditions(params):
            for disease, weight in CONTRIBUTIONS[condition].items():
                totals[disease] += weight
        # Weights are tenths; rounding removes float drift at the level boundaries.
        return {name: min(round(total, 2), 1.0) for name, total in totals.items()}

    def score(self, params: ReadingParameters) -> RiskPrediction:
        probs = self.probabilities(params)
        risks = {
            name: DiseaseRisk(
                risk_level=risk_level(prob),
                probability=prob,
                confidence=self._confidence(params),
            )
            for name, prob in probs.items()
        }
        return RiskPrediction(overall_risk=risk_level(max(probs.values())), **risks)
