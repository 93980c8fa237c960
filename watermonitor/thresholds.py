"""
Safe-range reference table and the per-parameter status classifier.
Bounds follow WHO drinking-water guidance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

GOOD = "good"
WARNING = "warning"
CRITICAL = "critical"

# Fraction of a lower bound below which a breach becomes critical
MIN_CRITICAL_FACTOR = 0.8
# Multiple of an upper bound above which a breach becomes critical
MAX_CRITICAL_FACTOR = 1.5


@dataclass(frozen=True)
class Bounds:
    min: Optional[float] = None
    max: Optional[float] = None


THRESHOLDS: Dict[str, Bounds] = {
    "ph": Bounds(min=6.5, max=8.5),
    "turbidity": Bounds(max=5),  # NTU
    "temperature": Bounds(min=15, max=25),  # Celsius
    "dissolved_oxygen": Bounds(min=5),  # mg/L
    "total_coliform": Bounds(max=0),  # CFU/100ml
    "ecoli": Bounds(max=0),  # CFU/100ml
    "chlorine": Bounds(min=0.2, max=5),  # mg/L
}


def classify(value: float, bounds: Bounds) -> str:
    """
    Classify a value against its bounds. Values equal to a bound are good.

    With max == 0 (coliform, E. coli) the critical limit is also 0, so any
    detection is critical and the warning tier never applies.
    """
    if bounds.min is not None and value < bounds.min:
        return CRITICAL if value < bounds.min * MIN_CRITICAL_FACTOR else WARNING
    if bounds.max is not None and value > bounds.max:
        return CRITICAL if value > bounds.max * MAX_CRITICAL_FACTOR else WARNING
    return GOOD


def classify_reading(values: Dict[str, float]) -> Dict[str, str]:
    """Status for every monitored parameter present in values."""
    return {name: classify(values[name], bounds) for name, bounds in THRESHOLDS.items() if name in values}
