"""Typed water-quality parameter set shared by the scoring components."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from numbers import Real
from typing import Dict, Mapping

from watermonitor.errors import ValidationError

PARAMETER_NAMES = (
    "ph",
    "turbidity",
    "temperature",
    "dissolved_oxygen",
    "total_coliform",
    "ecoli",
    "chlorine",
)


@dataclass(frozen=True)
class ReadingParameters:
    ph: float
    turbidity: float  # NTU
    temperature: float  # Celsius
    dissolved_oxygen: float  # mg/L
    total_coliform: float  # CFU/100ml
    ecoli: float  # CFU/100ml
    chlorine: float  # mg/L

    @classmethod
    def from_mapping(cls, payload: Mapping) -> "ReadingParameters":
        """Build from a loose mapping, rejecting missing, non-numeric or non-finite values."""
        missing = [name for name in PARAMETER_NAMES if name not in payload]
        if missing:
            raise ValidationError(f"missing fields: {', '.join(missing)}")
        values = {}
        for name in PARAMETER_NAMES:
            raw = payload[name]
            if isinstance(raw, bool) or not isinstance(raw, Real):
                raise ValidationError(f"{name} must be a number")
            try:
                value = float(raw)
            except OverflowError:
                raise ValidationError(f"{name} must be finite") from None
            if not math.isfinite(value):
                raise ValidationError(f"{name} must be finite")
            values[name] = value
        return cls(**values)

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)
