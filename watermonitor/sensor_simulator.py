"""
Synthetic water-quality sensor for demos and tests.
Generates plausible readings with occasional contamination, or replays a CSV dataset.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import numpy as np
import pandas as pd

from watermonitor.parameters import PARAMETER_NAMES


@dataclass
class WaterSensorSimulator:
    location: str
    seed: Optional[int] = None
    dataset: Optional[pd.DataFrame] = None
    dataset_index: int = 0
    rng: np.random.Generator = field(init=False)

    def __post_init__(self):
        self.rng = np.random.default_rng(self.seed)

    def load_csv_dataset(self, csv_path: Path) -> None:
        """Load dataset from CSV. One column per monitored parameter is required."""
        self.set_dataset(pd.read_csv(csv_path))

    def set_dataset(self, df: pd.DataFrame) -> None:
        missing = set(PARAMETER_NAMES) - set(df.columns)
        if missing:
            raise ValueError(f"Dataset missing columns: {sorted(missing)}")
        self.dataset = df.reset_index(drop=True)
        self.dataset_index = 0

    def _sample_from_dataset(self) -> Dict[str, float]:
        """Replay the recorded parameter set at the cursor, wrapping to row 0 after the last one."""
        row = self.dataset.iloc[self.dataset_index]
        self.dataset_index = (self.dataset_index + 1) % len(self.dataset)
        return {name: float(row[name]) for name in PARAMETER_NAMES}

    def _generate_random_reading(self) -> Dict[str, float]:
        u = self.rng.random
        # Coliform is absent 80% of the time, E. coli 90%.
        total_coliform = 0.0 if u() < 0.8 else float(np.floor(u() * 50))
        ecoli = 0.0 if u() < 0.9 else float(np.floor(u() * 10))
        return {
            "ph": 7.2 + (u() - 0.5) * 2,
            "turbidity": 2 + u() * 8,
            "temperature": 20 + u() * 10,
            "dissolved_oxygen": 6 + u() * 4,
            "total_coliform": total_coliform,
            "ecoli": ecoli,
            "chlorine": 0.5 + u() * 2,
        }

    def get_parameters(self) -> Dict[str, float]:
        """Next parameter set (dataset-driven if present else random)."""
        if self.dataset is not None and len(self.dataset) > 0:
            return self._sample_from_dataset()
        return self._generate_random_reading()
