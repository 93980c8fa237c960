"""
CLI entry-point for a quick offline run of the scoring pipeline, no server or database.
"""

from __future__ import annotations

import time

from watermonitor.alerts import generate_alerts, outbreak_alert
from watermonitor.parameters import ReadingParameters
from watermonitor.risk_engine import RiskEngine
from watermonitor.sensor_simulator import WaterSensorSimulator
from watermonitor.thresholds import classify_reading


def run_cli(location: str = "Village Reservoir", iterations: int = 20, interval: float = 1.0, seed=None) -> None:
    simulator = WaterSensorSimulator(location=location, seed=seed)
    engine = RiskEngine(seed=seed)

    for _ in range(iterations):
        params = ReadingParameters.from_mapping(simulator.get_parameters())
        status = classify_reading(params.as_dict())
        prediction = engine.score(params)
        alerts = generate_alerts(params)
        outbreak = outbreak_alert(prediction)
        if outbreak is not None:
            alerts.append(outbreak)
        flagged = [name for name, level in status.items() if level != "good"]
        print(
            f"{location} | pH {params.ph:.2f} | Turb {params.turbidity:.1f} NTU | "
            f"Coliform {params.total_coliform:.0f} | E. coli {params.ecoli:.0f} | "
            f"Cl {params.chlorine:.2f} | Flagged {','.join(flagged) or '-'} | "
            f"Alerts {len(alerts)} | Risk {prediction.overall_risk.upper()}"
        )
        time.sleep(interval)


if __name__ == "__main__":
    run_cli()
