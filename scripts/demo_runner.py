"""
Demo runner that feeds readings into the backend via HTTP.
Replays CSV scenarios when given, otherwise asks the server to simulate.
Assumes server running on localhost:5000.
"""
from __future__ import annotations

import sys
import time
from pathlib import Path

import pandas as pd
import requests

SERVER = "http://localhost:5000"
PARAMETERS = ["ph", "turbidity", "temperature", "dissolved_oxygen", "total_coliform", "ecoli", "chlorine"]


def send_csv(path: Path, interval: float = 1.0):
    df = pd.read_csv(path)
    start = time.time()
    for _, row in df.iterrows():
        payload = {name: float(row[name]) for name in PARAMETERS}
        if "location" in df.columns:
            payload["location"] = str(row["location"])
        r = requests.post(f"{SERVER}/readings", json=payload)
        r.raise_for_status()
        time.sleep(interval)
    print(f"Scenario {path.name} done in {time.time() - start:.1f}s")


def simulate(count: int = 10, interval: float = 1.0):
    for _ in range(count):
        requests.post(f"{SERVER}/readings/simulate").raise_for_status()
        time.sleep(interval)
    summary = requests.get(f"{SERVER}/alerts", params={"page_size": 5}).json()
    print(f"Active alerts: {summary['pagination']['total_count']}")
    for alert in summary["alerts"]:
        print(f"  [{alert['severity']}] {alert['message']}")


def main():
    scenarios = [Path(p) for p in sys.argv[1:]]
    if not scenarios:
        simulate()
        return
    for scenario in scenarios:
        send_csv(scenario)


if __name__ == "__main__":
    main()
