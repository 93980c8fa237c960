"""
Reading ingestion and evaluation.

submit_reading persists a reading and hands it to the evaluation queue.
evaluate_reading runs the alert rules and the risk engine, then writes the
alerts, the prediction and, on high overall risk, the outbreak alert in
that order. There is no rollback across those writes.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from flask import current_app

from watermonitor.alerts import create_alert, generate_alerts, outbreak_alert
from watermonitor.db import db, now_ms
from watermonitor.dispatcher import get_queue
from watermonitor.errors import ValidationError
from watermonitor.models import DiseaseRiskPrediction, Reading
from watermonitor.parameters import ReadingParameters
from watermonitor.risk_engine import RiskEngine
from watermonitor.thresholds import GOOD, classify_reading

logger = logging.getLogger(__name__)


def get_engine() -> RiskEngine:
    return current_app.extensions["risk_engine"]


def submit_reading(payload: Mapping, location: Optional[str] = None) -> int:
    """Validate, persist and schedule evaluation. Returns the new reading id."""
    params = ReadingParameters.from_mapping(payload)
    if location is None:
        location = current_app.config["DEFAULT_LOCATION"]
    if not isinstance(location, str) or not location.strip():
        raise ValidationError("location must be a non-empty string")

    reading = Reading(timestamp=now_ms(), location=location, **params.as_dict())
    db.session.add(reading)
    db.session.commit()
    logger.info("Reading %s stored for %s", reading.id, location)

    get_queue().submit(reading.id)
    return reading.id


def simulate_reading() -> int:
    """Submit one synthetic reading from the configured sensor simulator."""
    simulator = current_app.extensions["sensor_simulator"]
    return submit_reading(simulator.get_parameters(), location=simulator.location)


def evaluate_reading(reading_id: int) -> None:
    reading = db.session.get(Reading, reading_id)
    if reading is None:
        logger.info("Reading %s no longer exists, skipping evaluation", reading_id)
        return

    params = reading.parameters()
    flagged = sorted(name for name, level in classify_reading(params.as_dict()).items() if level != GOOD)
    drafts = generate_alerts(params)
    prediction = get_engine().score(params)
    processed_at = now_ms()

    for draft in drafts:
        create_alert(draft, processed_at)

    db.session.add(DiseaseRiskPrediction.from_prediction(prediction, processed_at))
    db.session.commit()

    outbreak = outbreak_alert(prediction)
    if outbreak is not None:
        create_alert(outbreak, processed_at)
        drafts.append(outbreak)

    logger.info(
        "Reading %s evaluated: %d alert(s), overall risk %s, flagged %s",
        reading_id,
        len(drafts),
        prediction.overall_risk,
        ", ".join(flagged) or "none",
    )
