"""Alert management: rule-based alert drafts, persistence and acknowledgement."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from watermonitor.db import db
from watermonitor.errors import NotFoundError
from watermonitor.models import Alert
from watermonitor.parameters import ReadingParameters
from watermonitor.risk_engine import HIGH, RiskPrediction
from watermonitor.thresholds import THRESHOLDS

logger = logging.getLogger(__name__)

WATER_QUALITY = "water_quality"
DISEASE_RISK = "disease_risk"

WARNING = "warning"
CRITICAL = "critical"


@dataclass(frozen=True)
class AlertDraft:
    type: str
    severity: str
    message: str
    parameter: Optional[str] = None
    value: Optional[float] = None
    threshold: Optional[float] = None


def generate_alerts(params: ReadingParameters) -> List[AlertDraft]:
    """
    Threshold-breach alerts for one reading, in fixed order:
    pH, turbidity, total coliform, E. coli. Rules are independent.
    """
    drafts = []

    ph = THRESHOLDS["ph"]
    if params.ph < ph.min or params.ph > ph.max:
        drafts.append(
            AlertDraft(
                type=WATER_QUALITY,
                severity=WARNING,
                message=f"pH level {params.ph:.2f} is outside safe range ({ph.min:g}-{ph.max:g})",
                parameter="ph",
                value=params.ph,
                threshold=ph.min if params.ph < ph.min else ph.max,
            )
        )

    turbidity_max = THRESHOLDS["turbidity"].max
    if params.turbidity > turbidity_max:
        drafts.append(
            AlertDraft(
                type=WATER_QUALITY,
                severity=WARNING,
                message=f"Turbidity level {params.turbidity:.2f} NTU exceeds safe limit ({turbidity_max:g} NTU)",
                parameter="turbidity",
                value=params.turbidity,
                threshold=turbidity_max,
            )
        )

    # Contamination indicators are critical on any detection.
    coliform_max = THRESHOLDS["total_coliform"].max
    if params.total_coliform > coliform_max:
        drafts.append(
            AlertDraft(
                type=WATER_QUALITY,
                severity=CRITICAL,
                message=(
                    f"Total coliform detected: {params.total_coliform:.2f} CFU/100ml "
                    f"(limit {coliform_max:g} CFU/100ml)"
                ),
                parameter="total_coliform",
                value=params.total_coliform,
                threshold=coliform_max,
            )
        )

    ecoli_max = THRESHOLDS["ecoli"].max
    if params.ecoli > ecoli_max:
        drafts.append(
            AlertDraft(
                type=WATER_QUALITY,
                severity=CRITICAL,
                message=f"E. coli detected: {params.ecoli:.2f} CFU/100ml (limit {ecoli_max:g} CFU/100ml)",
                parameter="ecoli",
                value=params.ecoli,
                threshold=ecoli_max,
            )
        )

    return drafts


def outbreak_alert(prediction: RiskPrediction) -> Optional[AlertDraft]:
    """Critical disease-risk alert when the overall risk is high."""
    if prediction.overall_risk != HIGH:
        return None
    return AlertDraft(
        type=DISEASE_RISK,
        severity=CRITICAL,
        message="High risk of water-borne disease outbreak detected",
    )


def create_alert(draft: AlertDraft, timestamp: int) -> Alert:
    alert = Alert(
        timestamp=timestamp,
        type=draft.type,
        severity=draft.severity,
        message=draft.message,
        parameter=draft.parameter,
        value=draft.value,
        threshold=draft.threshold,
        acknowledged=False,
    )
    db.session.add(alert)
    db.session.commit()
    return alert


def acknowledge_alert(alert_id: int) -> Alert:
    """Mark an alert acknowledged. Re-acknowledging is a no-op."""
    alert = db.session.get(Alert, alert_id)
    if alert is None:
        raise NotFoundError(f"alert {alert_id} not found")
    if not alert.acknowledged:
        alert.acknowledged = True
        db.session.commit()
        logger.info("Alert %s acknowledged", alert_id)
    return alert
