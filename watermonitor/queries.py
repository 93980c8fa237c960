"""Read-side views: latest state, time windows, active alerts and daily trends."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence

import pandas as pd
from flask import current_app

from watermonitor.db import now_ms
from watermonitor.errors import ValidationError
from watermonitor.models import Alert, DiseaseRiskPrediction, Reading
from watermonitor.thresholds import classify_reading

HOUR_MS = 3600 * 1000
DAY_MS = 24 * HOUR_MS


def get_latest_reading_with_status() -> Optional[Dict]:
    reading = Reading.query.order_by(Reading.timestamp.desc(), Reading.id.desc()).first()
    if reading is None:
        return None
    payload = reading.to_dict()
    payload["status"] = classify_reading(reading.parameters().as_dict())
    return payload


def get_recent_readings(hours_back: Optional[float] = None) -> List[Reading]:
    """Readings inside the window, newest first, capped at RECENT_READINGS_LIMIT."""
    if hours_back is None:
        hours_back = current_app.config["RECENT_READINGS_HOURS"]
    if hours_back <= 0:
        raise ValidationError("hours must be positive")
    cutoff = now_ms() - hours_back * HOUR_MS
    return (
        Reading.query.filter(Reading.timestamp >= cutoff)
        .order_by(Reading.timestamp.desc(), Reading.id.desc())
        .limit(current_app.config["RECENT_READINGS_LIMIT"])
        .all()
    )


def get_latest_disease_risk() -> Optional[DiseaseRiskPrediction]:
    return DiseaseRiskPrediction.query.order_by(
        DiseaseRiskPrediction.timestamp.desc(), DiseaseRiskPrediction.id.desc()
    ).first()


def get_active_alerts(page: int = 1, page_size: Optional[int] = None) -> Dict:
    """
    Unacknowledged alerts, newest first, sliced to one page.
    Pages past the end return no alerts with valid pagination metadata.
    """
    if page_size is None:
        page_size = current_app.config["DEFAULT_PAGE_SIZE"]
    if page < 1:
        raise ValidationError("page must be >= 1")
    if page_size < 1:
        raise ValidationError("page_size must be >= 1")

    active = Alert.query.filter(Alert.acknowledged.is_(False))
    total_count = active.count()
    total_pages = math.ceil(total_count / page_size)
    alerts = (
        active.order_by(Alert.timestamp.desc(), Alert.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return {
        "alerts": alerts,
        "pagination": {
            "page": page,
            "page_size": page_size,
            "total_count": total_count,
            "total_pages": total_pages,
            "has_next": page < total_pages,
            "has_prev": page > 1,
        },
    }


def get_daily_trends(days: Optional[int] = None, parameters: Sequence[str] = ("ph", "turbidity")) -> Dict[str, List[Dict]]:
    """Per-day min/avg/max for each parameter over the last `days` days, oldest day first."""
    if days is None:
        days = current_app.config["TREND_DAYS"]
    if days < 1:
        raise ValidationError("days must be >= 1")
    cutoff = now_ms() - days * DAY_MS
    readings = Reading.query.filter(Reading.timestamp >= cutoff).all()
    if not readings:
        return {name: [] for name in parameters}

    df = pd.DataFrame([r.to_dict() for r in readings])
    df["day"] = pd.to_datetime(df["timestamp"], unit="ms", utc=True).dt.strftime("%Y-%m-%d")
    stats = df.groupby("day")[list(parameters)].agg(["min", "mean", "max"]).sort_index().tail(days)

    trends = {}
    for name in parameters:
        trends[name] = [
            {
                "day": day,
                "min": float(row[(name, "min")]),
                "avg": float(row[(name, "mean")]),
                "max": float(row[(name, "max")]),
            }
            for day, row in stats.iterrows()
        ]
    return trends
