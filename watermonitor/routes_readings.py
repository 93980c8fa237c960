"""Reading ingestion, latest-state and trend endpoints."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from watermonitor.errors import ValidationError
from watermonitor.processing import simulate_reading, submit_reading
from watermonitor.queries import (
    get_daily_trends,
    get_latest_disease_risk,
    get_latest_reading_with_status,
    get_recent_readings,
)

readings_bp = Blueprint("readings", __name__)


def _number_arg(name: str, cast):
    raw = request.args.get(name)
    if raw is None:
        return None
    try:
        return cast(raw)
    except ValueError:
        raise ValidationError(f"{name} must be a number") from None


@readings_bp.route("/readings", methods=["POST"])
def create_reading():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("JSON object body required")
    reading_id = submit_reading(payload, location=payload.get("location"))
    return jsonify({"id": reading_id}), 201


@readings_bp.route("/readings/simulate", methods=["POST"])
def simulate():
    return jsonify({"id": simulate_reading()}), 201


@readings_bp.route("/readings/latest", methods=["GET"])
def latest_reading():
    reading = get_latest_reading_with_status()
    if reading is None:
        return jsonify({"error": "no data"}), 404
    return jsonify(reading)


@readings_bp.route("/readings/recent", methods=["GET"])
def recent_readings():
    readings = get_recent_readings(_number_arg("hours", float))
    return jsonify([r.to_dict() for r in readings])


@readings_bp.route("/readings/trends", methods=["GET"])
def trends():
    return jsonify(get_daily_trends(_number_arg("days", int)))


@readings_bp.route("/risk/latest", methods=["GET"])
def latest_risk():
    prediction = get_latest_disease_risk()
    if prediction is None:
        return jsonify({"error": "no data"}), 404
    return jsonify(prediction.to_dict())
