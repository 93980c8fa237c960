"""Active alert listing and acknowledgement endpoints."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from watermonitor.alerts import acknowledge_alert
from watermonitor.errors import ValidationError
from watermonitor.queries import get_active_alerts

alerts_bp = Blueprint("alerts", __name__)


def _int_arg(name: str, default=None):
    raw = request.args.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer") from None


@alerts_bp.route("/alerts", methods=["GET"])
def active_alerts():
    result = get_active_alerts(page=_int_arg("page", 1), page_size=_int_arg("page_size"))
    return jsonify(
        {
            "alerts": [a.to_dict() for a in result["alerts"]],
            "pagination": result["pagination"],
        }
    )


@alerts_bp.route("/alerts/<int:alert_id>/acknowledge", methods=["POST"])
def acknowledge(alert_id):
    acknowledge_alert(alert_id)
    return jsonify({"message": "acknowledged"})
