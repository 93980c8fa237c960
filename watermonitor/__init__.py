"""Flask application factory for Water Quality & Disease Risk Monitoring."""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError

import config
from watermonitor.db import db, init_db
from watermonitor.dispatcher import EvaluationQueue
from watermonitor.errors import WaterMonitorError
from watermonitor.processing import evaluate_reading
from watermonitor.risk_engine import RiskEngine
from watermonitor.routes_alerts import alerts_bp
from watermonitor.routes_readings import readings_bp
from watermonitor.sensor_simulator import WaterSensorSimulator

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask):
    @app.errorhandler(WaterMonitorError)
    def handle_domain_error(err):
        return jsonify({"error": err.message}), err.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_storage_error(err):
        db.session.rollback()
        logger.exception("Storage failure")
        return jsonify({"error": "storage failure"}), 500


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(config)
    if overrides:
        app.config.update(overrides)
    db.init_app(app)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    with app.app_context():
        init_db()

    app.extensions["risk_engine"] = RiskEngine(seed=app.config["CONFIDENCE_SEED"])
    app.extensions["sensor_simulator"] = WaterSensorSimulator(
        location=app.config["DEFAULT_LOCATION"], seed=app.config["SIMULATOR_SEED"]
    )
    EvaluationQueue(app, handler=evaluate_reading)

    app.register_blueprint(readings_bp)
    app.register_blueprint(alerts_bp)
    _register_error_handlers(app)

    @app.route("/healthz")
    def healthz():
        return {"status": "ok"}

    return app
