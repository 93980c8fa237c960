"""SQLAlchemy models for readings, disease-risk predictions and alerts."""

from __future__ import annotations

from watermonitor.db import db, now_ms
from watermonitor.parameters import PARAMETER_NAMES, ReadingParameters
from watermonitor.risk_engine import DISEASES, RiskPrediction


class Reading(db.Model):
    __tablename__ = "readings"
    id = db.Column(db.Integer, primary_key=True)
    timestamp = db.Column(db.BigInteger, nullable=False, default=now_ms, index=True)
    location = db.Column(db.String, nullable=False)
    ph = db.Column(db.Float, nullable=False)
    turbidity = db.Column(db.Float, nullable=False)
    temperature = db.Column(db.Float, nullable=False)
    dissolved_oxygen = db.Column(db.Float, nullable=False)
    total_coliform = db.Column(db.Float, nullable=False)
    ecoli = db.Column(db.Float, nullable=False)
    chlorine = db.Column(db.Float, nullable=False)

    def parameters(self) -> ReadingParameters:
        return ReadingParameters(**{name: getattr(self, name) for name in PARAMETER_NAMES})

    def to_dict(self):
        payload = {"id": self.id, "timestamp": self.timestamp, "location": self.location}
        payload.update(self.parameters().as_dict())
        return payload


class DiseaseRiskPrediction(db.Model):
    __tablename__ = "disease_risk_predictions"
    id = db.Column(db.Integer, primary_key=True)
    timestamp = db.Column(db.BigInteger, nullable=False, default=now_ms, index=True)
    cholera_risk_level = db.Column(db.String, nullable=False)
    cholera_probability = db.Column(db.Float, nullable=False)
    cholera_confidence = db.Column(db.Float, nullable=False)
    typhoid_risk_level = db.Column(db.String, nullable=False)
    typhoid_probability = db.Column(db.Float, nullable=False)
    typhoid_confidence = db.Column(db.Float, nullable=False)
    hepatitis_a_risk_level = db.Column(db.String, nullable=False)
    hepatitis_a_probability = db.Column(db.Float, nullable=False)
    hepatitis_a_confidence = db.Column(db.Float, nullable=False)
    diarrhea_risk_level = db.Column(db.String, nullable=False)
    diarrhea_probability = db.Column(db.Float, nullable=False)
    diarrhea_confidence = db.Column(db.Float, nullable=False)
    overall_risk = db.Column(db.String, nullable=False)  # low | medium | high

    @classmethod
    def from_prediction(cls, prediction: RiskPrediction, timestamp: int) -> "DiseaseRiskPrediction":
        columns = {"timestamp": timestamp, "overall_risk": prediction.overall_risk}
        for name, risk in prediction.diseases().items():
            columns[f"{name}_risk_level"] = risk.risk_level
            columns[f"{name}_probability"] = risk.probability
            columns[f"{name}_confidence"] = risk.confidence
        return cls(**columns)

    def to_dict(self):
        payload = {"id": self.id, "timestamp": self.timestamp, "overall_risk": self.overall_risk}
        for name in DISEASES:
            payload[name] = {
                "risk_level": getattr(self, f"{name}_risk_level"),
                "probability": getattr(self, f"{name}_probability"),
                "confidence": getattr(self, f"{name}_confidence"),
            }
        return payload


class Alert(db.Model):
    __tablename__ = "alerts"
    id = db.Column(db.Integer, primary_key=True)
    timestamp = db.Column(db.BigInteger, nullable=False, default=now_ms, index=True)
    type = db.Column(db.String, nullable=False)  # water_quality | disease_risk
    severity = db.Column(db.String, nullable=False)  # warning | critical
    message = db.Column(db.String, nullable=False)
    parameter = db.Column(db.String, nullable=True)
    value = db.Column(db.Float, nullable=True)
    threshold = db.Column(db.Float, nullable=True)
    acknowledged = db.Column(db.Boolean, nullable=False, default=False, index=True)

    def to_dict(self):
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "type": self.type,
            "severity": self.severity,
            "message": self.message,
            "parameter": self.parameter,
            "value": self.value,
            "threshold": self.threshold,
            "acknowledged": self.acknowledged,
        }
