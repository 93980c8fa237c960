"""Error types surfaced by the monitoring operations."""

from __future__ import annotations


class WaterMonitorError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(WaterMonitorError):
    status_code = 404


class ValidationError(WaterMonitorError):
    status_code = 400
