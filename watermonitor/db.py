"""Database setup and initialization helpers."""

from __future__ import annotations

import time

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def now_ms() -> int:
    """Current wall-clock time as epoch milliseconds."""
    return int(time.time() * 1000)


def init_db():
    """Create tables for readings, risk predictions and alerts."""
    from watermonitor import models  # noqa: F401, WPS433

    db.create_all()
