"""
Global configuration for the Water Quality & Disease Risk Monitoring service.
Values can be overridden per app through create_app(overrides).
"""

import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DB_PATH = os.path.join(BASE_DIR, "watermonitor.db")
SQLALCHEMY_DATABASE_URI = os.environ.get("WATERMONITOR_DATABASE_URI", f"sqlite:///{DB_PATH}")
SQLALCHEMY_TRACK_MODIFICATIONS = False
SECRET_KEY = os.environ.get("WATERMONITOR_SECRET", "dev-secret-change-me")

# Site identifier stamped on readings that do not carry one
DEFAULT_LOCATION = "Village Reservoir"

# Recent readings window (hours) and hard cap on returned rows
RECENT_READINGS_HOURS = 24
RECENT_READINGS_LIMIT = 100

# Active alert pagination
DEFAULT_PAGE_SIZE = 10

# Number of calendar days covered by the trends overview
TREND_DAYS = 7

# Run evaluation on the background worker; False evaluates inline on submit
EVALUATION_ASYNC = True

# Seeds for the confidence annotation and the synthetic sensor (None = random)
CONFIDENCE_SEED = None
SIMULATOR_SEED = None
