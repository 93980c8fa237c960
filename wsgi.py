"""Entry point for `flask --app wsgi run`."""

from watermonitor import create_app

app = create_app()
