"""
Background evaluation queue.
Readings are enqueued after they are committed; a single daemon worker
evaluates them inside an application context.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Callable, Optional

from flask import Flask, current_app

from watermonitor.db import db

logger = logging.getLogger(__name__)

_STOP = object()


class EvaluationQueue:
    def __init__(self, app: Flask, handler: Callable[[int], None]):
        self.app = app
        self.handler = handler
        self._queue: "queue.Queue" = queue.Queue()
        self._worker: Optional[threading.Thread] = None
        self._lock = threading.Lock()
        app.extensions["evaluation_queue"] = self

    def start(self) -> None:
        with self._lock:
            if self._worker is None or not self._worker.is_alive():
                self._worker = threading.Thread(target=self._worker_loop, name="evaluation-worker", daemon=True)
                self._worker.start()

    def submit(self, reading_id: int) -> None:
        """Fire-and-forget evaluation of a persisted reading."""
        if not self.app.config.get("EVALUATION_ASYNC", True):
            self._run(reading_id)
            return
        self.start()
        self._queue.put(reading_id)

    def join(self) -> None:
        """Block until every queued evaluation has finished."""
        self._queue.join()

    def stop(self) -> None:
        if self._worker is not None and self._worker.is_alive():
            self._queue.put(_STOP)
            self._worker.join()
        self._worker = None

    def _run(self, reading_id: int) -> None:
        # Errors cannot reach the submitter any more: log and drop.
        try:
            self.handler(reading_id)
        except Exception:
            db.session.rollback()
            logger.exception("Evaluation of reading %s failed", reading_id)

    def _worker_loop(self) -> None:
        while True:
            task = self._queue.get()
            try:
                if task is _STOP:
                    return
                with self.app.app_context():
                    self._run(task)
            finally:
                self._queue.task_done()


def get_queue() -> EvaluationQueue:
    return current_app.extensions["evaluation_queue"]
