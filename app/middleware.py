"""
Middleware installers for Flask.

- Request ID injection
- Request timing log line
"""

from __future__ import annotations
import logging
import time
import uuid

from flask import Flask, g, request

logger = logging.getLogger("Interactions")


def install_request_id(app: Flask) -> None:
    @app.before_request
    def _req_id():
        g.request_id = request.headers.get("X-Request-ID") or f"req_{uuid.uuid4().hex[:12]}"

    @app.after_request
    def _stamp(response):
        response.headers["X-Request-ID"] = g.get("request_id", "-")
        return response


def install_timing_log(app: Flask) -> None:
    @app.before_request
    def _start_timer():
        g._t0 = time.time()

    @app.after_request
    def _stop_timer(response):
        t0 = getattr(g, "_t0", None)
        if t0 is not None:
            dt = int((time.time() - t0) * 1000)
            logger.info("%s %s -> %s in %dms", request.method, request.path, response.status_code, dt)
        return response
