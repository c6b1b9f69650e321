from __future__ import annotations
from flask import Blueprint

bp = Blueprint("health", __name__)

_TEXT = {"Content-Type": "text/plain; charset=utf-8"}


@bp.get("/")
def root():
    return "Meow!", 200, _TEXT


@bp.get("/health")
def health():
    # lightweight liveness
    return "ok", 200, _TEXT
