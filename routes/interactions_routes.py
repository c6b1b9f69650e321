# routes/interactions_routes.py
from __future__ import annotations

import logging

from flask import Blueprint, request, abort, jsonify

from routes import get_container
from service.security import verify_interaction_request

logger = logging.getLogger("Interactions")

bp = Blueprint("interactions", __name__)


@bp.post("/interactions")
def interactions():
    """
    Discord interactions webhook.

    Logic:
      * Verify X-Signature-Ed25519 over timestamp + raw body (401 on failure)
      * Parse JSON only after the signature checks out
      * Hand the event to the CommandRouter; it always returns one body
    """
    c = get_container()

    if not verify_interaction_request(request, c.verify_key):
        abort(401)

    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        logger.warning("interaction body is not a JSON object")
        abort(400)

    logger.debug("interaction type=%r", payload.get("type"))
    return jsonify(c.router.handle(payload))
