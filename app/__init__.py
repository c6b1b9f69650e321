"""
App factory: create_app()

- Loads config (env, secrets)
- Sets up logging
- Wires DI container (client, caches, builder, router)
- Registers middleware (request IDs, timing)
- Registers blueprints from routes/*
- Installs global error handlers
- Kicks off the one-shot command registration
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from flask import Flask, jsonify

from app.config import Settings, load_settings
from app.logging_setup import configure_logging
from app.container import Container
from app import middleware


def _register_blueprints(app: Flask) -> None:
    # Lazy imports to avoid circulars
    from routes.health_routes import bp as health_bp
    from routes.interactions_routes import bp as interactions_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(interactions_bp)


def _install_error_handlers(app: Flask) -> None:
    @app.errorhandler(400)
    def bad_request(err):
        app.logger.warning(f"400: {err}")
        return jsonify({"error": "bad_request"}), 400

    @app.errorhandler(401)
    def unauthorized(err):
        # Discord expects a bare 401 for unverifiable calls
        return "", 401

    @app.errorhandler(404)
    def not_found(err):
        return jsonify({"error": "not_found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(err):
        return jsonify({"error": "method_not_allowed"}), 405

    @app.errorhandler(500)
    def server_error(err):
        app.logger.exception("Unhandled server error")
        return jsonify({"error": "server_error"}), 500


def create_app(config_override: Dict[str, Any] | None = None, *, client: Optional[Any] = None) -> Flask:
    # Settings & logging
    settings: Settings = load_settings(config_override)
    configure_logging(settings)

    app = Flask(__name__, static_folder=None)
    app.config["SETTINGS"] = settings

    # Dependency container (client, caches, router)
    container = Container(settings, client=client)
    app.container = container  # type: ignore[attr-defined]

    # Middleware
    middleware.install_request_id(app)
    middleware.install_timing_log(app)

    # Blueprints
    _register_blueprints(app)

    # Error handlers
    _install_error_handlers(app)

    # Command registration runs once, off the request path
    if settings.REGISTER_COMMANDS:
        from connectors.discord import register_in_background
        register_in_background(settings)

    app.logger.info(f"App started APP_ID={settings.DISCORD_APP_ID or '-'}")
    return app
