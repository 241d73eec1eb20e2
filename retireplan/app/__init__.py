"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from retireplan.app.api.routes import api_bp
from retireplan.app.config import DefaultConfig


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(DefaultConfig)
    app.config.from_prefixed_env("RETIREPLAN")
    if config:
        app.config.update(config)

    level = app.config["LOG_LEVEL"]
    app.logger.setLevel(level)
    logging.getLogger("retireplan").setLevel(level)

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
