"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from hello_world.app.api.routes import ping_bp
from hello_world.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance.

    CORS is only wired when ``settings.cors_origins`` lists at least one
    origin; otherwise responses carry Flask's default headers alone.
    """
    if settings is None:
        settings = get_settings()

    app = Flask(__name__)
    app.config["DEBUG"] = settings.debug

    if settings.cors_origins:
        CORS(app, resources={r"/ping": {"origins": settings.cors_origins}})
        logger.debug("CORS enabled for origins: %s", settings.cors_origins)

    app.register_blueprint(ping_bp, url_prefix="/")
    logger.debug("Registered blueprints: %s", list(app.blueprints))
    return app
