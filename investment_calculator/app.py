"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS
from loguru import logger

from investment_calculator.api.pages import pages_bp
from investment_calculator.api.routes import api_bp
from investment_calculator.config import Settings
from investment_calculator.logging_setup import configure_logging


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(pages_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    logger.debug(f"App created (default currency {settings.default_currency}, CORS {settings.cors_origins})")
    return app
