import logging

from flask import Flask, jsonify

from surveillance.common.data_access import DataLoader, FetchError, ParseError

from .api import register_blueprints
from .config import config_by_name
from .extensions import init_document_cache


def create_app(config_name: str | None = None, loader: DataLoader | None = None) -> Flask:
    """Application factory configuring the dataset cache and blueprints."""
    app = Flask(__name__, instance_relative_config=True)

    selected_name = config_name or app.config.get("ENV", "development")
    base_config = config_by_name["default"]
    app.config.from_object(base_config)

    if selected_name in config_by_name:
        app.config.from_object(config_by_name[selected_name])

    app.config.from_pyfile("config.py", silent=True)

    configure_logging(app)
    app.json.sort_keys = False

    init_document_cache(app, loader=loader)

    register_blueprints(app)

    setup_cors_headers(app)
    register_error_handlers(app)

    return app


def configure_logging(app: Flask) -> None:
    """Apply LOG_LEVEL to the app logger and the dataset library."""
    level = logging.getLevelName(str(app.config.get("LOG_LEVEL", "INFO")).upper())
    if not isinstance(level, int):
        level = logging.INFO
    app.logger.setLevel(level)
    logging.getLogger("surveillance").setLevel(level)


def setup_cors_headers(app: Flask) -> None:
    """Allow the static dashboard front end to call the API from another origin."""

    @app.after_request
    def apply_cors(response):
        response.headers.setdefault("Access-Control-Allow-Origin", "*")
        response.headers.setdefault("Access-Control-Allow-Headers", "Content-Type")
        response.headers.setdefault("Access-Control-Allow-Methods", "GET,OPTIONS")
        return response


def register_error_handlers(app: Flask) -> None:
    """Provide JSON responses for common errors."""

    @app.errorhandler(FetchError)
    def fetch_failed(error):
        app.logger.error("Gagal mengambil data dashboard: %s", error)
        return jsonify({"error": "Dataset could not be fetched", "detail": str(error)}), 502

    @app.errorhandler(ParseError)
    def parse_failed(error):
        app.logger.error("Data dashboard tidak valid: %s", error)
        return jsonify({"error": "Dataset could not be parsed", "detail": str(error)}), 502

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({"error": getattr(error, "description", "Bad request")}), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({"error": "Internal server error"}), 500
