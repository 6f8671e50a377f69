from flask import Flask

from .health import blueprint as health_blueprint
from .jakarta import blueprint as jakarta_blueprint
from .legacy import blueprint as legacy_blueprint
from .meta import blueprint as meta_blueprint
from .overview import blueprint as overview_blueprint
from .regional import blueprint as regional_blueprint


def register_blueprints(app: Flask) -> None:
    """Wire all HTTP blueprints into the Flask app."""
    app.register_blueprint(health_blueprint, url_prefix="/health")
    app.register_blueprint(meta_blueprint, url_prefix="/meta")
    app.register_blueprint(overview_blueprint, url_prefix="/overview")
    app.register_blueprint(jakarta_blueprint, url_prefix="/jakarta")
    app.register_blueprint(regional_blueprint, url_prefix="/regional")
    app.register_blueprint(legacy_blueprint, url_prefix="/legacy")
