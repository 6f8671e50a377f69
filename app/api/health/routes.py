from flask import jsonify

from . import blueprint
from ...extensions import get_document_cache


@blueprint.route("/ping")
def ping():
    """Basic liveness probe."""
    return jsonify({"status": "ok"})


@blueprint.route("/ready")
def ready():
    """Report whether the unified document has been fetched yet."""
    return jsonify({"status": "ok", "document": get_document_cache().state})
