from flask import jsonify

from . import blueprint
from ...services.dashboard import get_metadata


@blueprint.route("/")
def metadata():
    """Document metadata, region catalog and disease catalog."""
    return jsonify(get_metadata())
