from flask import jsonify

from . import blueprint
from ...services.dashboard import get_overview, get_summary


@blueprint.route("/")
def overview():
    """Cards and chart series for the overview page."""
    return jsonify(get_overview())


@blueprint.route("/summary")
def summary():
    """Headline statistics (diphtheria change, outbreak totals, hotspots)."""
    return jsonify(get_summary())
