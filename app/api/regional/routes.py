from flask import jsonify

from . import blueprint
from ...services.dashboard import get_bogor_view, get_cirebon_view, get_jatim_view


@blueprint.route("/cirebon")
def cirebon():
    """Animal outbreak trend and subdistrict totals for Cirebon."""
    return jsonify(get_cirebon_view())


@blueprint.route("/bogor")
def bogor():
    """Other-outbreak trend and non-zero subdistrict totals for Bogor."""
    return jsonify(get_bogor_view())


@blueprint.route("/jatim")
def jatim():
    """East Java hospital surveillance trends, comparison and insights."""
    return jsonify(get_jatim_view())
