from flask import abort, jsonify, request

from . import blueprint
from ...services.dashboard import get_jakarta_comparison, get_jakarta_districts, get_jakarta_view


def _parse_year() -> str | None:
    raw = request.args.get("year")
    if raw is None:
        return None
    if len(raw) != 4 or not raw.isdigit():
        abort(400, description="year must be a 4-digit year")
    return raw


@blueprint.route("/")
def jakarta():
    """Jakarta detail page payload for one year and disease."""
    data = get_jakarta_view(year=_parse_year(), disease=request.args.get("disease"))
    return jsonify(data)


@blueprint.route("/districts")
def districts():
    """Per-district table with every reported disease."""
    return jsonify({"data": get_jakarta_districts(year=_parse_year())})


@blueprint.route("/comparison")
def comparison():
    """Year-over-year totals for one disease."""
    return jsonify({"data": get_jakarta_comparison(disease=request.args.get("disease"))})
