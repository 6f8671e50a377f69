from flask import abort, jsonify, request

from . import blueprint
from ...extensions import get_data_loader
from ...services.legacy import (
    OUTBREAK_DECODERS,
    get_legacy_jakarta_regions,
    get_legacy_jakarta_summary,
    get_legacy_jatim_diseases,
    get_legacy_jatim_monthly,
    get_legacy_yearly,
)


@blueprint.route("/jakarta/<year>/regions")
def jakarta_regions(year: str):
    """Per-region totals from a legacy Jakarta year file."""
    if year not in get_data_loader().legacy_years:
        abort(404)
    disease = request.args.get("disease", "difteri")
    return jsonify({"data": get_legacy_jakarta_regions(year, disease)})


@blueprint.route("/jakarta/summary")
def jakarta_summary():
    """Legacy diphtheria totals for 2022 vs 2023."""
    return jsonify(get_legacy_jakarta_summary())


@blueprint.route("/<dataset>/yearly")
def yearly(dataset: str):
    """Yearly totals from the Cirebon or Bogor CSV export."""
    if dataset not in OUTBREAK_DECODERS:
        abort(404)
    return jsonify({"data": get_legacy_yearly(dataset)})


@blueprint.route("/jatim/monthly")
def jatim_monthly():
    """Monthly totals of one East Java disease (substring match)."""
    disease = request.args.get("disease")
    if not disease:
        abort(400, description="disease query parameter is required")
    return jsonify({"data": get_legacy_jatim_monthly(disease)})


@blueprint.route("/jatim/diseases")
def jatim_diseases():
    """Distinct disease names in the East Java CSV export."""
    return jsonify({"data": get_legacy_jatim_diseases()})
