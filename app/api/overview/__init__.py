from flask import Blueprint

blueprint = Blueprint("overview", __name__)

from . import routes  # noqa: E402,F401
