from flask import Blueprint

blueprint = Blueprint("legacy", __name__)

from . import routes  # noqa: E402,F401
