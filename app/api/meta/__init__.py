from flask import Blueprint

blueprint = Blueprint("meta", __name__)

from . import routes  # noqa: E402,F401
