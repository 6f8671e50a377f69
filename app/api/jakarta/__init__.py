from flask import Blueprint

blueprint = Blueprint("jakarta", __name__)

from . import routes  # noqa: E402,F401
