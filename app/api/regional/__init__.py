from flask import Blueprint

blueprint = Blueprint("regional", __name__)

from . import routes  # noqa: E402,F401
