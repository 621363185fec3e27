"""HTTP routes for the Flask API."""

from flask import Blueprint, Response

from hello_world.core.ping import get_ping_message

ping_bp = Blueprint("ping", __name__)

# The route accepts any common method; HEAD and OPTIONS come from Flask.
PING_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@ping_bp.route("/ping", methods=PING_METHODS)
def ping() -> Response:
    """Health-check endpoint returning a fixed plain-text body."""
    return Response(get_ping_message(), mimetype="text/plain")
