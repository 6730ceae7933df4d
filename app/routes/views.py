"""
Plain-text routes outside the versioned API.

Routes:
    GET  /              - Liveness check returning a greeting
"""

from flask import Blueprint, Response

views_bp = Blueprint("views", __name__)


@views_bp.route("/")
def index() -> Response:
    """Respond with a plain-text greeting so callers can tell the server is up."""
    return Response("Hello World...", status=200, mimetype="text/plain")
