"""Static content blueprint: every request is answered from the route table."""

import logging

from flask import Blueprint, Response, current_app, request

# Blueprint for static content routes
static_bp = Blueprint("static_bp", __name__)
logger = logging.getLogger(__name__)

# Every method is answered from the route table.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# --- Helper Functions ---


def _request_target() -> str:
    """Return the request target as received, query string included."""
    raw = request.environ.get("RAW_URI") or request.environ.get("REQUEST_URI")
    if raw:
        return raw
    target = request.path
    if request.query_string:
        target += "?" + request.query_string.decode("latin-1")
    return target


def _serve(target: str) -> Response:
    """Resolve a target through the route table and build the response."""
    resolution = current_app.route_table.resolve(target)
    logger.info("method: %s | url: %s | headers: %s", request.method, target, dict(request.headers))
    logger.info("Served %s | status=%d | type=%s | ip=%s", target, resolution.status, resolution.content_type, request.remote_addr)

    # content_type is written verbatim, no charset appended
    return Response(resolution.content, status=resolution.status, content_type=resolution.content_type)


# --- Routes ---


@static_bp.route("/", methods=ALL_METHODS)
@static_bp.route("/<path:subpath>", methods=ALL_METHODS)
def serve_static(subpath: str = "") -> Response:
    """Serve a preloaded resource, or the 404 page on any miss."""
    return _serve(_request_target())


@static_bp.app_errorhandler(404)
@static_bp.app_errorhandler(405)
def unroutable(_error: Exception) -> Response:
    """Requests the URL map rejects still get the route table's answer."""
    return _serve(_request_target())
