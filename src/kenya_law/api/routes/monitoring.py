import platform
from flask import Blueprint, jsonify, Response

from kenya_law import config
from kenya_law.api import state

monitoring_bp = Blueprint('monitoring', __name__)


@monitoring_bp.route("/metrics", methods=["GET"])
def metrics():
    from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)


@monitoring_bp.route("/version", methods=["GET"])
def version():
    built_at = None
    documents = None
    if state.store is not None:
        built_at = state.store.get_metadata('built_at')
        documents = len(state.store.list_documents())
    return jsonify({
        "version": config.APP_VERSION,
        "env": config.APP_ENV,
        "python": platform.python_version(),
        "database": {"built_at": built_at, "documents": documents},
    })


@monitoring_bp.route("/api/version", methods=["GET"])
def api_version():
    return version()


@monitoring_bp.route("/api/health", methods=["GET"])
def health():
    if state.store is None:
        return jsonify({"status": "error", "detail": state.store_error or "database not loaded"}), 500
    try:
        state.store.get_metadata('built_at')
        return jsonify({"status": "ok"}), 200
    except Exception as e:
        return jsonify({"status": "error", "detail": str(e)}), 500


@monitoring_bp.route("/api/health/ready", methods=["GET"])
def health_ready():
    """Readiness probe - checks that the statute database is open."""
    checks = {
        'database_loaded': state.store is not None,
    }
    all_ready = all(checks.values())
    return jsonify({
        "ready": all_ready,
        "checks": checks
    }), 200 if all_ready else 503


@monitoring_bp.route("/api/health/live", methods=["GET"])
def health_live():
    """Liveness probe - minimal check that service is running."""
    return jsonify({"alive": True}), 200


@monitoring_bp.route("/api/stats/tools", methods=["GET"])
def tool_stats():
    """Return tool usage counters for monitoring."""
    return jsonify(dict(state.tool_stats))
