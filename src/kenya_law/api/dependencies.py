import logging
from typing import Any, Dict, Optional

from flask import request, jsonify

from kenya_law import config
from kenya_law.api import state
from kenya_law.citations.metadata import generate_response_metadata
from kenya_law.store.database import StoreError, open_database

logger = logging.getLogger("api")


def load_store(path: Optional[str] = None):
    db_path = path or config.DB_PATH
    try:
        state.store = open_database(db_path)
        state.store_error = None
        logger.info(f"[api] Opened statute database at {db_path}")
    except StoreError as e:
        # Let the app start; tool routes answer 503 until a database is built
        state.store = None
        state.store_error = str(e)
        logger.warning(f"[api] {e}")


def require_api_key():
    if config.API_KEY:
        key = request.headers.get("X-API-Key", "")
        if key != config.API_KEY:
            return jsonify({"error": "Unauthorized"}), 401
    return None


def require_store():
    if state.store is None:
        detail = state.store_error or "Statute database not loaded. Run scripts/build_db.py."
        return jsonify({"error": "store_unavailable", "detail": detail}), 503
    return None


def tool_response(results: Any) -> Dict[str, Any]:
    payload = results.model_dump() if hasattr(results, 'model_dump') else results
    return {
        "results": payload,
        "_metadata": generate_response_metadata(state.store).model_dump(exclude_none=True),
    }
