from flask import Blueprint, request, jsonify
from flasgger import swag_from
from pydantic import ValidationError

from kenya_law.api import state, dependencies, models
from kenya_law.api.extensions import limiter
from kenya_law.citations.models import ResolveResult
from kenya_law.citations.resolver import resolve_document_id

documents_bp = Blueprint('documents', __name__)


@documents_bp.route("/api/documents/resolve", methods=["POST"])
@limiter.limit("120/minute")
@swag_from({
    'tags': ['documents'],
    'consumes': ['application/json'],
    'parameters': [{
        'name': 'body', 'in': 'body', 'required': True,
        'schema': {'type': 'object', 'properties': {'reference': {'type': 'string'}}}
    }],
    'responses': {200: {'description': 'Resolved document id (null when not found)'}}
})
def resolve():
    auth = dependencies.require_api_key()
    if auth:
        return auth
    raw = request.get_json(silent=True)
    if not isinstance(raw, dict):
        return jsonify({"error": "invalid_body", "detail": "Body must be a JSON object"}), 400
    try:
        parsed = models.ResolveDocumentRequest(**raw)
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors(include_url=False)}), 400
    unavailable = dependencies.require_store()
    if unavailable:
        return unavailable

    doc_id = resolve_document_id(state.store, parsed.reference)
    state.record_tool_call('resolve', doc_id is not None)
    return jsonify(dependencies.tool_response(
        ResolveResult(reference=parsed.reference, document_id=doc_id, found=doc_id is not None)
    ))


@documents_bp.route("/api/documents/<document_id>/provisions", methods=["GET"])
@limiter.limit("60/minute")
def list_provisions(document_id: str):
    auth = dependencies.require_api_key()
    if auth:
        return auth
    unavailable = dependencies.require_store()
    if unavailable:
        return unavailable
    doc = state.store.get_document(document_id)
    if doc is None:
        return jsonify({"error": "not_found", "detail": f"Unknown document {document_id}"}), 404
    provisions = state.store.get_provisions(document_id)
    summary = [{k: p[k] for k in ('provision_ref', 'chapter', 'section', 'title')} for p in provisions]
    return jsonify(dependencies.tool_response({
        "document_id": document_id,
        "title": doc['title'],
        "status": doc['status'],
        "provisions": summary,
    }))
