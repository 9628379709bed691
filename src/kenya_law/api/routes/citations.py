from flask import Blueprint, request, jsonify
from flasgger import swag_from
from pydantic import ValidationError

from kenya_law.api import state, dependencies, models
from kenya_law.api.extensions import limiter
from kenya_law.citations.formatter import format_citation
from kenya_law.citations.validator import validate_citation

citations_bp = Blueprint('citations', __name__)


def _json_body():
    raw = request.get_json(silent=True)
    return raw if isinstance(raw, dict) else None


@citations_bp.route("/api/citations/validate", methods=["POST"])
@limiter.limit("120/minute")
@swag_from({
    'tags': ['citations'],
    'consumes': ['application/json'],
    'parameters': [{
        'name': 'body', 'in': 'body', 'required': True,
        'schema': {'type': 'object', 'properties': {'citation': {'type': 'string'}}}
    }],
    'responses': {200: {'description': 'Validation verdict'}, 503: {'description': 'Database not loaded'}}
})
def validate():
    auth = dependencies.require_api_key()
    if auth:
        return auth
    raw = _json_body()
    if raw is None:
        return jsonify({"error": "invalid_body", "detail": "Body must be a JSON object"}), 400
    try:
        parsed = models.ValidateCitationRequest(**raw)
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors(include_url=False)}), 400
    unavailable = dependencies.require_store()
    if unavailable:
        return unavailable

    result = validate_citation(state.store, parsed.citation)
    state.record_tool_call('validate', result.valid)
    if state.CITATIONS_VALIDATED:
        state.CITATIONS_VALIDATED.labels('valid' if result.valid else 'invalid').inc()
    return jsonify(dependencies.tool_response(result))


@citations_bp.route("/api/citations/format", methods=["POST"])
@limiter.limit("120/minute")
@swag_from({
    'tags': ['citations'],
    'consumes': ['application/json'],
    'parameters': [{
        'name': 'body', 'in': 'body', 'required': True,
        'schema': {'type': 'object', 'properties': {
            'citation': {'type': 'string'},
            'format': {'type': 'string', 'enum': ['full', 'short', 'pinpoint']},
        }}
    }],
    'responses': {200: {'description': 'Formatted citation'}}
})
def format_():
    auth = dependencies.require_api_key()
    if auth:
        return auth
    raw = _json_body()
    if raw is None:
        return jsonify({"error": "invalid_body", "detail": "Body must be a JSON object"}), 400
    try:
        parsed = models.FormatCitationRequest(**raw)
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors(include_url=False)}), 400

    result = format_citation(parsed.citation, parsed.format or 'full')
    state.record_tool_call('format')
    return jsonify(dependencies.tool_response(result))
