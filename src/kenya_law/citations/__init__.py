"""Query-time citation tools for Kenyan statutes."""

from kenya_law.citations.formatter import (
    CITATION_FORMATS,
    FormatCitationResult,
    format_citation,
)

from kenya_law.citations.models import (
    ResolveResult,
    ResponseMetadata,
    ValidationResult,
)

from kenya_law.citations.resolver import resolve_document_id

from kenya_law.citations.validator import (
    STATUS_WARNINGS,
    validate_citation,
)

__all__ = [
    # Formatting
    "CITATION_FORMATS",
    "FormatCitationResult",
    "format_citation",
    # Results
    "ResolveResult",
    "ResponseMetadata",
    "ValidationResult",
    # Store-backed tools
    "resolve_document_id",
    "STATUS_WARNINGS",
    "validate_citation",
]
