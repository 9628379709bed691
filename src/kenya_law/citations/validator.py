"""Validate a Kenyan statute citation against the store.

Supports:
  - "Section 25, Data Protection Act 2019"
  - "s 25, Data Protection Act 2019"
  - "Section 25 of the Data Protection Act 2019"
  - "Data Protection Act 2019, Section 25"
  - "Article 31, Constitution of Kenya 2010"
  - a bare Act title, short name or id

The result always comes back as a ValidationResult; problems are reported as
warnings on an invalid result rather than raised.
"""
from __future__ import annotations
import logging
import sqlite3
from typing import Any, Dict, List, Optional

from kenya_law.parsing.citation_grammar import parse_citation
from kenya_law.store.database import StatuteDatabase
from .models import ValidationResult
from .resolver import resolve_document_id

logger = logging.getLogger(__name__)

STATUS_WARNINGS: Dict[str, str] = {
    'repealed': 'WARNING: This statute has been repealed.',
    'amended': 'Note: This statute has been amended. Verify you are referencing the current version.',
    'partially_suspended': (
        'Note: Certain sections of this statute have been suspended. Verify which sections are in force.'
    ),
}


def status_warning(status: Optional[str]) -> Optional[str]:
    return STATUS_WARNINGS.get(status or '')


def find_provision(db: StatuteDatabase, document_id: str, number: str) -> Optional[Dict[str, Any]]:
    """Exact ref, then s<N>, then art<N>, then the bare section number."""
    for ref in (number, f"s{number}", f"art{number}"):
        row = db.get_provision(document_id, ref)
        if row:
            return row
    return db.get_provision_by_section(document_id, number)


def _validate(db: StatuteDatabase, citation: str) -> ValidationResult:
    warnings: List[str] = []
    parsed = parse_citation(citation)
    if parsed is None:
        return ValidationResult(valid=False, citation=citation, warnings=['Could not parse citation format'])

    doc_id = resolve_document_id(db, parsed.document_ref)
    doc = db.get_document(doc_id) if doc_id else None
    if doc is None:
        return ValidationResult(
            valid=False, citation=citation, warnings=[f'Document not found: "{parsed.document_ref}"'],
        )

    advisory = status_warning(doc['status'])
    if advisory:
        warnings.append(advisory)

    if parsed.provision_ref:
        provision = find_provision(db, doc['id'], parsed.provision_ref)
        if provision is None:
            warnings.append(f'Provision "{parsed.provision_ref}" not found in {doc["title"]}')
            return ValidationResult(
                valid=False,
                citation=citation,
                document_id=doc['id'],
                document_title=doc['title'],
                status=doc['status'],
                warnings=warnings,
            )
        return ValidationResult(
            valid=True,
            citation=citation,
            normalized=f"Section {parsed.provision_ref}, {doc['title']}",
            document_id=doc['id'],
            document_title=doc['title'],
            provision_ref=provision['provision_ref'],
            status=doc['status'],
            warnings=warnings,
        )

    return ValidationResult(
        valid=True,
        citation=citation,
        normalized=doc['title'],
        document_id=doc['id'],
        document_title=doc['title'],
        status=doc['status'],
        warnings=warnings,
    )


def validate_citation(db: StatuteDatabase, citation: Optional[str]) -> ValidationResult:
    text = citation if isinstance(citation, str) else ''
    try:
        return _validate(db, text)
    except sqlite3.Error as e:
        logger.error(f"[validate] store lookup failed for {text!r}: {e}")
        return ValidationResult(valid=False, citation=text, warnings=[f'Validation failed: {e}'])


__all__ = ['STATUS_WARNINGS', 'status_warning', 'find_provision', 'validate_citation']
