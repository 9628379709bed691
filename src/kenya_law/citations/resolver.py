"""Resolve fuzzy Act references to store document ids.

Supported inputs, tried in this order:
  - document id            "data-protection-act-2019"
  - exact title            "data protection act 2019" (any case)
  - exact short name       "DPA 2019"
  - title substring        "Cybercrimes" (case-sensitive, then any case)

Each step is a single LIMIT 1 lookup; ties go to the earliest loaded document.
"""
from __future__ import annotations
from typing import Optional

from kenya_law.store.database import StatuteDatabase


def resolve_document_id(db: StatuteDatabase, reference: Optional[str]) -> Optional[str]:
    trimmed = (reference or '').strip()
    if not trimmed:
        return None

    for lookup in (
        db.find_document_id_by_id,
        db.find_document_id_by_title,
        db.find_document_id_by_short_name,
        lambda v: db.find_document_id_containing(v, case_sensitive=True),
        lambda v: db.find_document_id_containing(v, case_sensitive=False),
    ):
        doc_id = lookup(trimmed)
        if doc_id:
            return doc_id
    return None


__all__ = ['resolve_document_id']
