"""Re-render a Kenyan statute citation in a standard presentation form.

Formats:
  full     -> "Section 25, Data Protection Act 2019"
  short    -> "s 25, Data Protection Act 2019" (parenthetical suffix dropped)
  pinpoint -> "s 25"

This is a text transform only; nothing is checked against the store. Inputs
without a section/article token come back unchanged.
"""
from __future__ import annotations
import re
from typing import Literal, Optional

from pydantic import BaseModel

CitationFormat = Literal['full', 'short', 'pinpoint']
CITATION_FORMATS = ('full', 'short', 'pinpoint')

SEC_FIRST_RE = re.compile(r'^(?:Section|s|sec\.?)\s*(\d+[A-Za-z]*)\s*(?:[,;]|of(?:\s+the)?)?\s+(.+)$', re.IGNORECASE)
SEC_LAST_RE = re.compile(r'^(.+?)[,;]?\s*(?:Section|s|sec\.?)\s*(\d+[A-Za-z]*)$', re.IGNORECASE)
ART_FIRST_RE = re.compile(r'^(?:Article|Art\.?)\s*(\d+[A-Za-z]*)\s*(?:[,;]|of(?:\s+the)?)?\s+(.+)$', re.IGNORECASE)
ART_LAST_RE = re.compile(r'^(.+?)[,;]?\s*(?:Article|Art\.?)\s*(\d+[A-Za-z]*)$', re.IGNORECASE)


class FormatCitationResult(BaseModel):
    original: str
    formatted: str
    format: str


def _split(trimmed: str):
    """(number, law, is_article) using the first shape that matches."""
    for pattern, num_group, law_group, is_article in (
        (SEC_FIRST_RE, 1, 2, False),
        (SEC_LAST_RE, 2, 1, False),
        (ART_FIRST_RE, 1, 2, True),
        (ART_LAST_RE, 2, 1, True),
    ):
        m = pattern.match(trimmed)
        if m:
            return m.group(num_group), m.group(law_group).strip(), is_article
    return None, trimmed, False


def format_citation(citation: Optional[str], fmt: Optional[str] = 'full') -> FormatCitationResult:
    original = citation or ''
    mode = fmt if fmt in CITATION_FORMATS else 'full'
    number, law, is_article = _split(original.strip())

    if not number:
        formatted = law
    elif mode == 'short':
        formatted = f"s {number}, {law.split('(')[0].strip()}"
    elif mode == 'pinpoint':
        formatted = f"s {number}"
    else:
        prefix = 'Article' if is_article else 'Section'
        formatted = f"{prefix} {number}, {law}"

    return FormatCitationResult(original=original, formatted=formatted, format=mode)


__all__ = ['CitationFormat', 'CITATION_FORMATS', 'FormatCitationResult', 'format_citation']
