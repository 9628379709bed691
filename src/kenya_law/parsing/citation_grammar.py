"""Citation grammar for Kenyan statute references.

Accepted shapes, tried in order (first match wins):
  1. Section 25, Data Protection Act 2019 / s 25 of the Data Protection Act, 2019
  2. Article 31, Constitution of Kenya 2010 / Art. 31 of the Constitution
  3. Data Protection Act 2019, Section 25
  4. Constitution of Kenya 2010, Article 31
  5. anything else: the whole string is the document reference

The precedence is fixed by CITATION_RULES. A string that fits several shapes
(e.g. repeated keywords) resolves to the earliest rule.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List, Literal, Optional

ProvisionKind = Literal['section', 'article']

NUMBER = r'(\d+[A-Za-z]*)'
SECTION_WORD = r'(?:Section|s|sec\.?)'
ARTICLE_WORD = r'(?:Article|Art\.?)'
LEADING_SEPARATOR = r'\s*(?:,|of(?:\s+the)?)\s+'

LEADING_THE_RE = re.compile(r'^the\s+', re.IGNORECASE)


@dataclass(frozen=True)
class CitationParseResult:
    document_ref: str
    provision_ref: Optional[str] = None
    provision_kind: Optional[ProvisionKind] = None


@dataclass(frozen=True)
class GrammarRule:
    """One citation shape: a pattern plus where its document and number live."""
    name: str
    pattern: re.Pattern
    kind: ProvisionKind
    doc_group: int
    num_group: int
    strip_leading_the: bool = False

    def apply(self, text: str) -> Optional[CitationParseResult]:
        m = self.pattern.match(text)
        if not m:
            return None
        document_ref = m.group(self.doc_group).strip()
        if self.strip_leading_the:
            document_ref = LEADING_THE_RE.sub('', document_ref)
        return CitationParseResult(
            document_ref=document_ref,
            provision_ref=m.group(self.num_group),
            provision_kind=self.kind,
        )


def _rule(name: str, pattern: str, kind: ProvisionKind, doc_group: int, num_group: int,
          strip_leading_the: bool = False) -> GrammarRule:
    return GrammarRule(name, re.compile(pattern, re.IGNORECASE), kind, doc_group, num_group, strip_leading_the)


CITATION_RULES: List[GrammarRule] = [
    _rule('leading_section', rf'^{SECTION_WORD}\s*{NUMBER}{LEADING_SEPARATOR}(.+)$', 'section', 2, 1, True),
    _rule('leading_article', rf'^{ARTICLE_WORD}\s*{NUMBER}{LEADING_SEPARATOR}(.+)$', 'article', 2, 1, True),
    _rule('trailing_section', rf'^(.+?)[,;]?\s*{SECTION_WORD}\s*{NUMBER}$', 'section', 1, 2),
    _rule('trailing_article', rf'^(.+?)[,;]?\s*{ARTICLE_WORD}\s*{NUMBER}$', 'article', 1, 2),
]


def parse_citation(citation: Optional[str], rules: Optional[List[GrammarRule]] = None) -> Optional[CitationParseResult]:
    """Split a citation into document and provision references.

    Returns None only for empty or whitespace-only input; any other text parses,
    at worst as a bare document reference.
    """
    trimmed = (citation or '').strip()
    if not trimmed:
        return None
    for rule in (rules if rules is not None else CITATION_RULES):
        result = rule.apply(trimmed)
        if result is not None:
            return result
    return CitationParseResult(document_ref=trimmed)


__all__ = ['CitationParseResult', 'GrammarRule', 'CITATION_RULES', 'parse_citation']
