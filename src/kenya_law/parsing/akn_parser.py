"""Akoma Ntoso (AKN) statute parser for new.kenyalaw.org pages.

Kenya Law serves legislation as AKN-structured HTML with semantic classes:
  - akn-section: one section/article, with id and data-eid attributes
  - akn-part / akn-chapter: grouping containers (also encoded in the section id)
  - akn-paragraph / akn-subsection / akn-intro / akn-content: structural wrappers
  - akn-num: numbering
  - akn-p: paragraph text
Section titles come from the <h3> heading, e.g. "25. Principles of data protection".

The page is split on section start markers rather than parsed as a tree, so a
section's span runs to the start of the next marker. Sections that do not carry
a numbered heading are skipped (never an error) and reported back in
ExtractionResult.skipped.
"""
from __future__ import annotations
import re
from typing import List, Optional

from bs4 import BeautifulSoup

from kenya_law import config
from kenya_law.ingest.schemas import (
    ActIndexEntry, ExtractionResult, ParsedAct, ParsedDefinition, ParsedProvision, SkippedSection,
)

SECTION_START_RE = re.compile(r'<section\s+class="akn-section"\s+id="([^"]+)"\s+data-eid="[^"]*">')
HEADING_RE = re.compile(r'<h3>([^<]+)</h3>')
SECTION_NUMBER_RE = re.compile(r'^(\d+[A-Za-z]*)\.\s')
SECTION_NUMBER_PREFIX_RE = re.compile(r'^\d+[A-Za-z]*\.\s*')
PART_ID_RE = re.compile(r'^part_([^_]+)__')
CHAPTER_ID_RE = re.compile(r'^chp_([^_]+)__')
WHITESPACE_RE = re.compile(r'\s+')

DEFINITION_RE = re.compile(
    r'^["“]([^"”]+)["”]\s+(means|includes|has the meaning)\s+(.+)',
    re.IGNORECASE | re.DOTALL,
)
DEFINITION_SECTION_KEYWORDS = ('interpretation', 'definition')

MIN_CONTENT_CHARS = 10
MIN_DEFINITION_CHARS = 5


def strip_html(html: str) -> str:
    """Markup-free text with entities decoded and whitespace collapsed."""
    if not html:
        return ""
    text = BeautifulSoup(html, 'html.parser').get_text(" ")
    text = text.replace('\u00a0', ' ')
    return WHITESPACE_RE.sub(' ', text).strip()


def extract_chapter(section_id: str) -> Optional[str]:
    """Part/chapter label from an AKN id.

    part_I__sec_1  -> "Part I"
    chp_ONE__sec_1 -> "Chapter ONE"
    sec_1          -> None
    """
    m = PART_ID_RE.match(section_id)
    if m:
        return f"Part {m.group(1)}"
    m = CHAPTER_ID_RE.match(section_id)
    if m:
        return f"Chapter {m.group(1)}"
    return None


def extract_section_number(heading: str) -> Optional[str]:
    m = SECTION_NUMBER_RE.match(heading)
    return m.group(1) if m else None


def extract_section_title(heading: str) -> str:
    return SECTION_NUMBER_PREFIX_RE.sub('', heading, count=1).strip()


def provision_ref_for(section_id: str, section_number: str) -> str:
    # Acts use "s" references; constitutional articles carry an __art_ segment
    prefix = 'art' if '__art_' in section_id else 's'
    return f"{prefix}{section_number}"


def is_definition_section(title: str) -> bool:
    lowered = title.lower()
    return any(k in lowered for k in DEFINITION_SECTION_KEYWORDS)


def extract_definitions(section_html: str, source_provision: str) -> List[ParsedDefinition]:
    """Pull '"term" means ...;' clauses out of an interpretation section.

    Each definition normally sits in its own akn-p element. Irregular markup
    simply yields fewer definitions.
    """
    found: List[ParsedDefinition] = []
    soup = BeautifulSoup(section_html, 'html.parser')
    for p in soup.select('span.akn-p'):
        text = WHITESPACE_RE.sub(' ', p.get_text(" ").replace('\u00a0', ' ')).strip()
        m = DEFINITION_RE.match(text)
        if not m:
            continue
        term = m.group(1).strip()
        definition = re.sub(r';$', '', m.group(3)).strip()
        if len(term) > 0 and len(definition) > MIN_DEFINITION_CHARS:
            found.append(ParsedDefinition(term=term, definition=definition, source_provision=source_provision))
    return found


def _split_sections(html: str) -> List[tuple]:
    starts = [(m.group(1), m.start()) for m in SECTION_START_RE.finditer(html)]
    spans = []
    for i, (section_id, start) in enumerate(starts):
        end = starts[i + 1][1] if i + 1 < len(starts) else len(html)
        spans.append((section_id, html[start:end]))
    return spans


def extract_act(html: str, act: ActIndexEntry, max_chars: Optional[int] = None) -> ExtractionResult:
    """Segment one statute page into provisions and definitions."""
    cap = max_chars if max_chars is not None else config.MAX_PROVISION_CHARS
    provisions: List[ParsedProvision] = []
    definitions: List[ParsedDefinition] = []
    skipped: List[SkippedSection] = []
    seen_refs = set()

    for section_id, section_html in _split_sections(html or ''):
        heading_match = HEADING_RE.search(section_html)
        if not heading_match:
            skipped.append(SkippedSection(element_id=section_id, reason='no heading'))
            continue
        heading = heading_match.group(1).strip()
        number = extract_section_number(heading)
        if not number:
            skipped.append(SkippedSection(element_id=section_id, reason='unnumbered heading'))
            continue

        title = extract_section_title(heading)
        provision_ref = provision_ref_for(section_id, number)
        if provision_ref in seen_refs:
            skipped.append(SkippedSection(element_id=section_id, reason=f'duplicate provision {provision_ref}'))
            continue

        content = strip_html(HEADING_RE.sub('', section_html, count=1))
        if len(content) > MIN_CONTENT_CHARS:
            seen_refs.add(provision_ref)
            provisions.append(ParsedProvision(
                provision_ref=provision_ref,
                chapter=extract_chapter(section_id),
                section=number,
                title=title,
                content=content[:cap],
            ))
        else:
            skipped.append(SkippedSection(element_id=section_id, reason='empty content'))

        if is_definition_section(title):
            definitions.extend(extract_definitions(section_html, provision_ref))

    parsed = ParsedAct(
        id=act.id,
        title=act.title,
        title_en=act.title_en,
        short_name=act.short_name,
        status=act.status,
        issued_date=act.issued_date,
        in_force_date=act.in_force_date,
        url=act.url,
        description=act.description,
        provisions=provisions,
        definitions=definitions,
    )
    return ExtractionResult(act=parsed, skipped=skipped)


def parse_kenya_law_html(html: str, act: ActIndexEntry) -> ParsedAct:
    return extract_act(html, act).act


__all__ = [
    'strip_html', 'extract_chapter', 'extract_section_number', 'extract_section_title',
    'provision_ref_for', 'extract_definitions', 'extract_act', 'parse_kenya_law_html',
]
