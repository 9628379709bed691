"""Canonical schemas for statute ingestion.

These pydantic models define the catalog entries that drive ingestion and the
parsed representation written to the seed artifacts (one JSON file per Act),
which the store loader later reads back.
"""
from __future__ import annotations
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict

DocumentStatus = Literal[
    'in_force', 'amended', 'repealed', 'partially_suspended', 'not_yet_in_force'
]

DOCUMENT_STATUSES = ('in_force', 'amended', 'repealed', 'partially_suspended', 'not_yet_in_force')


class ActIndexEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    title_en: str
    short_name: str
    status: DocumentStatus
    issued_date: str
    in_force_date: str
    url: str  # AKN URL on new.kenyalaw.org
    akn_number: str
    akn_year: str
    description: Optional[str] = None


class ParsedProvision(BaseModel):
    provision_ref: str
    chapter: Optional[str] = None
    section: str
    title: str
    content: str


class ParsedDefinition(BaseModel):
    term: str
    definition: str
    source_provision: Optional[str] = None


class ParsedAct(BaseModel):
    id: str
    type: Literal['statute'] = 'statute'
    title: str
    title_en: str
    short_name: str
    status: DocumentStatus
    issued_date: str
    in_force_date: str
    url: str
    description: Optional[str] = None
    provisions: List[ParsedProvision] = []
    definitions: List[ParsedDefinition] = []

    def to_seed_json(self) -> str:
        return self.model_dump_json(indent=2, exclude_none=True)


class SkippedSection(BaseModel):
    element_id: str
    reason: str


class ExtractionResult(BaseModel):
    act: ParsedAct
    skipped: List[SkippedSection] = []


__all__ = [
    'DocumentStatus', 'DOCUMENT_STATUSES', 'ActIndexEntry', 'ParsedProvision',
    'ParsedDefinition', 'ParsedAct', 'SkippedSection', 'ExtractionResult',
]
