"""Provenance block attached to every tool response."""
from __future__ import annotations
import logging
import sqlite3
from typing import Optional

from kenya_law.store.database import StatuteDatabase
from .models import ResponseMetadata

logger = logging.getLogger(__name__)

DATA_SOURCE = 'Kenya Law (kenyalaw.org) - National Council for Law Reporting'
JURISDICTION = 'KE'
DISCLAIMER = (
    'This data is sourced from Kenya Law under Government Open Data principles. '
    'The authoritative versions are in English. Swahili translations may be available for some documents. '
    'Always verify with the official Kenya Law portal (kenyalaw.org).'
)


def generate_response_metadata(db: Optional[StatuteDatabase]) -> ResponseMetadata:
    freshness = None
    if db is not None:
        try:
            freshness = db.get_metadata('built_at')
        except sqlite3.Error as e:
            logger.debug(f"freshness unavailable: {e}")
    return ResponseMetadata(
        data_source=DATA_SOURCE,
        jurisdiction=JURISDICTION,
        disclaimer=DISCLAIMER,
        freshness=freshness,
    )
