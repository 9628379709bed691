"""Load ingestion seed artifacts into the statute store.

Each seed file (data/seed/<act-id>.json) replaces the stored document and all
of its provisions and definitions; nothing is merged with earlier loads. The
document row itself is upserted so its rowid, and with it its place in the
resolver's tie-break order, survives a reload.
"""
from __future__ import annotations
import glob
import json
import logging
import os
from datetime import datetime, timezone
from typing import Dict, List

from kenya_law.ingest.schemas import ParsedAct
from .database import StatuteDatabase

logger = logging.getLogger(__name__)


def load_act(db: StatuteDatabase, act: ParsedAct) -> None:
    with db.conn:
        db.conn.execute(
            """
            INSERT INTO legal_documents
                (id, type, title, title_en, short_name, status, issued_date, in_force_date, url, description)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                type = excluded.type, title = excluded.title, title_en = excluded.title_en,
                short_name = excluded.short_name, status = excluded.status,
                issued_date = excluded.issued_date, in_force_date = excluded.in_force_date,
                url = excluded.url, description = excluded.description
            """,
            (act.id, act.type, act.title, act.title_en, act.short_name, act.status,
             act.issued_date, act.in_force_date, act.url, act.description),
        )
        db.conn.execute("DELETE FROM legal_provisions WHERE document_id = ?", (act.id,))
        db.conn.execute("DELETE FROM definitions WHERE document_id = ?", (act.id,))
        db.conn.executemany(
            "INSERT INTO legal_provisions (document_id, provision_ref, chapter, section, title, content, position) "
            "VALUES (?, ?, ?, ?, ?, ?, ?)",
            [(act.id, p.provision_ref, p.chapter, p.section, p.title, p.content, i)
             for i, p in enumerate(act.provisions)],
        )
        db.conn.executemany(
            "INSERT INTO definitions (document_id, term, definition, source_provision) VALUES (?, ?, ?, ?)",
            [(act.id, d.term, d.definition, d.source_provision) for d in act.definitions],
        )


def read_seed(path: str) -> ParsedAct:
    with open(path, 'r', encoding='utf-8') as f:
        return ParsedAct(**json.load(f))


def load_seed_directory(db: StatuteDatabase, seed_dir: str) -> Dict[str, int]:
    """Load every *.json seed in seed_dir (sorted by file name).

    Unreadable seeds are logged and skipped. Returns load totals.
    """
    totals = {'documents': 0, 'provisions': 0, 'definitions': 0, 'failed': 0}
    paths: List[str] = sorted(glob.glob(os.path.join(seed_dir, '*.json')))
    for path in paths:
        try:
            act = read_seed(path)
        except (OSError, ValueError) as e:
            logger.error(f"[loader] Skipping unreadable seed {path}: {e}")
            totals['failed'] += 1
            continue
        load_act(db, act)
        totals['documents'] += 1
        totals['provisions'] += len(act.provisions)
        totals['definitions'] += len(act.definitions)
        logger.info(f"[loader] {act.id}: {len(act.provisions)} provisions, {len(act.definitions)} definitions")
    db.set_metadata('built_at', datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'))
    return totals


def build_database(seed_dir: str, db_path: str) -> Dict[str, int]:
    out_dir = os.path.dirname(db_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with StatuteDatabase(db_path) as db:
        return load_seed_directory(db, seed_dir)


__all__ = ['load_act', 'read_seed', 'load_seed_directory', 'build_database']
