"""SQLite statute store.

Holds one row per Act in legal_documents and its sections in legal_provisions.
Query-time code only uses the read methods; writes go through
kenya_law.store.loader.

Lookups that can match several documents return the first row in insertion
order (rowid ascending), which is the order seeds were loaded in.
"""
from __future__ import annotations
import os
import sqlite3
from typing import Any, Dict, List, Optional

SCHEMA = """
CREATE TABLE IF NOT EXISTS legal_documents (
    id TEXT PRIMARY KEY,
    type TEXT NOT NULL DEFAULT 'statute',
    title TEXT NOT NULL,
    title_en TEXT,
    short_name TEXT,
    status TEXT NOT NULL CHECK (status IN
        ('in_force', 'amended', 'repealed', 'partially_suspended', 'not_yet_in_force')),
    issued_date TEXT,
    in_force_date TEXT,
    url TEXT,
    description TEXT
);

CREATE TABLE IF NOT EXISTS legal_provisions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    document_id TEXT NOT NULL REFERENCES legal_documents(id) ON DELETE CASCADE,
    provision_ref TEXT NOT NULL,
    chapter TEXT,
    section TEXT NOT NULL,
    title TEXT,
    content TEXT NOT NULL,
    position INTEGER NOT NULL,
    UNIQUE (document_id, provision_ref)
);

CREATE INDEX IF NOT EXISTS idx_provisions_doc_section ON legal_provisions(document_id, section);

CREATE TABLE IF NOT EXISTS definitions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    document_id TEXT NOT NULL REFERENCES legal_documents(id) ON DELETE CASCADE,
    term TEXT NOT NULL,
    definition TEXT NOT NULL,
    source_provision TEXT
);

CREATE TABLE IF NOT EXISTS db_metadata (
    key TEXT PRIMARY KEY,
    value TEXT
);
"""

# Columns searched by the substring steps of document resolution
SEARCH_FIELDS = ('title', 'short_name', 'title_en')


class StoreError(Exception):
    """Raised when the store file is missing or cannot be opened."""


class StatuteDatabase:
    def __init__(self, path: str = ':memory:', create: bool = True) -> None:
        if path != ':memory:' and not create and not os.path.exists(path):
            raise StoreError(f"Database not found at {path}")
        self.path = path
        try:
            self.conn = sqlite3.connect(path, check_same_thread=False)
        except sqlite3.Error as e:
            raise StoreError(f"Could not open database {path}: {e}") from e
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA foreign_keys = ON")
        if create:
            self.conn.executescript(SCHEMA)

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "StatuteDatabase":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _one(self, sql: str, params: tuple = ()) -> Optional[sqlite3.Row]:
        return self.conn.execute(sql, params).fetchone()

    # Documents

    def get_document(self, document_id: str) -> Optional[Dict[str, Any]]:
        row = self._one("SELECT * FROM legal_documents WHERE id = ?", (document_id,))
        return dict(row) if row else None

    def list_documents(self) -> List[Dict[str, Any]]:
        rows = self.conn.execute("SELECT * FROM legal_documents ORDER BY rowid").fetchall()
        return [dict(r) for r in rows]

    def find_document_id_by_id(self, value: str) -> Optional[str]:
        row = self._one("SELECT id FROM legal_documents WHERE id = ?", (value,))
        return row['id'] if row else None

    def find_document_id_by_title(self, value: str) -> Optional[str]:
        row = self._one(
            "SELECT id FROM legal_documents WHERE LOWER(title) = LOWER(?) ORDER BY rowid LIMIT 1", (value,)
        )
        return row['id'] if row else None

    def find_document_id_by_short_name(self, value: str) -> Optional[str]:
        row = self._one(
            "SELECT id FROM legal_documents WHERE LOWER(short_name) = LOWER(?) ORDER BY rowid LIMIT 1", (value,)
        )
        return row['id'] if row else None

    def find_document_id_containing(self, value: str, case_sensitive: bool = True) -> Optional[str]:
        """First document whose title, short name or English title contains value.

        instr() is used instead of LIKE, which ignores ASCII case and treats
        % and _ as wildcards.
        """
        if case_sensitive:
            clause = " OR ".join(f"instr({f}, ?) > 0" for f in SEARCH_FIELDS)
            params = (value,) * len(SEARCH_FIELDS)
        else:
            clause = " OR ".join(f"instr(LOWER({f}), ?) > 0" for f in SEARCH_FIELDS)
            params = (value.lower(),) * len(SEARCH_FIELDS)
        row = self._one(f"SELECT id FROM legal_documents WHERE {clause} ORDER BY rowid LIMIT 1", params)
        return row['id'] if row else None

    # Provisions

    def get_provisions(self, document_id: str) -> List[Dict[str, Any]]:
        rows = self.conn.execute(
            "SELECT document_id, provision_ref, chapter, section, title, content "
            "FROM legal_provisions WHERE document_id = ? ORDER BY position",
            (document_id,),
        ).fetchall()
        return [dict(r) for r in rows]

    def get_provision(self, document_id: str, provision_ref: str) -> Optional[Dict[str, Any]]:
        row = self._one(
            "SELECT document_id, provision_ref, chapter, section, title, content "
            "FROM legal_provisions WHERE document_id = ? AND provision_ref = ?",
            (document_id, provision_ref),
        )
        return dict(row) if row else None

    def get_provision_by_section(self, document_id: str, section: str) -> Optional[Dict[str, Any]]:
        row = self._one(
            "SELECT document_id, provision_ref, chapter, section, title, content "
            "FROM legal_provisions WHERE document_id = ? AND section = ? ORDER BY position LIMIT 1",
            (document_id, section),
        )
        return dict(row) if row else None

    def get_definitions(self, document_id: str) -> List[Dict[str, Any]]:
        rows = self.conn.execute(
            "SELECT term, definition, source_provision FROM definitions WHERE document_id = ? ORDER BY id",
            (document_id,),
        ).fetchall()
        return [dict(r) for r in rows]

    # Metadata

    def get_metadata(self, key: str) -> Optional[str]:
        row = self._one("SELECT value FROM db_metadata WHERE key = ?", (key,))
        return row['value'] if row else None

    def set_metadata(self, key: str, value: str) -> None:
        with self.conn:
            self.conn.execute(
                "INSERT INTO db_metadata(key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )


def open_database(path: str) -> StatuteDatabase:
    """Open an existing store file without creating it."""
    return StatuteDatabase(path, create=False)


__all__ = ['SCHEMA', 'SEARCH_FIELDS', 'StoreError', 'StatuteDatabase', 'open_database']
