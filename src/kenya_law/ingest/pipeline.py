"""Statute ingestion pipeline.

Steps per Act (strictly sequential, one fetch at a time):
 1. With skip_fetch, reuse an existing seed (data/seed/<id>.json) as-is.
 2. Otherwise take the cached page (data/source/<id>.html) when skip_fetch
    allows it, or fetch the AKN page from new.kenyalaw.org.
 3. Parse provisions/definitions and write the seed artifact.

A failing Act (non-200 response, network error, parser exception) is recorded
in the report and the run moves on to the next Act.
"""
from __future__ import annotations
import json
import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from kenya_law import config
from kenya_law.parsing.akn_parser import extract_act
from .fetcher import KenyaLawFetcher, RateLimiter
from .schemas import ActIndexEntry

logger = logging.getLogger("ingest")

ERROR_MESSAGE_CHARS = 80


class ArtifactWriteError(Exception):
    """Raw page or seed could not be written; aborts the run."""


@dataclass
class ActReport:
    act: str
    provisions: int = 0
    definitions: int = 0
    status: str = 'OK'


@dataclass
class IngestionReport:
    processed: int = 0
    cached: int = 0
    failed: int = 0
    total_provisions: int = 0
    total_definitions: int = 0
    acts: List[ActReport] = field(default_factory=list)

    def add(self, row: ActReport) -> None:
        self.acts.append(row)
        self.total_provisions += row.provisions
        self.total_definitions += row.definitions

    def render(self) -> str:
        lines = [
            '=' * 70,
            'Ingestion Report',
            '=' * 70,
            '',
            '  Source:      new.kenyalaw.org (Akoma Ntoso HTML)',
            f'  Processed:   {self.processed}',
            f'  Cached:      {self.cached}',
            f'  Failed:      {self.failed}',
            f'  Total provisions:  {self.total_provisions}',
            f'  Total definitions: {self.total_definitions}',
            '',
            '  Per-Act breakdown:',
            f"  {'Act':<25} {'Provisions':>12} {'Definitions':>13} {'Status':>10}",
            f"  {'-' * 25} {'-' * 12} {'-' * 13} {'-' * 10}",
        ]
        for r in self.acts:
            lines.append(f"  {r.act:<25} {r.provisions:>12} {r.definitions:>13} {r.status:>10}")
        return '\n'.join(lines)


class IngestionOrchestrator:
    def __init__(self, source_dir: Optional[str] = None, seed_dir: Optional[str] = None,
                 fetcher: Optional[KenyaLawFetcher] = None) -> None:
        self.source_dir = source_dir or config.SOURCE_DIR
        self.seed_dir = seed_dir or config.SEED_DIR
        # One limiter per run; every fetch below goes through it
        self.fetcher = fetcher or KenyaLawFetcher(limiter=RateLimiter(config.FETCH_MIN_DELAY_MS / 1000.0))

    def source_path(self, act: ActIndexEntry) -> str:
        return os.path.join(self.source_dir, f"{act.id}.html")

    def seed_path(self, act: ActIndexEntry) -> str:
        return os.path.join(self.seed_dir, f"{act.id}.json")

    def _from_cached_seed(self, act: ActIndexEntry, report: IngestionReport) -> bool:
        path = self.seed_path(act)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                existing = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"  Cached seed for {act.short_name} unreadable ({e}); re-processing")
            return False
        report.add(ActReport(
            act=act.short_name,
            provisions=len(existing.get('provisions') or []),
            definitions=len(existing.get('definitions') or []),
            status='cached',
        ))
        report.cached += 1
        report.processed += 1
        return True

    def _write(self, path: str, text: str) -> None:
        try:
            with open(path, 'w', encoding='utf-8') as f:
                f.write(text)
        except OSError as e:
            raise ArtifactWriteError(f"Could not write {path}: {e}") from e

    def process_act(self, act: ActIndexEntry, skip_fetch: bool, report: IngestionReport) -> None:
        if skip_fetch and os.path.exists(self.seed_path(act)) and self._from_cached_seed(act, report):
            return

        source_file = self.source_path(act)
        try:
            if skip_fetch and os.path.exists(source_file):
                with open(source_file, 'r', encoding='utf-8') as f:
                    html = f.read()
                logger.info(f"  Using cached {act.short_name} ({act.id}) ({len(html) / 1024:.0f} KB)")
            else:
                logger.info(f"  Fetching {act.short_name} ({act.id})...")
                result = self.fetcher.fetch(act.url)
                if result.status != 200:
                    logger.warning(f"  {act.short_name}: HTTP {result.status}")
                    report.add(ActReport(act=act.short_name, status=f"HTTP {result.status}"))
                    report.failed += 1
                    report.processed += 1
                    return
                html = result.body
                self._write(source_file, html)
                logger.info(f"  {act.short_name}: OK ({len(html) / 1024:.0f} KB)")

            extraction = extract_act(html, act)
            parsed = extraction.act
            self._write(self.seed_path(act), parsed.to_seed_json())
            if extraction.skipped:
                logger.debug(f"    skipped {len(extraction.skipped)} sections in {act.id}")
            logger.info(
                f"    -> {len(parsed.provisions)} provisions, {len(parsed.definitions)} definitions extracted"
            )
            report.add(ActReport(
                act=act.short_name,
                provisions=len(parsed.provisions),
                definitions=len(parsed.definitions),
                status='OK',
            ))
        except ArtifactWriteError:
            raise
        except Exception as e:
            msg = str(e)
            logger.error(f"  ERROR processing {act.short_name}: {msg}")
            report.add(ActReport(act=act.short_name, status=f"ERROR: {msg[:ERROR_MESSAGE_CHARS]}"))
            report.failed += 1
        report.processed += 1

    def run(self, acts: Iterable[ActIndexEntry], skip_fetch: bool = False) -> IngestionReport:
        acts = list(acts)
        logger.info(f"Processing {len(acts)} Kenyan Acts from new.kenyalaw.org...")
        # Not being able to create the output directories is fatal for the run
        os.makedirs(self.source_dir, exist_ok=True)
        os.makedirs(self.seed_dir, exist_ok=True)

        report = IngestionReport()
        for act in acts:
            self.process_act(act, skip_fetch, report)
        return report


def run_ingestion(acts: Iterable[ActIndexEntry], skip_fetch: bool = False, source_dir: Optional[str] = None,
                  seed_dir: Optional[str] = None) -> IngestionReport:
    return IngestionOrchestrator(source_dir=source_dir, seed_dir=seed_dir).run(acts, skip_fetch=skip_fetch)


__all__ = ['ArtifactWriteError', 'ActReport', 'IngestionReport', 'IngestionOrchestrator', 'run_ingestion']
