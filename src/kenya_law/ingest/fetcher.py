"""Rate-limited HTTP client for Kenya Law (new.kenyalaw.org).

- minimum delay between requests (500ms default, be respectful to government servers)
- identifying User-Agent header
- retries on 429/5xx with exponential backoff; after the last retry the final
  response is returned so the caller can record its status code
- no auth needed (Government Open Data)
"""
from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

import requests  # type: ignore[import-untyped]

from kenya_law import config

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a URL could not be fetched at all (network errors after retries)."""


@dataclass
class FetchResult:
    status: int
    body: str
    content_type: str
    url: str


class RateLimiter:
    """Enforces a minimum interval between consecutive requests.

    One limiter is created per ingestion run and shared by every fetch in it.
    Clock and sleep are injectable for tests.
    """

    def __init__(self, min_delay_s: float, now: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep) -> None:
        if min_delay_s < 0:
            raise ValueError("min_delay_s must be >= 0")
        self.min_delay_s = min_delay_s
        self._now = now
        self._sleep = sleep
        self._last: Optional[float] = None

    def wait(self) -> None:
        if self._last is not None:
            elapsed = self._now() - self._last
            if elapsed < self.min_delay_s:
                self._sleep(self.min_delay_s - elapsed)
        self._last = self._now()


def backoff_delay(attempt: int, base_s: float) -> float:
    """Delay before retry number attempt+1: 2s, 4s, 8s... for base 1s."""
    return (2 ** (attempt + 1)) * base_s


def _should_retry(status: int) -> bool:
    return status == 429 or status >= 500


class KenyaLawFetcher:
    def __init__(self, limiter: Optional[RateLimiter] = None, session: Optional[requests.Session] = None,
                 max_retries: Optional[int] = None, backoff_base_s: Optional[float] = None,
                 timeout_s: Optional[float] = None, sleep: Callable[[float], None] = time.sleep) -> None:
        self.limiter = limiter or RateLimiter(config.FETCH_MIN_DELAY_MS / 1000.0)
        self.session = session or requests.Session()
        self.max_retries = config.FETCH_MAX_RETRIES if max_retries is None else max_retries
        self.backoff_base_s = config.FETCH_BACKOFF_BASE_S if backoff_base_s is None else backoff_base_s
        self.timeout_s = config.FETCH_TIMEOUT_S if timeout_s is None else timeout_s
        self._sleep = sleep
        self.headers = {
            'User-Agent': config.USER_AGENT,
            'Accept': 'text/html, */*',
        }

    def fetch(self, url: str) -> FetchResult:
        """GET url, retrying up to max_retries times on 429/5xx and network errors."""
        last_error: Optional[Exception] = None
        for attempt in range(self.max_retries + 1):
            self.limiter.wait()
            try:
                response = self.session.get(url, headers=self.headers, timeout=self.timeout_s,
                                            allow_redirects=True)
            except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as e:
                last_error = e
                logger.warning(f"Request attempt {attempt+1} for {url} failed: {e}")
                if attempt < self.max_retries:
                    self._sleep(backoff_delay(attempt, self.backoff_base_s))
                continue

            if _should_retry(response.status_code) and attempt < self.max_retries:
                delay = backoff_delay(attempt, self.backoff_base_s)
                logger.info(f"HTTP {response.status_code} for {url}, retrying in {delay:.1f}s...")
                self._sleep(delay)
                continue

            return FetchResult(
                status=response.status_code,
                body=response.text,
                content_type=response.headers.get('content-type', ''),
                url=response.url or url,
            )

        raise FetchError(f"Failed to fetch {url} after {self.max_retries} retries: {last_error}")


__all__ = ['FetchError', 'FetchResult', 'RateLimiter', 'backoff_delay', 'KenyaLawFetcher']
