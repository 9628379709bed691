import pytest
import requests

from kenya_law.ingest.fetcher import FetchError, KenyaLawFetcher, RateLimiter, backoff_delay


class FakeClock:
    def __init__(self):
        self.t = 100.0
        self.sleeps = []

    def now(self):
        return self.t

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.t += seconds


def make_response(status, body="<html></html>", url="https://new.kenyalaw.org/akn/ke/act/2019/24/"):
    resp = requests.Response()
    resp.status_code = status
    resp._content = body.encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = url
    resp.headers["Content-Type"] = "text/html; charset=utf-8"
    return resp


class FakeSession:
    """Replays a scripted list of responses (or exceptions) for session.get."""

    def __init__(self, script):
        self.script = list(script)
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        item = self.script.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def _fetcher(session, max_retries=3):
    clock = FakeClock()
    backoff = []
    fetcher = KenyaLawFetcher(
        limiter=RateLimiter(0.5, now=clock.now, sleep=clock.sleep),
        session=session,
        max_retries=max_retries,
        backoff_base_s=1.0,
        sleep=backoff.append,
    )
    return fetcher, clock, backoff


class TestRateLimiter:
    def test_first_call_does_not_wait(self):
        clock = FakeClock()
        RateLimiter(0.5, now=clock.now, sleep=clock.sleep).wait()
        assert clock.sleeps == []

    def test_waits_out_remaining_interval(self):
        clock = FakeClock()
        limiter = RateLimiter(0.5, now=clock.now, sleep=clock.sleep)
        limiter.wait()
        clock.t += 0.2
        limiter.wait()
        assert clock.sleeps == [pytest.approx(0.3)]

    def test_no_wait_after_interval_elapsed(self):
        clock = FakeClock()
        limiter = RateLimiter(0.5, now=clock.now, sleep=clock.sleep)
        limiter.wait()
        clock.t += 2.0
        limiter.wait()
        assert clock.sleeps == []

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            RateLimiter(-1)


def test_backoff_doubles():
    assert [backoff_delay(a, 1.0) for a in range(3)] == [2.0, 4.0, 8.0]
    assert backoff_delay(0, 0.5) == 1.0


def test_success_first_try():
    session = FakeSession([make_response(200, "<p>ok</p>")])
    fetcher, _, backoff = _fetcher(session)
    result = fetcher.fetch("https://new.kenyalaw.org/akn/ke/act/2019/24/")
    assert result.status == 200
    assert result.body == "<p>ok</p>"
    assert result.content_type.startswith("text/html")
    assert result.url == "https://new.kenyalaw.org/akn/ke/act/2019/24/"
    assert backoff == []
    _, kwargs = session.calls[0]
    assert "User-Agent" in kwargs["headers"]
    assert kwargs["allow_redirects"] is True


def test_retries_429_and_5xx_then_succeeds():
    session = FakeSession([make_response(429), make_response(500), make_response(200, "done")])
    fetcher, _, backoff = _fetcher(session)
    result = fetcher.fetch("https://example.test/act")
    assert result.status == 200
    assert result.body == "done"
    assert backoff == [2.0, 4.0]
    assert len(session.calls) == 3


def test_exhausted_retries_return_last_status():
    session = FakeSession([make_response(503)] * 3)
    fetcher, _, backoff = _fetcher(session, max_retries=2)
    result = fetcher.fetch("https://example.test/act")
    assert result.status == 503
    assert backoff == [2.0, 4.0]
    assert session.script == []


def test_client_errors_not_retried():
    session = FakeSession([make_response(404)])
    fetcher, _, backoff = _fetcher(session)
    assert fetcher.fetch("https://example.test/missing").status == 404
    assert backoff == []


def test_every_attempt_goes_through_limiter():
    session = FakeSession([make_response(502), make_response(200)])
    fetcher, clock, _ = _fetcher(session)
    fetcher.fetch("https://example.test/act")
    # backoff sleeps do not advance the fake clock, so the limiter waits the full interval
    assert clock.sleeps == [pytest.approx(0.5)]


def test_network_errors_raise_after_retries():
    session = FakeSession([
        requests.exceptions.ConnectionError("refused"),
        requests.exceptions.Timeout("slow"),
    ])
    fetcher, _, backoff = _fetcher(session, max_retries=1)
    with pytest.raises(FetchError):
        fetcher.fetch("https://example.test/act")
    assert backoff == [2.0]


def test_network_error_then_success():
    session = FakeSession([requests.exceptions.Timeout("slow"), make_response(200, "ok")])
    fetcher, _, _ = _fetcher(session)
    assert fetcher.fetch("https://example.test/act").body == "ok"
