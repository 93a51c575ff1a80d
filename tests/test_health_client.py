"""Test class HealthChecker without touching the network."""
from pydantic import ValidationError
import pytest
import requests

from calculator_service.client import health as health_module
from calculator_service.client.health import HealthChecker


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


@pytest.fixture
def no_sleep(monkeypatch) -> list:
    """Record sleeps instead of waiting."""
    sleeps: list = []
    monkeypatch.setattr(health_module.time, "sleep", sleeps.append)
    return sleeps


def test_checker_defaults() -> None:
    """Defaults follow the pipeline retry budget: 10 probes, 5 seconds apart."""
    checker = HealthChecker()
    assert checker.url == "http://127.0.0.1:5000/health"
    assert checker.attempts == 10
    assert checker.interval == 5.0


@pytest.mark.parametrize("field,value", [("attempts", 0), ("interval", -1), ("timeout", 0)])
def test_checker_invalid_config(field: str, value) -> None:
    """Out-of-range settings raise a ValidationError."""
    with pytest.raises(ValidationError):
        HealthChecker(**{field: value})


@pytest.mark.parametrize(
    "response,expected",
    [
        (FakeResponse(200, {"status": "ok"}), True),
        (FakeResponse(200, {"status": "starting"}), False),
        (FakeResponse(200, None), False),
        (FakeResponse(503, {"status": "ok"}), False),
    ],
)
def test_check_once(monkeypatch, response: FakeResponse, expected: bool) -> None:
    """Only a 200 with the exact health payload counts as ready."""
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return response

    monkeypatch.setattr(requests, "get", fake_get)
    checker = HealthChecker(url="http://10.0.0.5:5000/health", timeout=1.5)
    assert checker.check_once() is expected
    assert calls == [("http://10.0.0.5:5000/health", 1.5)]


def test_check_once_connection_refused(monkeypatch) -> None:
    """A refused connection means not ready, not an exception."""
    def fake_get(url, timeout):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(requests, "get", fake_get)
    assert HealthChecker().check_once() is False


def test_wait_until_ready_retries(monkeypatch, no_sleep: list) -> None:
    """Probes repeat until the service answers, sleeping between attempts."""
    answers = iter([
        requests.exceptions.ConnectionError("refused"),
        requests.exceptions.Timeout("slow"),
        FakeResponse(200, {"status": "ok"}),
    ])

    def fake_get(url, timeout):
        answer = next(answers)
        if isinstance(answer, Exception):
            raise answer
        return answer

    monkeypatch.setattr(requests, "get", fake_get)
    checker = HealthChecker(attempts=5, interval=0.25)
    assert checker.wait_until_ready() is True
    assert no_sleep == [0.25, 0.25]


def test_wait_until_ready_gives_up(monkeypatch, no_sleep: list) -> None:
    """After the last attempt the checker reports failure without sleeping again."""
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(requests, "get", fake_get)
    checker = HealthChecker(attempts=3, interval=5)
    assert checker.wait_until_ready() is False
    assert len(calls) == 3
    assert no_sleep == [5.0, 5.0]
