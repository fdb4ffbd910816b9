import threading

import pytest


class RecordingSink:
    """Root sink fake: records every value and returns a numbered effect."""

    def __init__(self):
        self.received = []
        self._lock = threading.Lock()

    def send(self, value):
        with self._lock:
            self.received.append(value)
            return ("effect", len(self.received))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("APP_NAME", "LOG_LEVEL", "TRACE_CHANNELS", "WRAP_MAPPING_ERRORS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sink():
    return RecordingSink()
