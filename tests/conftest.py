from __future__ import annotations

import pytest

from core.errors import ReadError


class ScriptedEntropySource:
    """Entropy source that replays fixed chunks and records each request."""

    def __init__(self, chunks, *, fail_after: int | None = None):
        self._chunks = list(chunks)
        self._fail_after = fail_after
        self.requests: list[int] = []

    def check(self) -> None:
        pass

    def read(self, size: int) -> bytes:
        if self._fail_after is not None and len(self.requests) >= self._fail_after:
            raise ReadError("entropy source went away")
        self.requests.append(size)
        if not self._chunks:
            raise AssertionError("entropy script exhausted")
        return self._chunks.pop(0)


@pytest.fixture
def scripted_source():
    return ScriptedEntropySource
