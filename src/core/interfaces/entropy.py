"""Entropy source contract.

Any object with `check` and `read` can feed the password pipeline: the
platform CSPRNG, a random device file, or a scripted source in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EntropySource(Protocol):
    """Minimal contract for a secure random byte stream.

    Rules:
    - `check` runs once before generation and raises `DependencyError` when the
      source cannot be used at all.
    - `read` may return fewer bytes than asked for; it raises `ReadError` when
      the source fails.
    """

    def check(self) -> None:
        """Verify that the source is available."""

        ...

    def read(self, size: int) -> bytes:
        """Return up to `size` random bytes."""

        ...
