"""Secure random byte sources.

Two implementations of `core.interfaces.entropy.EntropySource`:
- `SystemEntropySource`: the platform CSPRNG through `os.urandom`.
- `DeviceEntropySource`: a random device file such as `/dev/urandom`, reopened
  for every read so no handle is held between passwords.
"""

from __future__ import annotations

import os
from pathlib import Path

from core.config import GeneratorSettings
from core.errors import DependencyError, ReadError
from core.interfaces.entropy import EntropySource
from core.logging_utils import get_logger

logger = get_logger("entropy")


class SystemEntropySource(EntropySource):
    """Reads from the operating system CSPRNG."""

    def check(self) -> None:
        try:
            os.urandom(1)
        except (NotImplementedError, OSError) as exc:
            raise DependencyError(f"no secure random source is available: {exc}") from exc

    def read(self, size: int) -> bytes:
        try:
            return os.urandom(size)
        except NotImplementedError as exc:
            raise DependencyError("no secure random source is available on this platform") from exc
        except OSError as exc:
            raise ReadError(f"failed to read from the system random source: {exc}") from exc


class DeviceEntropySource(EntropySource):
    """Reads from a random device file."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def check(self) -> None:
        if not self._path.exists():
            raise DependencyError(f"entropy source {self._path} does not exist")
        try:
            with self._path.open("rb", buffering=0) as device:
                device.read(1)
        except OSError as exc:
            raise DependencyError(f"entropy source {self._path} is not readable: {exc}") from exc

    def read(self, size: int) -> bytes:
        try:
            with self._path.open("rb", buffering=0) as device:
                return device.read(size)
        except OSError as exc:
            raise ReadError(f"failed to read from {self._path}: {exc}") from exc


def build_entropy_source(settings: GeneratorSettings | None = None) -> EntropySource:
    """Pick the entropy source described by `settings`."""

    settings = settings or GeneratorSettings()
    if settings.entropy_device is None:
        logger.debug("using os.urandom")
        return SystemEntropySource()
    logger.debug("using device %s", settings.entropy_device)
    return DeviceEntropySource(settings.entropy_device)
