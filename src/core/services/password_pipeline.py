"""Password generation pipeline.

Read -> filter -> accumulate, repeated until a password reaches its target
length, then truncated to exactly that length. Each password starts from an
empty accumulator and does its own reads.

There is no cap on the number of reads: a source that keeps returning nothing
but excluded bytes blocks forever.
"""

from __future__ import annotations

from typing import Iterator

from core.config import OVERPROVISION_FACTOR, GeneratorSettings
from core.domain.alphabet import filter_to_alphabet
from core.domain.models import PasswordRequest
from core.interfaces.entropy import EntropySource
from core.logging_utils import get_logger

logger = get_logger("pipeline")


def assemble_password(
    length: int,
    source: EntropySource,
    *,
    overprovision_factor: int = OVERPROVISION_FACTOR,
) -> str:
    """Build one password of exactly `length` alphabet characters."""

    accumulator = ""
    while len(accumulator) < length:
        missing = length - len(accumulator)
        raw = source.read(missing * overprovision_factor)
        survivors = filter_to_alphabet(raw)
        logger.debug("read %d bytes, %d survived (%d missing)", len(raw), len(survivors), missing)
        accumulator += survivors
    return accumulator[:length]


def generate_passwords(
    request: PasswordRequest,
    source: EntropySource,
    settings: GeneratorSettings | None = None,
) -> Iterator[str]:
    """Yield `request.count` independent passwords in generation order."""

    settings = settings or GeneratorSettings()
    for index in range(1, request.count + 1):
        password = assemble_password(
            request.length,
            source,
            overprovision_factor=settings.overprovision_factor,
        )
        logger.debug("password %d/%d complete", index, request.count)
        yield password
