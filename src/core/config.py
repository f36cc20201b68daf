"""Core configuration.

Bounds and tunables for password generation live here so the CLI, the domain
models and the pipeline share one source of truth.

Note: nothing is read from files or environment variables; settings are built
in code from CLI options.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


DEFAULT_COUNT = 1
DEFAULT_LENGTH = 16

MAX_COUNT = 10
MAX_LENGTH = 256

# Raw bytes requested per read, as a multiple of the characters still missing.
OVERPROVISION_FACTOR = 4


class GeneratorSettings(BaseModel):
    """Tunables for the generation pipeline."""

    model_config = ConfigDict(frozen=True)

    overprovision_factor: int = Field(
        default=OVERPROVISION_FACTOR,
        ge=1,
        description="Raw bytes requested per read for each missing character.",
    )
    entropy_device: Path | None = Field(
        default=None,
        description="Random device file to read (e.g. /dev/urandom). None uses os.urandom.",
    )
