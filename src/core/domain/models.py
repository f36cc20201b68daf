"""Domain models (Pydantic v2).

Note:
- These models describe *what* a generation run asks for, not *how* the
  arguments were obtained.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.config import DEFAULT_COUNT, DEFAULT_LENGTH, MAX_COUNT, MAX_LENGTH


class PasswordRequest(BaseModel):
    """How many passwords to generate and how long each one is.

    Bounds are enforced here; the CLI only checks that the arguments are
    positive decimal literals.
    """

    model_config = ConfigDict(frozen=True)

    count: int = Field(
        default=DEFAULT_COUNT,
        ge=1,
        le=MAX_COUNT,
        strict=True,
        description="Number of passwords to generate.",
    )
    length: int = Field(
        default=DEFAULT_LENGTH,
        ge=1,
        le=MAX_LENGTH,
        strict=True,
        description="Exact number of characters per password.",
    )
