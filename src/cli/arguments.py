"""Positional argument parsing.

Turns the raw `[COUNT LENGTH]` tokens into a validated `PasswordRequest`.
"""

from __future__ import annotations

import re
from typing import Any, Sequence

from pydantic import ValidationError as PydanticValidationError

from core.domain.models import PasswordRequest
from core.errors import UsageError, ValidationError

_DECIMAL = re.compile(r"[0-9]+")


def parse_positive_int(value: str) -> int:
    """Parse an unsigned, non-zero decimal literal."""

    if not _DECIMAL.fullmatch(value) or int(value) == 0:
        raise ValidationError(f"'{value}' is not a positive integer")
    return int(value)


def _describe(error: dict[str, Any]) -> str:
    field = error["loc"][0] if error.get("loc") else "value"
    ctx = error.get("ctx") or {}
    if error.get("type") == "less_than_equal":
        return f"{field} must not exceed {ctx['le']} (got {error['input']})"
    return f"{field}: {error['msg']}"


def parse_arguments(args: Sequence[str]) -> PasswordRequest:
    """Build a request from zero or two positional arguments."""

    if not args:
        return PasswordRequest()
    if len(args) != 2:
        raise UsageError(f"expected 0 or 2 arguments, got {len(args)}")

    count = parse_positive_int(args[0])
    length = parse_positive_int(args[1])
    try:
        return PasswordRequest(count=count, length=length)
    except PydanticValidationError as exc:
        raise ValidationError(_describe(exc.errors()[0])) from exc
