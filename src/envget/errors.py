"""Error taxonomy for variable resolution and coercion.

Both errors are fatal to the calling operation. The package never catches
or transforms them; they propagate to the caller, which decides whether
to recover, log, or terminate.

Each error exposes the same ``code`` / ``message`` / ``detail`` payload so
callers can report it uniformly.
"""

from __future__ import annotations

from typing import Any

from envget.domain.types import TargetType


class EnvgetError(Exception):
    """Base class for all envget errors."""

    code: str = "ENVGET_ERROR"

    def __init__(self, message: str, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail or {}


class MissingVariableError(EnvgetError):
    """A required variable is unset and had no fallback."""

    code = "MISSING_VARIABLE"

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Environment variable {name!r} is required but not set",
            {"name": name},
        )
        self.name = name


class ParseError(EnvgetError, ValueError):
    """A raw value (real or fallback) does not match the target type's grammar.

    Attributes:
        name: Variable name.
        target: The coercion that was attempted.
        raw_value: The offending raw text.
    """

    code = "PARSE_ERROR"

    def __init__(self, name: str, target: TargetType, raw_value: str) -> None:
        super().__init__(
            f"Environment variable {name!r} is not a valid {target}: {raw_value!r}",
            {"name": name, "target": str(target), "raw_value": raw_value},
        )
        self.name = name
        self.target = target
        self.raw_value = raw_value
