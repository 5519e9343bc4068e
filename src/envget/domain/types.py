"""Coercion targets and value-source enums."""

from __future__ import annotations

from enum import StrEnum


class TargetType(StrEnum):
    """Typed values an accessor can coerce a raw value into."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    JSON = "json"
    LIST = "list"


class ValueSource(StrEnum):
    """Where an accessor's raw value came from."""

    ENVIRONMENT = "environment"
    FALLBACK = "fallback"
    ABSENT = "absent"
