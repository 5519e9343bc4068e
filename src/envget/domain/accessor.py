"""VariableAccessor — one variable's name and raw value, plus its coercions.

Usage::

    port = resolver.get("PORT", "8080").required().as_int()
    debug = resolver.get("DEBUG").as_bool()  # None when unset

INVARIANT: an absent raw value coerces to ``None`` and never reaches a
parser. A present raw value, real or fallback, always goes through the
strict parser for the requested type.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, Field

from envget.domain import parsers
from envget.domain.types import TargetType, ValueSource
from envget.errors import MissingVariableError, ParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class VariableAccessor(BaseModel):
    """Immutable accessor over a single resolved variable.

    Attributes:
        name: Variable name.
        raw_value: Text from the environment or the substituted fallback,
            or None when the variable is unset.
        source: Where *raw_value* came from. Informational only.
    """

    model_config = {"frozen": True}

    name: str = Field(min_length=1)
    raw_value: str | None = None
    source: ValueSource = ValueSource.ENVIRONMENT

    @property
    def is_set(self) -> bool:
        return self.raw_value is not None

    def required(self) -> VariableAccessor:
        """Fail now with :class:`MissingVariableError` if the value is absent.

        Returns the same accessor so a coercion can be chained.
        """
        if self.raw_value is None:
            logger.debug("Required variable missing: %s", self.name)
            raise MissingVariableError(self.name)
        return self

    def _coerce(self, target: TargetType, parse: Callable[[str], T]) -> T | None:
        if self.raw_value is None:
            return None
        try:
            return parse(self.raw_value)
        except ValueError as exc:
            logger.debug("Variable %s failed %s coercion", self.name, target)
            raise ParseError(self.name, target, self.raw_value) from exc

    def as_string(self) -> str | None:
        return self.raw_value

    def as_int(self) -> int | None:
        """Strict integer. ``"1.2"`` fails; nothing is truncated or rounded."""
        return self._coerce(TargetType.INT, parsers.parse_int)

    def as_float(self) -> float | None:
        return self._coerce(TargetType.FLOAT, parsers.parse_float)

    def as_bool(self) -> bool | None:
        """Exactly ``"true"`` or ``"false"``; no other aliases."""
        return self._coerce(TargetType.BOOL, parsers.parse_bool)

    def as_json(self) -> Any:
        """Parsed JSON value, or None when unset.

        The JSON text ``null`` also yields None; check :attr:`is_set` when
        the two must be told apart.
        """
        return self._coerce(TargetType.JSON, parsers.parse_json)

    def as_list(self, separator: str = ",") -> list[str] | None:
        """Items split on *separator* with whitespace stripped and blanks dropped."""
        if not separator:
            msg = "separator must be a non-empty string"
            raise ValueError(msg)
        return self._coerce(TargetType.LIST, lambda raw: parsers.parse_list(raw, separator))
