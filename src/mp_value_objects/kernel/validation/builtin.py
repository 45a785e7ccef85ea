"""Built-in attribute rules: presence, length, inclusion, format."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sized
from typing import Any

from mp_value_objects.kernel.validation.rule import AttributeRule


def is_blank(value: Any) -> bool:
    """``None``, whitespace-only strings and empty containers are blank."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return False


class PresenceRule(AttributeRule):
    """Fails when the value is blank (see :func:`is_blank`)."""

    default_message = "can't be blank"

    def check(self, value: Any) -> str | None:
        return self.default_message if is_blank(value) else None


class LengthRule(AttributeRule):
    """Bounds ``len(value)``; ``None`` counts as length zero."""

    def __init__(
        self,
        *attributes: str,
        minimum: int | None = None,
        maximum: int | None = None,
        message: str | None = None,
        allow_none: bool = False,
    ) -> None:
        super().__init__(*attributes, message=message, allow_none=allow_none)
        if minimum is None and maximum is None:
            raise ValueError("LengthRule needs minimum and/or maximum")
        self.minimum = minimum
        self.maximum = maximum

    def check(self, value: Any) -> str | None:
        length = 0 if value is None else len(value)
        if self.minimum is not None and length < self.minimum:
            return f"is too short (minimum is {self.minimum} characters)"
        if self.maximum is not None and length > self.maximum:
            return f"is too long (maximum is {self.maximum} characters)"
        return None


class InclusionRule(AttributeRule):
    """Value must be one of *choices*."""

    default_message = "is not included in the list"

    def __init__(
        self,
        *attributes: str,
        choices: Iterable[Any],
        message: str | None = None,
        allow_none: bool = False,
    ) -> None:
        super().__init__(*attributes, message=message, allow_none=allow_none)
        self.choices = tuple(choices)

    def check(self, value: Any) -> str | None:
        return None if value in self.choices else self.default_message


class FormatRule(AttributeRule):
    """String value must fully match *pattern*."""

    default_message = "is invalid"

    def __init__(
        self,
        *attributes: str,
        pattern: str | re.Pattern[str],
        message: str | None = None,
        allow_none: bool = False,
    ) -> None:
        super().__init__(*attributes, message=message, allow_none=allow_none)
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def check(self, value: Any) -> str | None:
        if isinstance(value, str) and self.pattern.fullmatch(value):
            return None
        return self.default_message


__all__ = ["FormatRule", "InclusionRule", "LengthRule", "PresenceRule", "is_blank"]
