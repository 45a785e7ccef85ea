"""Rule — the capability interface value objects expose to validation.

A rule looks at a record's current attribute values and reports zero or
more ``(attribute, message)`` pairs.  Value objects list their rules in a
plain ``rules`` tuple; nothing here depends on a declaration DSL.
"""

from __future__ import annotations

import abc
from collections.abc import Callable, Iterable
from typing import Any

ErrorPair = tuple[str, str]


class Rule(abc.ABC):
    """Abstract validation rule.

    Example::

        class StartsBeforeEnd(Rule):
            def evaluate(self, record):
                if record.start > record.end:
                    return [("start", "must be before end")]
                return []
    """

    @abc.abstractmethod
    def evaluate(self, record: Any) -> list[ErrorPair]: ...


class AttributeRule(Rule):
    """A rule applied independently to each of a set of attributes.

    Subclasses implement :meth:`check`, returning an error message or
    ``None``.  With ``allow_none=True`` absent values are skipped.
    """

    default_message: str = "is invalid"

    def __init__(
        self,
        *attributes: str,
        message: str | None = None,
        allow_none: bool = False,
    ) -> None:
        if not attributes:
            raise ValueError(f"{type(self).__name__} needs at least one attribute")
        self.attributes: tuple[str, ...] = attributes
        self.message = message
        self.allow_none = allow_none

    def evaluate(self, record: Any) -> list[ErrorPair]:
        errors: list[ErrorPair] = []
        for attribute in self.attributes:
            value = record.get(attribute)
            if value is None and self.allow_none:
                continue
            message = self.check(value)
            if message is not None:
                errors.append((attribute, self.message or message))
        return errors

    @abc.abstractmethod
    def check(self, value: Any) -> str | None: ...

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}({', '.join(map(repr, self.attributes))})"


class LambdaRule(Rule):
    """Wraps a plain callable as a ``Rule``.

    Example::

        zip_or_city = LambdaRule(
            lambda r: [] if r.zip or r.city else [("base", "needs zip or city")],
            name="zip_or_city",
        )
    """

    def __init__(
        self,
        fn: Callable[[Any], Iterable[ErrorPair]],
        *,
        name: str = "",
    ) -> None:
        self._fn = fn
        self.name: str = name or getattr(fn, "__name__", "<lambda>")

    def evaluate(self, record: Any) -> list[ErrorPair]:
        return list(self._fn(record))

    def __repr__(self) -> str:  # pragma: no cover
        return f"LambdaRule({self.name!r})"


__all__ = ["AttributeRule", "ErrorPair", "LambdaRule", "Rule"]
