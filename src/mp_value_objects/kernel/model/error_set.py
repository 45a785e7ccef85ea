"""Errors — ordered ``attribute -> messages`` map filled by validation."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Final

BASE: Final = "base"


class Errors:
    """Validation errors of one value object or collection.

    Keys are attribute names, or :data:`BASE` for errors about the whole
    object.  Looking up a key with no errors returns an empty list.
    """

    __slots__ = ("_messages",)

    def __init__(self) -> None:
        self._messages: dict[str, list[str]] = {}

    def add(self, attribute: str, message: str) -> None:
        self._messages.setdefault(attribute, []).append(message)

    def clear(self) -> None:
        self._messages.clear()

    def __getitem__(self, attribute: str) -> list[str]:
        return list(self._messages.get(attribute, ()))

    def __contains__(self, attribute: object) -> bool:
        return attribute in self._messages

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._messages))

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Errors):
            return self._messages == other._messages
        if isinstance(other, dict):
            return self._messages == other
        return NotImplemented

    def items(self) -> list[tuple[str, list[str]]]:
        return [(attribute, list(messages)) for attribute, messages in self._messages.items()]

    def to_dict(self) -> dict[str, list[str]]:
        return {attribute: list(messages) for attribute, messages in self._messages.items()}

    def to_list(self) -> list[dict[str, Any]]:
        """Flatten to ``[{"attribute": ..., "message": ...}, ...]``."""
        return [
            {"attribute": attribute, "message": message}
            for attribute, messages in self._messages.items()
            for message in messages
        ]

    def full_messages(self) -> list[str]:
        """Human-readable messages, prefixed with the attribute name."""
        return [
            message if attribute == BASE else f"{attribute} {message}"
            for attribute, messages in self._messages.items()
            for message in messages
        ]

    def __repr__(self) -> str:  # pragma: no cover
        return f"Errors({self._messages!r})"


__all__ = ["BASE", "Errors"]
