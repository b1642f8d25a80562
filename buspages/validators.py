"""Validation of topic names."""

from __future__ import annotations

_RESERVED_NAME = "topics"
_MIN_LENGTH = 3
_MAX_LENGTH = 63


class InvalidTopicName(ValueError):
    """Raised when a topic name cannot be used."""


class InvalidNameFormat(InvalidTopicName):
    """The topic name breaks the naming rules."""


class NameIsReserved(InvalidTopicName):
    """The topic name is reserved by the system."""

    def __init__(self, message: str = "Topic name is reserved") -> None:
        super().__init__(message)


def _symbol_is_allowed(c: str) -> bool:
    return c == "-" or "0" <= c <= "9" or "a" <= c <= "z"


def validate_topic_name(name: str) -> None:
    """Check a topic name, raising an InvalidTopicName subclass if it is not valid."""
    if name == _RESERVED_NAME:
        raise NameIsReserved()

    raw = name.encode("utf-8")

    if len(raw) < _MIN_LENGTH:
        raise InvalidNameFormat("Table name must contain at least 3 symbols")

    if len(raw) > _MAX_LENGTH:
        raise InvalidNameFormat("Table name must contain 3-63 symbols")

    last_index = len(raw) - 1
    prev_char: str | None = None

    for position, byte in enumerate(raw):
        c = chr(byte)

        if position == 0 and c == "-":
            raise InvalidNameFormat("Table can not be started from '-' symbol")

        if position == last_index and c == "-":
            raise InvalidNameFormat("Table can not be ended with '-' symbol")

        if not _symbol_is_allowed(c):
            raise InvalidNameFormat(
                f"Symbol {c} is not allowed which stays at position {position}"
            )

        if c == "-" and prev_char == "-":
            raise InvalidNameFormat(
                "Two following '-' symbols are not allowed. "
                f"Check please position {position}"
            )

        prev_char = c