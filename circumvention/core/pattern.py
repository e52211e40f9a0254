"""Plain, wildcard and regular expression patterns."""

import re
from enum import Enum
from typing import Optional

from circumvention.exceptions import InvalidPattern, InvalidInput


class PatternKind(str, Enum):
    SUBSTRING = "substring"
    WILDCARD = "wildcard"
    REGEX = "regex"


# Runs of "*" collapse into a single "anything, newlines included"
_WILDCARD_SPLIT = re.compile(r"\*+")
_WILDCARD_ANY = r"[\s\S]*"


class Pattern:
    """A compiled pattern used to test URLs and response content.

    The kind is picked from the shape of the source string:

    1. ``/body/`` (longer than two characters) is a regular expression,
       matched anywhere, case-insensitive and multiline.
    2. Anything containing ``*`` is a wildcard; ``*`` matches any text
       including newlines, the whole string must match, case-insensitive.
    3. Everything else is a case-sensitive substring test.
    """

    __slots__ = ("_source", "_kind", "_regex")

    def __init__(self, source: Optional[str]):
        if not source or not isinstance(source, str):
            raise InvalidPattern("Pattern cannot be empty")

        self._source = source
        self._regex: Optional[re.Pattern] = None

        if source.startswith("/") and source.endswith("/") and len(source) > 2:
            self._kind = PatternKind.REGEX
            try:
                self._regex = re.compile(source[1:-1], re.IGNORECASE | re.MULTILINE)
            except re.error as e:
                raise InvalidPattern(f"Invalid regular expression {source}: {e}") from e
        elif "*" in source:
            self._kind = PatternKind.WILDCARD
            body = _WILDCARD_ANY.join(re.escape(part) for part in _WILDCARD_SPLIT.split(source))
            self._regex = re.compile(rf"\A{body}\Z", re.IGNORECASE)
        else:
            self._kind = PatternKind.SUBSTRING

    @classmethod
    def compile(cls, source: Optional[str]) -> "Pattern":
        return cls(source)

    @property
    def source(self) -> str:
        return self._source

    @property
    def kind(self) -> PatternKind:
        return self._kind

    def test(self, text: str) -> bool:
        """Check if the text matches this pattern."""
        if not isinstance(text, str):
            raise InvalidInput(f"Pattern can only test strings, got {type(text).__name__}")

        if self._regex is not None:
            return self._regex.search(text) is not None

        return self._source in text

    matches = test

    def __str__(self) -> str:
        return self._source

    def __repr__(self) -> str:
        return f"Pattern({self._source!r}, kind={self._kind.value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self._source == other._source

    def __hash__(self) -> int:
        return hash(self._source)
