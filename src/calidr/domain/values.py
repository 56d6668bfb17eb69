"""Base class for single-string value objects."""

import re
from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass(frozen=True)
class ValidatedText:
    """Immutable string value that is valid by construction.

    Subclasses set ``VALIDATION_REGEX`` (matched against the whole value)
    and ``MESSAGE_CONSTRAINTS``, the text shown to users when input is
    rejected. A subclass with no regex accepts any string.
    """

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    VALIDATION_REGEX: ClassVar[Optional[re.Pattern]] = None

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"{type(self).__name__} value must be a string, got {type(self.value).__name__}")
        if not self.is_valid(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        if cls.VALIDATION_REGEX is None:
            return True
        return cls.VALIDATION_REGEX.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.value


def compile_ascii(pattern: str) -> re.Pattern:
    """Compile ``pattern`` with ASCII-only character classes."""
    return re.compile(pattern, re.ASCII)
