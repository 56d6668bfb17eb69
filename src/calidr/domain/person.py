"""Contact model: a person and the value objects describing them."""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from .values import ValidatedText, compile_ascii


@dataclass(frozen=True)
class Name(ValidatedText):
    """A person's name: alphanumerics and spaces, starting with an alphanumeric."""

    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    )
    VALIDATION_REGEX = compile_ascii(r"[A-Za-z0-9][A-Za-z0-9 ]*")


@dataclass(frozen=True)
class Phone(ValidatedText):
    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )
    VALIDATION_REGEX = compile_ascii(r"\d{3,}")


_SPECIAL_CHARACTERS = "+_.-"
_ALPHANUMERIC_NO_UNDERSCORE = r"[^\W_]+"
_LOCAL_PART_REGEX = (
    _ALPHANUMERIC_NO_UNDERSCORE
    + "([" + _SPECIAL_CHARACTERS + "]" + _ALPHANUMERIC_NO_UNDERSCORE + ")*"
)
_DOMAIN_PART_REGEX = _ALPHANUMERIC_NO_UNDERSCORE + "(-" + _ALPHANUMERIC_NO_UNDERSCORE + ")*"
_DOMAIN_REGEX = r"(" + _DOMAIN_PART_REGEX + r"\.)*" + _DOMAIN_PART_REGEX
# The last label must hold two adjacent alphanumerics, so "a-b" is too short.
_LAST_LABEL_PAIR = compile_ascii(r"[^\W_]{2}")


@dataclass(frozen=True)
class Email(ValidatedText):
    """An email address of the form ``local-part@domain``."""

    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special characters, "
        "excluding the parentheses, (" + _SPECIAL_CHARACTERS + "). The local-part may not start or end "
        "with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
        "separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
    )
    VALIDATION_REGEX = compile_ascii(_LOCAL_PART_REGEX + "@" + _DOMAIN_REGEX)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        if not super().is_valid(text):
            return False
        domain = text.rsplit("@", 1)[1]
        last_label = domain.rsplit(".", 1)[-1]
        return _LAST_LABEL_PAIR.search(last_label) is not None


@dataclass(frozen=True)
class Address(ValidatedText):
    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
    VALIDATION_REGEX = compile_ascii(r"[^\s].*")


@dataclass(frozen=True)
class Remark(ValidatedText):
    """Free-form note about a person. Any text, including empty, is accepted."""


@dataclass(frozen=True)
class Tag(ValidatedText):
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    VALIDATION_REGEX = compile_ascii(r"[A-Za-z0-9]+")


@dataclass(frozen=True)
class Person:
    """A contact entry. Every field is an already-validated value object."""

    name: Name
    phone: Phone
    email: Email
    address: Address
    remark: Remark = field(default_factory=lambda: Remark(""))
    tags: FrozenSet[Tag] = frozenset()

    def __post_init__(self):
        # Accept any iterable of tags but always store an immutable set.
        object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_person(self, other: Optional["Person"]) -> bool:
        """Return True if ``other`` is the same contact, i.e. has the same name."""
        if other is self:
            return True
        return other is not None and other.name == self.name
