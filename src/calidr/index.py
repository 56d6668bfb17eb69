"""User-facing list positions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Index:
    """A position in a displayed list.

    Users see 1-based positions while sequences are addressed 0-based. The
    two representations are only converted through the named constructors
    and accessors below.
    """

    zero_based: int

    def __post_init__(self):
        if self.zero_based < 0:
            raise IndexError(f"Index must not be negative, got {self.zero_based}")

    @classmethod
    def from_zero_based(cls, zero_based: int) -> "Index":
        return cls(zero_based)

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based - 1)

    def to_zero_based(self) -> int:
        return self.zero_based

    def to_one_based(self) -> int:
        return self.zero_based + 1
