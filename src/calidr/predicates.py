"""Predicates that drive the visible subset of a filtered collection."""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional, Tuple, TypeVar

from fuzzywuzzy import fuzz

from .config import get_config
from .domain import Person, Task

T = TypeVar("T")

Predicate = Callable[[T], bool]


def show_all() -> Predicate:
    """Build a predicate that admits every item."""
    return lambda unused: True


class KeywordPredicate(ABC):
    """Matches items with a word equal, ignoring case, to any keyword.

    With a fuzzy threshold above zero a word also matches a keyword when
    their ``fuzz.ratio`` score reaches the threshold, so ``"meting"`` can
    still find ``"Meeting"``.
    """

    def __init__(self, keywords: Iterable[str], fuzzy_threshold: Optional[int] = None):
        self.keywords: Tuple[str, ...] = tuple(k.lower() for k in keywords if k.strip())
        if fuzzy_threshold is None:
            fuzzy_threshold = get_config().fuzzy_match_threshold
        self.fuzzy_threshold = fuzzy_threshold

    @abstractmethod
    def text_of(self, item) -> str:
        """Return the text whose words are matched against the keywords."""
        pass

    def _word_matches(self, word: str, keyword: str) -> bool:
        if word == keyword:
            return True
        return self.fuzzy_threshold > 0 and fuzz.ratio(word, keyword) >= self.fuzzy_threshold

    def __call__(self, item) -> bool:
        words = self.text_of(item).lower().split()
        return any(
            self._word_matches(word, keyword)
            for keyword in self.keywords
            for word in words
        )

    def __eq__(self, other):
        if not isinstance(other, KeywordPredicate):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.keywords == other.keywords
            and self.fuzzy_threshold == other.fuzzy_threshold
        )

    def __hash__(self):
        return hash((type(self), self.keywords, self.fuzzy_threshold))

    def __repr__(self):
        return f"{type(self).__name__}(keywords={list(self.keywords)!r}, fuzzy_threshold={self.fuzzy_threshold})"


class NameContainsKeywordsPredicate(KeywordPredicate):
    """Tests that a person's name contains any of the keywords."""

    def text_of(self, item: Person) -> str:
        return item.name.value


class TitleContainsKeywordsPredicate(KeywordPredicate):
    """Tests that a task's title contains any of the keywords."""

    def text_of(self, item: Task) -> str:
        return item.title.value
