"""In-memory model holding the contact and task collections.

Both collections are instances of ``FilteredCollection``: the full backing
data plus one active predicate deciding which items are visible. Filtering
never removes data; only ``delete``, ``set`` and ``reset`` change what is
stored.
"""

import logging
import operator
from collections.abc import Sequence
from typing import Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .domain import Person, Task
from .errors import DuplicateEntityError, EntityNotFoundError
from .index import Index
from .predicates import show_all

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[["FilteredCollection"], None]


class FilteredView(Sequence, Generic[T]):
    """Read-only, live view of the items a collection currently shows.

    The view holds no copy: every access re-evaluates the collection's
    current predicate over its current data.
    """

    def __init__(self, collection: "FilteredCollection[T]"):
        self._collection = collection

    def _snapshot(self) -> List[T]:
        predicate = self._collection.predicate
        return [item for item in self._collection.items if predicate(item)]

    def __getitem__(self, index):
        return self._snapshot()[index]

    def __len__(self) -> int:
        return len(self._snapshot())

    def __iter__(self) -> Iterator[T]:
        return iter(self._snapshot())

    def __repr__(self):
        return f"FilteredView({self._snapshot()!r})"


class FilteredCollection(Generic[T]):
    """An ordered collection of unique items with a replaceable visibility filter.

    Args:
        same_identity: Decides whether two items count as the same entity.
            Defaults to value equality.
        name: Label used in log messages.
    """

    def __init__(self, same_identity: Callable[[T, T], bool] = operator.eq, name: str = "items"):
        self._items: List[T] = []
        self._same_identity = same_identity
        self._predicate = show_all()
        self._view = FilteredView(self)
        self._listeners: List[Listener] = []
        self.name = name

    @property
    def items(self) -> Tuple[T, ...]:
        """All stored items in insertion order, regardless of the predicate."""
        return tuple(self._items)

    @property
    def predicate(self) -> Callable[[T], bool]:
        return self._predicate

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def _position_of(self, item: T) -> Optional[int]:
        for position, existing in enumerate(self._items):
            if self._same_identity(existing, item):
                return position
        return None

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def add_listener(self, listener: Listener) -> None:
        """Call ``listener`` with this collection after every change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def has(self, item: T) -> bool:
        """Return True if an item with the same identity as ``item`` is stored."""
        if item is None:
            raise TypeError("item must not be None")
        return self._position_of(item) is not None

    def add(self, item: T) -> None:
        """Append ``item``. It must not already be in the collection."""
        if self.has(item):
            raise DuplicateEntityError(item)
        self._items.append(item)
        logger.debug(f"Added to {self.name}: {item!r}")
        self._notify()

    def delete(self, item: T) -> None:
        """Remove ``item``. It must be in the collection."""
        if item is None:
            raise TypeError("item must not be None")
        position = self._position_of(item)
        if position is None:
            raise EntityNotFoundError(item)
        del self._items[position]
        logger.debug(f"Deleted from {self.name}: {item!r}")
        self._notify()

    def set(self, target: T, replacement: T) -> None:
        """Replace ``target`` with ``replacement`` in place.

        ``target`` must be in the collection and ``replacement`` must not
        have the same identity as any other stored item.
        """
        if target is None or replacement is None:
            raise TypeError("target and replacement must not be None")
        position = self._position_of(target)
        if position is None:
            raise EntityNotFoundError(target)
        for other_position, existing in enumerate(self._items):
            if other_position != position and self._same_identity(existing, replacement):
                raise DuplicateEntityError(replacement)
        self._items[position] = replacement
        logger.debug(f"Replaced in {self.name}: {target!r} -> {replacement!r}")
        self._notify()

    def reset(self, items: Iterable[T]) -> None:
        """Replace all stored items. Nothing changes if ``items`` has duplicates."""
        new_items: List[T] = []
        for item in items:
            if item is None:
                raise TypeError("item must not be None")
            if any(self._same_identity(existing, item) for existing in new_items):
                raise DuplicateEntityError(item)
            new_items.append(item)
        self._items = new_items
        logger.debug(f"Reset {self.name} with {len(new_items)} item(s)")
        self._notify()

    def set_predicate(self, predicate: Callable[[T], bool]) -> None:
        """Change which items are visible without touching the stored items."""
        if predicate is None:
            raise TypeError("predicate must not be None")
        self._predicate = predicate
        logger.debug(f"Updated {self.name} filter: {predicate!r}")
        self._notify()

    def show_all(self) -> None:
        """Restore the default predicate admitting every item."""
        self.set_predicate(show_all())

    def get_visible(self) -> FilteredView[T]:
        """Return the live read-only view of the visible items."""
        return self._view

    def get_visible_at(self, index: Index) -> T:
        """Return the visible item at a user-facing ``index``."""
        visible = list(self._view)
        position = index.to_zero_based()
        if position >= len(visible):
            raise IndexError(f"No visible {self.name} at position {index.to_one_based()}")
        return visible[position]


def _same_person(a: Person, b: Person) -> bool:
    return a.is_same_person(b)


class Model:
    """The contact list and task list presented to the user."""

    def __init__(self, persons: Iterable[Person] = (), tasks: Iterable[Task] = ()):
        self.persons: FilteredCollection[Person] = FilteredCollection(_same_person, name="persons")
        self.tasks: FilteredCollection[Task] = FilteredCollection(operator.eq, name="tasks")
        self.persons.reset(persons)
        self.tasks.reset(tasks)

    # Persons

    def set_persons(self, persons: Iterable[Person]) -> None:
        self.persons.reset(persons)

    def has_person(self, person: Person) -> bool:
        return self.persons.has(person)

    def add_person(self, person: Person) -> None:
        self.persons.add(person)
        self.persons.show_all()

    def delete_person(self, target: Person) -> None:
        self.persons.delete(target)

    def set_person(self, target: Person, edited_person: Person) -> None:
        self.persons.set(target, edited_person)

    def get_filtered_person_list(self) -> FilteredView[Person]:
        return self.persons.get_visible()

    def update_filtered_person_list(self, predicate: Callable[[Person], bool]) -> None:
        self.persons.set_predicate(predicate)

    def get_visible_person(self, index: Index) -> Person:
        return self.persons.get_visible_at(index)

    # Tasks

    def set_tasks(self, tasks: Iterable[Task]) -> None:
        self.tasks.reset(tasks)

    def has_task(self, task: Task) -> bool:
        return self.tasks.has(task)

    def add_task(self, task: Task) -> None:
        self.tasks.add(task)
        self.tasks.show_all()

    def delete_task(self, task: Task) -> None:
        self.tasks.delete(task)

    def set_task(self, target: Task, edited_task: Task) -> None:
        self.tasks.set(target, edited_task)

    def get_filtered_task_list(self) -> FilteredView[Task]:
        return self.tasks.get_visible()

    def update_filtered_task_list(self, predicate: Callable[[Task], bool]) -> None:
        self.tasks.set_predicate(predicate)

    def get_visible_task(self, index: Index) -> Task:
        return self.tasks.get_visible_at(index)
