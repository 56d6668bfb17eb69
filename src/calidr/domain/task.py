"""Task model: titles, temporal parameters and the two task variants.

A task is either a ``Todo`` with a single deadline or an ``Event`` with a
start and an end. Both carry a ``Title``; they differ only in their
temporal payload. Code that needs variant-specific behaviour switches on
``task.kind`` instead of relying on method overrides.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Union

from ..errors import EventOrderError
from ..utils.datetime import format_date_time
from .values import ValidatedText, compile_ascii


class TaskKind(Enum):
    """Variant tag of a task."""
    TODO = "todo"
    EVENT = "event"


@dataclass(frozen=True)
class Title(ValidatedText):
    MESSAGE_CONSTRAINTS = "Titles can take any values, and it should not be blank"
    VALIDATION_REGEX = compile_ascii(r"[^\s].*")


@dataclass(frozen=True)
class TodoDateTime:
    """The deadline a todo must be completed by."""

    by: datetime

    def __str__(self) -> str:
        return format_date_time(self.by)


@dataclass(frozen=True)
class EventDateTimes:
    """The start and end of an event.

    Chronological order is not checked on construction. Use ``ordered`` to
    build an instance that rejects a start later than its end.
    """

    start: datetime
    end: datetime

    @classmethod
    def ordered(cls, start: datetime, end: datetime) -> "EventDateTimes":
        """Build an instance, raising EventOrderError if ``start`` is after ``end``."""
        if start > end:
            raise EventOrderError(format_date_time(start), format_date_time(end))
        return cls(start, end)

    @property
    def is_chronological(self) -> bool:
        return self.start <= self.end

    def __str__(self) -> str:
        return f"{format_date_time(self.start)} to {format_date_time(self.end)}"


@dataclass(frozen=True)
class Todo:
    title: Title
    by: TodoDateTime
    kind: TaskKind = field(default=TaskKind.TODO, init=False)


@dataclass(frozen=True)
class Event:
    title: Title
    date_times: EventDateTimes
    kind: TaskKind = field(default=TaskKind.EVENT, init=False)


Task = Union[Todo, Event]


def format_schedule(task: Task) -> str:
    """Describe when a task is due or takes place, e.g. ``by 15-03-2024 1430``."""
    if task.kind is TaskKind.TODO:
        return f"by {task.by}"
    if task.kind is TaskKind.EVENT:
        return f"from {task.date_times}"
    raise ValueError(f"Unknown task kind: {task.kind!r}")


def schedule_start(task: Task) -> datetime:
    """Return the earliest date-time attached to a task, for ordering."""
    if task.kind is TaskKind.TODO:
        return task.by.by
    if task.kind is TaskKind.EVENT:
        return min(task.date_times.start, task.date_times.end)
    raise ValueError(f"Unknown task kind: {task.kind!r}")
