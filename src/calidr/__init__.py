"""Calidr - validation and in-memory model for a personal task and contact manager."""

__version__ = "0.1.0"
__author__ = "Calidr Team"

from .domain import Event, Person, Task, TaskKind, Todo
from .errors import ParseException
from .index import Index
from .model import FilteredCollection, Model

__all__ = [
    "Event",
    "Person",
    "Task",
    "TaskKind",
    "Todo",
    "ParseException",
    "Index",
    "FilteredCollection",
    "Model",
    "__version__",
]
