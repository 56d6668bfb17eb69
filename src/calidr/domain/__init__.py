"""Domain models for Calidr."""

from .person import Address, Email, Name, Person, Phone, Remark, Tag
from .task import (
    Event,
    EventDateTimes,
    Task,
    TaskKind,
    Title,
    Todo,
    TodoDateTime,
    format_schedule,
    schedule_start,
)

__all__ = [
    "Address",
    "Email",
    "Name",
    "Person",
    "Phone",
    "Remark",
    "Tag",
    "Event",
    "EventDateTimes",
    "Task",
    "TaskKind",
    "Title",
    "Todo",
    "TodoDateTime",
    "format_schedule",
    "schedule_start",
]
