"""Tests for the filtered collections and the model facade."""

import pytest
from datetime import datetime

from calidr.domain import (
    Address, Email, Event, EventDateTimes, Name, Person, Phone, Title, Todo, TodoDateTime,
)
from calidr.errors import DuplicateEntityError, EntityNotFoundError, ModelError
from calidr.index import Index
from calidr.model import FilteredCollection, Model
from calidr.predicates import TitleContainsKeywordsPredicate


def make_todo(title, day=15):
    return Todo(Title(title), TodoDateTime(datetime(2024, 3, day, 12, 0)))


def make_person(name, phone="12345678"):
    return Person(Name(name), Phone(phone), Email("someone@example.com"), Address("Somewhere"))


class TestFilteredCollection:
    """Test the generic collection contract."""

    def setup_method(self):
        self.collection = FilteredCollection()

    def test_starts_empty(self):
        assert len(self.collection) == 0
        assert list(self.collection.get_visible()) == []

    def test_add_then_has(self):
        self.collection.add("a")
        assert self.collection.has("a")
        assert "a" in self.collection.get_visible()

    def test_add_duplicate_fails(self):
        self.collection.add("a")
        with pytest.raises(DuplicateEntityError) as exc_info:
            self.collection.add("a")
        assert exc_info.value.item == "a"
        assert self.collection.items == ("a",)

    def test_insertion_order_preserved(self):
        for item in ["c", "a", "b"]:
            self.collection.add(item)
        assert self.collection.items == ("c", "a", "b")
        assert list(self.collection.get_visible()) == ["c", "a", "b"]

    def test_delete(self):
        self.collection.add("a")
        self.collection.delete("a")
        assert not self.collection.has("a")

    def test_delete_missing_fails(self):
        with pytest.raises(EntityNotFoundError):
            self.collection.delete("missing")

    def test_set_replaces_in_place(self):
        for item in ["a", "b", "c"]:
            self.collection.add(item)
        self.collection.set("b", "x")
        assert self.collection.items == ("a", "x", "c")

    def test_set_to_equal_value_is_allowed(self):
        self.collection.add("a")
        self.collection.set("a", "a")
        assert self.collection.items == ("a",)

    def test_set_missing_target_fails(self):
        self.collection.add("a")
        with pytest.raises(EntityNotFoundError):
            self.collection.set("missing", "b")

    def test_set_to_other_existing_fails(self):
        self.collection.add("a")
        self.collection.add("b")
        with pytest.raises(DuplicateEntityError):
            self.collection.set("a", "b")
        assert self.collection.items == ("a", "b")

    def test_precondition_errors_share_base(self):
        with pytest.raises(ModelError):
            self.collection.delete("missing")

    def test_none_rejected(self):
        with pytest.raises(TypeError):
            self.collection.add(None)
        with pytest.raises(TypeError):
            self.collection.set_predicate(None)

    def test_predicate_filters_without_removing(self):
        for item in ["apple", "banana", "avocado"]:
            self.collection.add(item)
        self.collection.set_predicate(lambda s: s.startswith("a"))
        assert list(self.collection.get_visible()) == ["apple", "avocado"]
        assert self.collection.has("banana")
        assert len(self.collection) == 3

    def test_view_is_live(self):
        visible = self.collection.get_visible()
        self.collection.add("apple")
        assert len(visible) == 1
        self.collection.set_predicate(lambda s: s.startswith("b"))
        assert len(visible) == 0
        self.collection.add("banana")
        assert visible[0] == "banana"
        assert visible is self.collection.get_visible()

    def test_show_all_restores_everything(self):
        self.collection.add("a")
        self.collection.set_predicate(lambda s: False)
        assert len(self.collection.get_visible()) == 0
        self.collection.show_all()
        assert list(self.collection.get_visible()) == ["a"]

    def test_default_predicate_not_shared(self):
        other = FilteredCollection()
        assert self.collection.predicate is not other.predicate

    def test_view_is_read_only(self):
        self.collection.add("a")
        visible = self.collection.get_visible()
        with pytest.raises(TypeError):
            visible[0] = "b"
        assert not hasattr(visible, "append")

    def test_reset(self):
        self.collection.add("a")
        self.collection.reset(["x", "y"])
        assert self.collection.items == ("x", "y")

    def test_reset_with_duplicates_leaves_collection_untouched(self):
        self.collection.add("a")
        with pytest.raises(DuplicateEntityError):
            self.collection.reset(["x", "x"])
        assert self.collection.items == ("a",)

    def test_custom_identity(self):
        collection = FilteredCollection(lambda a, b: a.lower() == b.lower())
        collection.add("Alice")
        assert collection.has("ALICE")
        with pytest.raises(DuplicateEntityError):
            collection.add("alice")

    def test_listeners_notified(self):
        calls = []
        self.collection.add_listener(lambda c: calls.append(len(c)))
        self.collection.add("a")
        self.collection.add("b")
        self.collection.delete("a")
        self.collection.set_predicate(lambda s: True)
        assert calls == [1, 2, 1, 1]

    def test_listener_not_notified_on_failure(self):
        calls = []
        self.collection.add("a")
        self.collection.add_listener(calls.append)
        with pytest.raises(DuplicateEntityError):
            self.collection.add("a")
        assert calls == []

    def test_remove_listener(self):
        calls = []
        self.collection.add_listener(calls.append)
        self.collection.remove_listener(calls.append)
        self.collection.add("a")
        assert calls == []

    def test_get_visible_at(self):
        for item in ["apple", "banana", "avocado"]:
            self.collection.add(item)
        self.collection.set_predicate(lambda s: s.startswith("a"))
        assert self.collection.get_visible_at(Index.from_one_based(2)) == "avocado"
        with pytest.raises(IndexError):
            self.collection.get_visible_at(Index.from_one_based(3))


class TestModel:
    """Test the model facade over persons and tasks."""

    def setup_method(self):
        self.model = Model()

    def test_tasks_use_value_identity(self):
        self.model.add_task(make_todo("Report"))
        assert self.model.has_task(make_todo("Report"))
        assert not self.model.has_task(make_todo("Report", day=16))
        with pytest.raises(DuplicateEntityError):
            self.model.add_task(make_todo("Report"))

    def test_same_title_different_kind_is_allowed(self):
        self.model.add_task(make_todo("Sync"))
        event = Event(Title("Sync"), EventDateTimes(datetime(2024, 3, 15, 9), datetime(2024, 3, 15, 10)))
        self.model.add_task(event)
        assert len(self.model.get_filtered_task_list()) == 2

    def test_persons_use_name_identity(self):
        self.model.add_person(make_person("Alice"))
        assert self.model.has_person(make_person("Alice", phone="999"))
        with pytest.raises(DuplicateEntityError):
            self.model.add_person(make_person("Alice", phone="999"))

    def test_set_person_keeps_same_name(self):
        alice = make_person("Alice")
        bob = make_person("Bob")
        self.model.set_persons([alice, bob])
        edited = make_person("Alice", phone="999")
        self.model.set_person(alice, edited)
        assert self.model.get_filtered_person_list()[0].phone == Phone("999")
        with pytest.raises(DuplicateEntityError):
            self.model.set_person(edited, make_person("Bob", phone="111"))

    def test_delete_person(self):
        alice = make_person("Alice")
        self.model.add_person(alice)
        self.model.delete_person(alice)
        assert not self.model.has_person(alice)

    def test_filter_tasks(self):
        self.model.set_tasks([make_todo("Write report"), make_todo("Buy milk"), make_todo("Report bug")])
        self.model.update_filtered_task_list(TitleContainsKeywordsPredicate(["report"]))
        titles = [task.title.value for task in self.model.get_filtered_task_list()]
        assert titles == ["Write report", "Report bug"]
        assert len(self.model.tasks) == 3

    def test_add_task_shows_all(self):
        self.model.add_task(make_todo("Write report"))
        self.model.update_filtered_task_list(lambda task: False)
        self.model.add_task(make_todo("Buy milk"))
        assert len(self.model.get_filtered_task_list()) == 2

    def test_collections_are_independent(self):
        self.model.add_task(make_todo("Report"))
        self.model.update_filtered_person_list(lambda person: False)
        assert len(self.model.get_filtered_task_list()) == 1

    def test_get_visible_task(self):
        self.model.set_tasks([make_todo("First"), make_todo("Second")])
        assert self.model.get_visible_task(Index.from_one_based(2)).title == Title("Second")

    def test_get_visible_person(self):
        self.model.set_persons([make_person("Alice")])
        assert self.model.get_visible_person(Index.from_one_based(1)).name == Name("Alice")

    def test_set_task_and_delete_task(self):
        original = make_todo("Report")
        edited = make_todo("Report v2")
        self.model.add_task(original)
        self.model.set_task(original, edited)
        assert self.model.has_task(edited)
        self.model.delete_task(edited)
        assert len(self.model.tasks) == 0

    def test_initial_data(self):
        model = Model(persons=[make_person("Alice")], tasks=[make_todo("Report")])
        assert len(model.get_filtered_person_list()) == 1
        assert len(model.get_filtered_task_list()) == 1
