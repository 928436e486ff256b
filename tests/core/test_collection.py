# SPDX-License-Identifier: MIT
"""Tests for kmpp.core.collection."""

from dataclasses import dataclass

import pytest

from kmpp.core.collection import (
    DomainObjectSet,
    NamedDomainObjectCollection,
    NamedDomainObjectContainer,
)
from kmpp.core.errors import NamingConflictError, UnknownDomainObjectError


@dataclass(eq=False)
class Item:
    name: str
    flag: bool = False


class TestDomainObjectSet:
    def test_all_sees_existing_and_future(self):
        items = DomainObjectSet()
        a, b = Item("a"), Item("b")
        items.add(a)

        seen = []
        items.all(seen.append)
        assert seen == [a]

        items.add(b)
        assert seen == [a, b]

    def test_when_object_added_sees_only_future(self):
        items = DomainObjectSet()
        a, b = Item("a"), Item("b")
        items.add(a)

        seen = []
        items.when_object_added(seen.append)
        items.add(b)
        assert seen == [b]

    def test_add_same_object_twice_is_noop(self):
        items = DomainObjectSet()
        a = Item("a")
        seen = []
        items.all(seen.append)

        assert items.add(a) is True
        assert items.add(a) is False
        assert seen == [a]
        assert len(items) == 1

    def test_element_added_by_listener_is_seen_once(self):
        items = DomainObjectSet()
        a, b = Item("a"), Item("b")
        items.add(a)

        seen = []

        def _listener(item):
            seen.append(item)
            if item is a:
                items.add(b)

        items.all(_listener)
        assert seen == [a, b]

    def test_matching_is_live(self):
        items = DomainObjectSet()
        items.add(Item("a", flag=True))
        items.add(Item("b"))

        seen = []
        items.matching(lambda i: i.flag).all(lambda i: seen.append(i.name))
        items.add(Item("c", flag=True))
        items.add(Item("d"))

        assert seen == ["a", "c"]

    def test_with_type(self):
        class Special(Item):
            pass

        items = DomainObjectSet()
        items.add(Item("plain"))
        special = Special("special")
        items.add(special)

        assert list(items.with_type(Special)) == [special]


class TestNamedDomainObjectCollection:
    def test_find_and_get(self):
        items = NamedDomainObjectCollection("item")
        a = Item("a")
        items.add(a)

        assert items.find("a") is a
        assert items.get("a") is a
        assert items["a"] is a
        assert items.find("missing") is None
        assert "a" in items
        assert a in items

    def test_get_missing_raises(self):
        items = NamedDomainObjectCollection("item")
        with pytest.raises(UnknownDomainObjectError) as excinfo:
            items.get("missing")
        assert "item with name 'missing' not found" in str(excinfo.value)

    def test_duplicate_name_raises_and_keeps_first(self):
        items = NamedDomainObjectCollection("item")
        first = Item("a")
        items.add(first)

        seen = []
        items.when_object_added(seen.append)
        with pytest.raises(NamingConflictError) as excinfo:
            items.add(Item("a"))

        assert excinfo.value.name == "a"
        assert excinfo.value.kind == "item"
        assert items.get("a") is first
        assert len(items) == 1
        assert seen == []

    def test_names_in_registration_order(self):
        items = NamedDomainObjectCollection("item")
        for name in ["b", "a", "c"]:
            items.add(Item(name))
        assert items.names == ["b", "a", "c"]

    def test_named_view_fires_when_element_appears(self):
        items = NamedDomainObjectCollection("item")
        seen = []
        items.named("late").all(lambda i: seen.append(i.name))

        items.add(Item("other"))
        assert seen == []
        items.add(Item("late"))
        assert seen == ["late"]


class TestNamedDomainObjectContainer:
    def test_create_and_configure(self):
        items = NamedDomainObjectContainer("item", Item)
        created = items.create("a", lambda i: setattr(i, "flag", True))

        assert created.name == "a"
        assert created.flag is True
        assert items.get("a") is created

    def test_create_duplicate_raises(self):
        items = NamedDomainObjectContainer("item", Item)
        items.create("a")
        with pytest.raises(NamingConflictError):
            items.create("a")

    def test_maybe_create(self):
        items = NamedDomainObjectContainer("item", Item)
        first = items.maybe_create("a")
        assert items.maybe_create("a") is first
        assert len(items) == 1
