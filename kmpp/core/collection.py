# SPDX-License-Identifier: MIT
"""Live (observable) collections of build model objects.

Every registration API in kmpp is "live": an action registered with
``all()`` sees the elements already present and every element added later.
Code that only snapshots a collection at registration time would miss
targets, compilations or configurations created by later configuration
code, so the plugin wiring is written entirely in terms of these
collections.

Example:
    targets = NamedDomainObjectCollection[Target]("target")
    targets.all(lambda t: print("seen", t.name))   # existing + future
    targets.add(jvm)                                 # prints "seen jvm"
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from kmpp.core.errors import NamingConflictError, UnknownDomainObjectError

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S")

Action = Callable[[T], Any]


class _LiveView(Generic[T]):
    """Common API for live collections and their filtered views."""

    def all(self, action: Action[T]) -> None:
        """Run action for every current and future element."""
        raise NotImplementedError

    def when_object_added(self, action: Action[T]) -> None:
        """Run action for every element added from now on."""
        raise NotImplementedError

    def _snapshot(self) -> list[T]:
        raise NotImplementedError

    def matching(self, predicate: Callable[[T], bool]) -> DomainObjectView[T]:
        """Return a live view of the elements satisfying predicate.

        The predicate is evaluated once per element, when the element
        is added (or when the view is subscribed, for existing elements).
        """
        return DomainObjectView(self, predicate)

    def with_type(self, cls: type[S]) -> DomainObjectView[S]:
        """Return a live view of the elements that are instances of cls."""
        return DomainObjectView(self, lambda item: isinstance(item, cls))  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self._snapshot())

    def __len__(self) -> int:
        return len(self._snapshot())


class DomainObjectView(_LiveView[T]):
    """A filtered, live view over another collection."""

    def __init__(self, source: _LiveView[Any], predicate: Callable[[Any], bool]) -> None:
        self._source = source
        self._predicate = predicate

    def all(self, action: Action[T]) -> None:
        predicate = self._predicate

        def _filtered(item: T) -> None:
            if predicate(item):
                action(item)

        self._source.all(_filtered)

    def when_object_added(self, action: Action[T]) -> None:
        predicate = self._predicate

        def _filtered(item: T) -> None:
            if predicate(item):
                action(item)

        self._source.when_object_added(_filtered)

    def _snapshot(self) -> list[T]:
        return [item for item in self._source._snapshot() if self._predicate(item)]


class DomainObjectSet(_LiveView[T]):
    """An insertion-ordered set of objects that notifies listeners on add.

    Adding an object that is already present is a no-op.
    """

    def __init__(self) -> None:
        self._items: list[T] = []
        self._listeners: list[Action[T]] = []

    def add(self, item: T) -> bool:
        """Add an element and notify listeners.

        Returns:
            True if the element was added, False if it was already present.
        """
        if any(existing is item for existing in self._items):
            return False
        self._items.append(item)
        self._notify(item)
        return True

    def _notify(self, item: T) -> None:
        # Listeners registered while notifying have already seen item via all()
        for listener in list(self._listeners):
            listener(item)

    def all(self, action: Action[T]) -> None:
        self._listeners.append(action)
        for item in list(self._items):
            action(item)

    def when_object_added(self, action: Action[T]) -> None:
        self._listeners.append(action)

    def _snapshot(self) -> list[T]:
        return list(self._items)

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items!r})"


class NamedDomainObjectCollection(DomainObjectSet[T]):
    """A live collection of objects with unique ``name`` attributes.

    Attributes:
        kind: Human readable element kind used in error messages.
    """

    def __init__(self, kind: str) -> None:
        super().__init__()
        self.kind = kind
        self._by_name: dict[str, T] = {}

    def add(self, item: T) -> bool:
        """Register an element.

        Raises:
            NamingConflictError: If an element with the same name exists.
                The collection is left unchanged.
        """
        name: str = item.name  # type: ignore[attr-defined]
        existing = self._by_name.get(name)
        if existing is not None:
            raise NamingConflictError(
                self.kind,
                name,
                existing_location=getattr(existing, "defined_at", None),
                location=getattr(item, "defined_at", None),
            )
        self._by_name[name] = item
        self._items.append(item)
        logger.debug("Added %s '%s'", self.kind, name)
        self._notify(item)
        return True

    def find(self, name: str) -> T | None:
        """Return the element with the given name, or None."""
        return self._by_name.get(name)

    def get(self, name: str) -> T:
        """Return the element with the given name.

        Raises:
            UnknownDomainObjectError: If there is no such element.
        """
        item = self._by_name.get(name)
        if item is None:
            raise UnknownDomainObjectError(self.kind, name)
        return item

    def named(self, name: str) -> DomainObjectView[T]:
        """Live view of the element with the given name (present or future)."""
        return self.matching(lambda item: item.name == name)  # type: ignore[attr-defined]

    @property
    def names(self) -> list[str]:
        """Element names in registration order."""
        return list(self._by_name)

    def __getitem__(self, name: str) -> T:
        return self.get(name)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._by_name
        return super().__contains__(item)


class NamedDomainObjectContainer(NamedDomainObjectCollection[T]):
    """A named collection that can create its own elements.

    Example:
        source_sets = NamedDomainObjectContainer("source set", SourceSet)
        common = source_sets.create("commonMain")
    """

    def __init__(self, kind: str, factory: Callable[[str], T]) -> None:
        super().__init__(kind)
        self._factory = factory

    def create(self, name: str, configure: Action[T] | None = None) -> T:
        """Create, register and optionally configure a new element.

        Raises:
            NamingConflictError: If the name is already taken.
        """
        existing = self.find(name)
        if existing is not None:
            raise NamingConflictError(
                self.kind, name, existing_location=getattr(existing, "defined_at", None)
            )
        item = self._factory(name)
        self.add(item)
        if configure is not None:
            configure(item)
        return item

    def maybe_create(self, name: str) -> T:
        """Return the element with the given name, creating it if needed."""
        existing = self.find(name)
        if existing is not None:
            return existing
        return self.create(name)
