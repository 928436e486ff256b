# SPDX-License-Identifier: MIT
"""Typed attribute bags used for variant-aware dependency matching.

An attribute bag maps typed keys to values. Compilations carry one
describing what they produce (platform type, native target, ...), and the
plugin copies those attributes onto the host configurations that consume
or expose the compilation's output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from kmpp.core.errors import ConfigureError, PropagationConsistencyError

logger = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass(frozen=True)
class Attribute(Generic[V]):
    """An opaque, typed attribute key.

    Two keys are equal when both name and value type are equal.

    Attributes:
        name: Fully qualified attribute name.
        type: Type every value for this key must have.
    """

    name: str
    type: type

    @classmethod
    def of(cls, name: str, type_: type[V]) -> Attribute[V]:
        return cls(name, type_)

    def __str__(self) -> str:
        return self.name


class AttributeContainer:
    """A mutable bag of attribute values.

    Values are either stored directly or computed on access by a provider
    function; a provider may return None when it has no value yet.

    Attributes:
        owner: Description of the owning object, used in error messages.
    """

    def __init__(self, owner: str = "attribute container") -> None:
        self.owner = owner
        self._values: dict[Attribute[Any], Any] = {}
        self._providers: dict[Attribute[Any], Callable[[], Any]] = {}

    def attribute(self, key: Attribute[V], value: V) -> AttributeContainer:
        """Set an attribute value (fluent API).

        Raises:
            ConfigureError: If value is None or not of the key's type.
        """
        if value is None:
            raise ConfigureError(f"{self.owner}: attribute '{key}' cannot be set to None")
        if not isinstance(value, key.type):
            raise ConfigureError(
                f"{self.owner}: unexpected type for attribute '{key}': "
                f"expected {key.type.__name__}, got {type(value).__name__}"
            )
        self._providers.pop(key, None)
        self._values[key] = value
        return self

    def attribute_provider(
        self, key: Attribute[V], provider: Callable[[], V | None]
    ) -> AttributeContainer:
        """Set an attribute whose value is computed when read (fluent API)."""
        self._values.pop(key, None)
        self._providers[key] = provider
        return self

    def get_attribute(self, key: Attribute[V]) -> V | None:
        """Return the value for key, or None if absent or not yet known."""
        if key in self._values:
            return self._values[key]
        provider = self._providers.get(key)
        if provider is None:
            return None
        value = provider()
        if value is not None and not isinstance(value, key.type):
            raise ConfigureError(
                f"{self.owner}: provider for attribute '{key}' returned "
                f"{type(value).__name__}, expected {key.type.__name__}"
            )
        return value

    def key_set(self) -> list[Attribute[Any]]:
        """All keys in this bag, in insertion order."""
        keys = list(self._values)
        keys.extend(k for k in self._providers if k not in self._values)
        return keys

    def as_dict(self) -> dict[str, Any]:
        """Resolved values keyed by attribute name."""
        return {key.name: self.get_attribute(key) for key in self.key_set()}

    def is_empty(self) -> bool:
        return not self._values and not self._providers

    def __contains__(self, key: object) -> bool:
        return key in self._values or key in self._providers

    def __len__(self) -> int:
        return len(self.key_set())

    def __repr__(self) -> str:
        return f"AttributeContainer({self.owner!r}, {self.as_dict()!r})"


def copy_attributes(source: AttributeContainer, destination: AttributeContainer) -> None:
    """Copy every attribute of source into destination, unconditionally.

    Existing values in destination are overwritten.

    Raises:
        PropagationConsistencyError: If a key of source has no value.
            Keys copied before the failing one stay copied.
    """
    for key in source.key_set():
        value = source.get_attribute(key)
        if value is None:
            raise PropagationConsistencyError(key.name, source.owner, destination.owner)
        destination.attribute(key, value)
        logger.debug("Copied %s=%r from %s to %s", key, value, source.owner, destination.owner)
