"""Property sources — where ``Property`` values come from.

A source answers one question: what value, if any, does key K have?
Absence is an expected answer, never an error. Any object with a
``get_property(key)`` method satisfies :class:`PropertySource`; the
adapters below cover mappings, the process environment, and plain
lookup callables.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from propguard.domain.property import Property
from propguard.domain.validation import check_argument, check_not_none


@runtime_checkable
class PropertySource(Protocol):
    """Anything that can look up a :class:`Property` by key."""

    def get_property(self, key: str) -> Property[Any]: ...


class MappingPropertySource:
    """Looks keys up in a mapping. A key is present iff it is in the mapping.

    The mapping is referenced, not copied, so later changes to it are
    visible to subsequent lookups.
    """

    def __init__(self, mapping: Mapping[str, Any]) -> None:
        self._mapping = check_not_none(mapping, "Mapping must not be None")

    def get_property(self, key: str) -> Property[Any]:
        if key in self._mapping:
            return Property(key, self._mapping[key])
        return Property.empty(key)

    def __repr__(self) -> str:
        return f"MappingPropertySource({len(self._mapping)} keys)"


class EnvironmentPropertySource:
    """Reads keys from environment variables, with optional overrides.

    The environment is snapshotted at construction. Key ``K`` is read
    from variable ``prefix + K``. *overrides* use full variable names and
    take precedence over the environment.
    """

    def __init__(
        self,
        prefix: str = "",
        overrides: Mapping[str, str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._prefix = check_argument(
            prefix,
            isinstance(prefix, str),
            "Prefix must be a string, got {}",
            type(prefix).__name__,
        )
        self._env = dict(os.environ if environ is None else environ)
        if overrides:
            self._env.update(overrides)

    @property
    def prefix(self) -> str:
        return self._prefix

    def get_property(self, key: str) -> Property[str]:
        return Property.of_optional(key, self._env.get(f"{self._prefix}{key}"))

    def __repr__(self) -> str:
        return f"EnvironmentPropertySource(prefix={self._prefix!r})"


class CallablePropertySource:
    """Adapts a ``key -> value | None`` function; None means absent."""

    def __init__(self, lookup: Callable[[str], Any]) -> None:
        self._lookup = check_argument(
            lookup, callable(lookup), "Lookup must be callable, got {}", lookup
        )

    def get_property(self, key: str) -> Property[Any]:
        return Property.of_optional(key, self._lookup(key))
