"""Property — the value held for one configuration key, possibly absent.

A Property is produced by a PropertySource lookup and consumed through a
chain of ``map`` calls ending in ``get`` or ``or_else``::

    port = source.get_property("port").map(to_int).or_else(8080)

Presence is an explicit tag, not a reserved value: a present property may
legitimately hold ``None``.

INVARIANT: A Property never changes after construction. ``map`` and
``filter`` always return a new instance bound to the same key.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

_T = TypeVar("_T")
_R = TypeVar("_R")


class NoSuchPropertyError(LookupError):
    """Raised by :meth:`Property.get` when the property holds no value.

    Attributes:
        key: The configuration key that had no value.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"No value present for configuration property {key}")
        self.key = key


@dataclass(frozen=True, repr=False)
class Property(Generic[_T]):
    """Immutable ``(key, value-or-absent)`` pair with safe derivation."""

    key: str
    value: _T | None = None
    present: bool = field(default=True, kw_only=True)

    def __post_init__(self) -> None:
        if not self.present and self.value is not None:
            msg = f"Absent property {self.key!r} cannot hold a value"
            raise ValueError(msg)

    # ── Construction ─────────────────────────────────────────────────

    @classmethod
    def empty(cls, key: str) -> Property[Any]:
        """An absent property for *key*."""
        return cls(key, None, present=False)

    @classmethod
    def of_optional(cls, key: str, value: _T | None) -> Property[_T]:
        """Present property for *value*, or absent when *value* is None.

        Bridges sources that report a missing key as ``None``
        (``dict.get``, ``os.environ.get``).
        """
        if value is None:
            return cls.empty(key)
        return cls(key, value)

    # ── Derivation ───────────────────────────────────────────────────

    @property
    def is_present(self) -> bool:
        return self.present

    def map(self, transform: Callable[[_T], _R]) -> Property[_R]:
        """Apply *transform* to the value, yielding a new property.

        Absent properties propagate absence without calling *transform*.
        If *transform* raises, the failure is logged as a warning naming
        the key and an absent property is returned. Never raises.
        """
        if not self.present:
            return Property.empty(self.key)
        try:
            result = transform(self.value)  # type: ignore[arg-type]
        except Exception as exc:
            logger.warning(
                "Cannot convert value of property %s: %s: %s",
                self.key,
                type(exc).__name__,
                exc,
            )
            return Property.empty(self.key)
        return Property(self.key, result)

    def filter(self, predicate: Callable[[_T], bool]) -> Property[_T]:
        """Keep the value only if *predicate* holds for it.

        A predicate that raises is handled like a failing ``map``.
        """
        if not self.present:
            return self
        try:
            keep = predicate(self.value)  # type: ignore[arg-type]
        except Exception as exc:
            logger.warning(
                "Cannot check value of property %s: %s: %s",
                self.key,
                type(exc).__name__,
                exc,
            )
            return Property.empty(self.key)
        if keep:
            return self
        logger.debug("Property %s rejected by filter", self.key)
        return Property.empty(self.key)

    # ── Extraction ───────────────────────────────────────────────────

    def get(self) -> _T:
        """Return the value.

        Raises:
            NoSuchPropertyError: If the property is absent.
        """
        if not self.present:
            raise NoSuchPropertyError(self.key)
        return self.value  # type: ignore[return-value]

    def or_else(self, default: _T) -> _T:
        """Return the value, or *default* when absent."""
        if self.present:
            return self.value  # type: ignore[return-value]
        return default

    def or_else_get(self, supplier: Callable[[], _T]) -> _T:
        """Like :meth:`or_else`, but *supplier* is only called when absent."""
        if self.present:
            return self.value  # type: ignore[return-value]
        return supplier()

    def __bool__(self) -> bool:
        return self.present

    def __repr__(self) -> str:
        shown = repr(self.value) if self.present else "<absent>"
        return f"Property({self.key!r}, {shown})"
