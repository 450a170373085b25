"""Ready-made transforms for :meth:`Property.map`.

Each converter raises ``ValueError`` or ``TypeError`` on malformed input,
which ``map`` turns into an absent property.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from propguard.domain.validation import check_argument

_E = TypeVar("_E", bound=Enum)

TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
FALSE_VALUES = frozenset({"false", "no", "off", "0"})


def to_int(raw: Any) -> int:
    """Parse an integer from a string or pass an int through."""
    if isinstance(raw, bool):
        msg = "Refusing to read a bool as int"
        raise TypeError(msg)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        return int(raw.strip())
    msg = f"Cannot convert {type(raw).__name__} to int"
    raise TypeError(msg)


def to_float(raw: Any) -> float:
    if isinstance(raw, bool):
        msg = "Refusing to read a bool as float"
        raise TypeError(msg)
    if isinstance(raw, (int, float)):
        return float(raw)
    if isinstance(raw, str):
        return float(raw.strip())
    msg = f"Cannot convert {type(raw).__name__} to float"
    raise TypeError(msg)


def to_bool(raw: Any) -> bool:
    """Parse ``true/false``, ``yes/no``, ``on/off`` or ``1/0`` (any case)."""
    if isinstance(raw, bool):
        return raw
    if not isinstance(raw, str):
        msg = f"Cannot convert {type(raw).__name__} to bool"
        raise TypeError(msg)
    normalized = raw.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    msg = f"Not a boolean: {raw!r}"
    raise ValueError(msg)


def to_enum(enum_cls: type[_E]) -> Callable[[Any], _E]:
    """Build a converter to *enum_cls*.

    Matches by member value first, then by member name ignoring case.
    """
    check_argument(
        enum_cls,
        isinstance(enum_cls, type) and issubclass(enum_cls, Enum),
        "Expected an Enum class, got {}",
        enum_cls,
    )

    def convert(raw: Any) -> _E:
        if isinstance(raw, enum_cls):
            return raw
        try:
            return enum_cls(raw)
        except ValueError:
            pass
        if isinstance(raw, str):
            wanted = raw.strip().casefold()
            for member in enum_cls:
                if member.name.casefold() == wanted:
                    return member
        msg = f"{raw!r} is not a valid {enum_cls.__name__}"
        raise ValueError(msg)

    return convert


def to_list(separator: str = ",") -> Callable[[Any], list[str]]:
    """Build a converter splitting on *separator*, dropping blank items."""
    check_argument(separator, bool(separator), "Separator must not be empty")

    def convert(raw: Any) -> list[str]:
        if isinstance(raw, (list, tuple)):
            items = [str(item) for item in raw]
        elif isinstance(raw, str):
            items = raw.split(separator)
        else:
            msg = f"Cannot convert {type(raw).__name__} to list"
            raise TypeError(msg)
        return [item.strip() for item in items if item.strip()]

    return convert


def to_path(raw: Any) -> Path:
    if not isinstance(raw, (str, Path)):
        msg = f"Cannot convert {type(raw).__name__} to Path"
        raise TypeError(msg)
    return Path(raw).expanduser()
