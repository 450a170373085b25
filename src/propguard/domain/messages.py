"""Positional message templating with ``{}`` placeholders.

Each ``{}`` is replaced, left to right, by the next parameter. The rules
match the SLF4J array formatter so templates written for it keep
rendering the same way:

- no parameters (or a None template): the template is returned verbatim;
- more placeholders than parameters: the surplus ``{}`` stay literal;
- more parameters than placeholders: the surplus parameters are ignored;
- ``\\{}`` renders a literal ``{}`` and consumes no parameter;
- ``\\\\{}`` renders one backslash followed by the parameter.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

PLACEHOLDER = "{}"
ESCAPE_CHAR = "\\"
FAILED_STR = "[FAILED toString()]"


def format_message(template: str | None, *params: Any) -> str | None:
    """Substitute *params* into the ``{}`` placeholders of *template*."""
    if template is None or not params:
        return template

    parts: list[str] = []
    start = 0
    index = 0
    while index < len(params):
        found = template.find(PLACEHOLDER, start)
        if found == -1:
            break
        if _is_escaped(template, found):
            if not _is_escaped(template, found - 1):
                # \{} -> literal "{"; the closing brace is copied with the next chunk
                parts.append(template[start : found - 1])
                parts.append("{")
                start = found + 1
                continue
            parts.append(template[start : found - 1])
        else:
            parts.append(template[start:found])
        parts.append(render_param(params[index]))
        start = found + len(PLACEHOLDER)
        index += 1

    parts.append(template[start:])
    return "".join(parts)


def render_param(param: Any, _seen: frozenset[int] = frozenset()) -> str:
    """Render a single parameter the way it appears in a formatted message.

    Lists and plain tuples render as ``[a, b]`` with their items rendered
    recursively; self-references render as ``[...]``.
    """
    if isinstance(param, list) or type(param) is tuple:
        if id(param) in _seen:
            return "[...]"
        seen = _seen | {id(param)}
        return "[" + ", ".join(render_param(item, seen) for item in param) + "]"
    try:
        return str(param)
    except Exception:
        logger.warning(
            "Failed str() on message parameter of type %s",
            type(param).__name__,
            exc_info=True,
        )
        return FAILED_STR


def _is_escaped(template: str, position: int) -> bool:
    return position > 0 and template[position - 1] == ESCAPE_CHAR
