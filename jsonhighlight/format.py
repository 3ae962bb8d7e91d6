"""
This module provides the formatting utilities of the JSONHighlight library.
It renders a parsed JSON value as indented text where every object key and
every leaf value is wrapped in a marker naming its kind, either as HTML markup
or as coloured terminal output.

HTML markup contract:
    Each key or leaf is wrapped in ``<span class="json-MARKER">...</span>``,
    where MARKER is one of ``key``, ``string``, ``number``, ``boolean``,
    ``null`` or ``unknown``. Keys and strings keep their double quotes inside
    the span. Structural characters (braces, brackets, commas, colons and
    whitespace) are never wrapped.
"""

import json
from functools import partial
from typing import Any, Callable, FrozenSet, Optional

# Import colored text functionality for terminal output
from termcolor import colored

from jsonhighlight.escape import escape_html
from jsonhighlight.kinds import JsonKind, classify_value, is_container

# Whitespace prepended once per nesting level
INDENT_UNIT = "    "

KEY_MARKER = "key"
MARKERS = (
    KEY_MARKER,
    JsonKind.STRING.value,
    JsonKind.NUMBER.value,
    JsonKind.BOOLEAN.value,
    JsonKind.NULL.value,
    JsonKind.UNKNOWN.value,
)

TERMINAL_COLORS = {
    KEY_MARKER: "blue",
    JsonKind.STRING.value: "green",
    JsonKind.NUMBER.value: "cyan",
    JsonKind.BOOLEAN.value: "yellow",
    JsonKind.NULL.value: "magenta",
    JsonKind.UNKNOWN.value: "red",
}

# decorate(marker, text, quoted) -> rendered leaf
Decorator = Callable[[str, str, bool], str]


class CyclicValueError(ValueError):
    """Raised when an object or array contains itself, directly or transitively."""


def markup_tag(marker: str, text: str) -> str:
    """Wrap already escaped text in the span for ``marker``."""
    return f'<span class="json-{marker}">{text}</span>'


def number_text(value) -> str:
    """
    Return the JSON spelling of a number.

    Floats go through ``json.dumps`` so that ``nan`` and ``inf`` come out as
    ``NaN`` and ``Infinity``; integers and decimals use ``str``.
    """
    if isinstance(value, float):
        return json.dumps(value)
    return str(value)


def _markup_leaf(marker: str, text: str, quoted: bool) -> str:
    quote = '"' if quoted else ""
    return markup_tag(marker, f"{quote}{escape_html(text)}{quote}")


def _terminal_leaf(marker: str, text: str, quoted: bool, color: Optional[bool] = None) -> str:
    quote = '"' if quoted else ""
    return colored(
        f"{quote}{text}{quote}",
        TERMINAL_COLORS[marker],
        no_color=True if color is False else None,
        force_color=True if color is True else None,
    )


def _render(
    value: Any,
    indent: int,
    indent_unit: str,
    decorate: Decorator,
    ancestors: Optional[FrozenSet[int]],
) -> str:
    """
    Recursively render one value.

    Args:
        value: The value to render
        indent (int): Nesting level of the line the value starts on
        indent_unit (str): Whitespace emitted once per nesting level
        decorate: Wraps a key or leaf text in its kind marker
        ancestors: ids of the containers on the current path, or None when
                   cycle detection is off
    """
    kind = classify_value(value)

    if is_container(kind):
        if ancestors is not None:
            if id(value) in ancestors:
                raise CyclicValueError(f"Cannot format a cyclic {kind.value}: it contains itself")
            ancestors = ancestors | {id(value)}

        is_object = kind == JsonKind.OBJECT
        entries = list(value.items()) if is_object else list(enumerate(value))
        last_index = len(entries) - 1
        inner_indent = indent_unit * (indent + 1)

        parts = ["{\n" if is_object else "[\n"]
        for index, (key, item) in enumerate(entries):
            parts.append(inner_indent)
            if is_object:
                parts.append(decorate(KEY_MARKER, str(key), True))
                parts.append(": ")
            parts.append(_render(item, indent + 1, indent_unit, decorate, ancestors))
            if index < last_index:
                parts.append(",")
            parts.append("\n")
        parts.append(indent_unit * indent + ("}" if is_object else "]"))
        return "".join(parts)

    if kind == JsonKind.STRING:
        return decorate(kind.value, value, True)
    elif kind == JsonKind.NUMBER:
        return decorate(kind.value, number_text(value), False)
    elif kind == JsonKind.BOOLEAN:
        return decorate(kind.value, "true" if value else "false", False)
    elif kind == JsonKind.NULL:
        return decorate(kind.value, "null", False)
    return decorate(JsonKind.UNKNOWN.value, str(value), False)


def _render_root(value, indent, indent_unit, detect_cycles, decorate) -> str:
    if indent < 0:
        raise ValueError(f"indent must be non-negative, got {indent}")
    ancestors = frozenset() if detect_cycles else None
    return _render(value, indent, indent_unit, decorate, ancestors)


def format_json(
    value: Any,
    indent: int = 0,
    *,
    indent_unit: str = INDENT_UNIT,
    detect_cycles: bool = True,
) -> str:
    """
    Render a JSON value as indented, HTML-safe markup.

    Objects and arrays are laid out one entry per line, nested entries
    indented by one ``indent_unit`` more than their container. Keys and leaf
    values are escaped and wrapped in ``<span class="json-MARKER">``.
    The opening delimiter of the root value is never indented.

    Args:
        value: A value as produced by ``json.loads``
        indent (int): Nesting level to start at
        indent_unit (str): Whitespace emitted once per nesting level
        detect_cycles (bool): Raise CyclicValueError for self-containing input

    Returns:
        str: The rendered markup

    Raises:
        CyclicValueError: If ``value`` contains itself and detect_cycles is set

    Example:
        >>> print(format_json({"a": [1, None]}))
        {
            <span class="json-key">"a"</span>: [
                <span class="json-number">1</span>,
                <span class="json-null">null</span>
            ]
        }
    """
    return _render_root(value, indent, indent_unit, detect_cycles, _markup_leaf)


def colorize_json(
    value: Any,
    indent: int = 0,
    *,
    indent_unit: str = INDENT_UNIT,
    detect_cycles: bool = True,
    color: Optional[bool] = None,
) -> str:
    """
    Render a JSON value with the same layout as ``format_json`` but with
    terminal colours instead of HTML tags. Nothing is HTML-escaped.

    ``color`` forces colours on (True) or off (False). With None, termcolor
    decides from NO_COLOR, FORCE_COLOR and whether stdout is a terminal.
    """
    decorate = partial(_terminal_leaf, color=color)
    return _render_root(value, indent, indent_unit, detect_cycles, decorate)


def highlight_values(value, **options):
    """
    Pretty-prints a JSON-like data structure with colored highlighting.

    Args:
        value: Any JSON-serializable Python object (dict, list, str, int, etc.)
        **options: Passed on to ``colorize_json``

    Example:
        >>> data = {"name": "John", "scores": [95, 87]}
        >>> highlight_values(data)
        {
            "name": "John",
            "scores": [
                95,
                87
            ]
        }
    """
    print(colorize_json(value, **options))
