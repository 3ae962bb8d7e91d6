"""
JSONHighlight: render JSON documents as syntax-highlighted, indented markup.
This module provides the configurable front object that ties parsing of JSON
text to the formatters in ``jsonhighlight.format``.
"""

import json
import sys
from typing import Any, Optional

from termcolor import cprint

from jsonhighlight.format import colorize_json, format_json
from jsonhighlight.kinds import classify_value

# Marks "nothing to render", which a parsed JSON null must not be confused with
_NO_VALUE = object()


class JsonHighlighter:
    """
    Renders JSON values and JSON text with a fixed set of formatting options.

    The object holds configuration only. Every call builds its output from
    scratch, so one instance can be shared freely.

    Attributes:
        indent_unit (str): Whitespace emitted once per nesting level
        detect_cycles (bool): Whether self-containing input raises CyclicValueError
        color (Optional[bool]): Force terminal colours on or off, None to auto-detect
    """

    def __init__(
        self,
        *,
        indent_width: int = 4,
        detect_cycles: bool = True,
        color: Optional[bool] = None,
        debug: bool = False,
    ):
        """
        Args:
            indent_width: Number of spaces per nesting level
            detect_cycles: Raise CyclicValueError instead of recursing forever
            color: Force terminal colours on (True) or off (False) in colorize()
            debug: Whether to print trace information while rendering

        Raises:
            ValueError: If indent_width is not a non-negative integer
        """
        if isinstance(indent_width, bool) or not isinstance(indent_width, int) or indent_width < 0:
            raise ValueError(f"indent_width must be a non-negative integer, got {indent_width!r}")

        self.indent_unit = " " * indent_width
        self.detect_cycles = detect_cycles
        self.color = color
        self.debug_on = debug

    def debug(self, caller: str, value: str, is_input: bool = False):
        """Print debug information if debug mode is enabled."""
        if self.debug_on:
            if is_input:
                cprint(caller, "green", end=" ")
                cprint(value, "yellow")
            else:
                cprint(caller, "green", end=" ")
                cprint(value, "blue")

    def error(self, caller: str, message: str):
        """Report a problem on stderr regardless of debug mode."""
        cprint(f"{caller} {message}", "red", file=sys.stderr)

    def format(self, value: Any, indent: int = 0) -> str:
        """
        Render a parsed JSON value as HTML markup.

        Args:
            value: A value as produced by ``json.loads``
            indent: Nesting level to start at

        Returns:
            str: The rendered markup
        """
        self.debug("[format]", f"{classify_value(value).value} at indent {indent}", is_input=True)
        markup = format_json(
            value,
            indent,
            indent_unit=self.indent_unit,
            detect_cycles=self.detect_cycles,
        )
        self.debug("[format]", f"{len(markup)} characters")
        return markup

    def colorize(self, value: Any, indent: int = 0) -> str:
        """Render a parsed JSON value with terminal colours."""
        self.debug("[colorize]", f"{classify_value(value).value} at indent {indent}", is_input=True)
        return colorize_json(
            value,
            indent,
            indent_unit=self.indent_unit,
            detect_cycles=self.detect_cycles,
            color=self.color,
        )

    def parse(self, text: Optional[str]) -> Any:
        """
        Parse JSON text.

        Empty text yields None. Malformed text is reported and also yields
        None, so callers can fall back to an empty display state.

        Args:
            text: The JSON document, or None

        Returns:
            The parsed value, or None
        """
        value = self._decode("[parse]", text)
        return None if value is _NO_VALUE else value

    def render_text(self, text: Optional[str]) -> Optional[str]:
        """
        Parse JSON text and render it as HTML markup.

        Returns:
            Optional[str]: The markup, or None when the text is empty or malformed.
            A ``null`` document is valid and renders as the tagged null.
        """
        value = self._decode("[render_text]", text)
        if value is _NO_VALUE:
            return None
        return self.format(value)

    def _decode(self, caller: str, text: Optional[str]) -> Any:
        if not text:
            self.debug(caller, "no text to parse")
            return _NO_VALUE

        self.debug(caller, text, is_input=True)
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            self.error(caller, f"Error parsing JSON: {e}")
            return _NO_VALUE

    def __call__(self, value: Any) -> str:
        """Render a parsed JSON value as HTML markup."""
        return self.format(value)
