"""
JSONHighlight is a library for rendering JSON values as syntax-highlighted,
indented markup. This module serves as the main entry point for the library,
exposing the core components needed by users.
"""

# Import the main JsonHighlighter class which ties parsing to rendering
from jsonhighlight.main import JsonHighlighter
# Import the formatting functions and the markup contract
from jsonhighlight.format import (
    INDENT_UNIT,
    MARKERS,
    CyclicValueError,
    colorize_json,
    format_json,
    highlight_values,
)
from jsonhighlight.escape import escape_html
from jsonhighlight.kinds import JsonKind, classify_value
