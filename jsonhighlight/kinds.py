"""
Classification of Python values into JSON kinds.

Values produced by ``json.loads`` always land in one of the six JSON kinds.
Anything else falls into ``JsonKind.UNKNOWN`` so that rendering never has to
guess at a runtime type.
"""

from decimal import Decimal
from enum import Enum
from typing import Any


class JsonKind(str, Enum):
    """The kind of a JSON value. The value doubles as its markup marker name."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    UNKNOWN = "unknown"


def classify_value(value: Any) -> JsonKind:
    """
    Return the JSON kind of a value.

    ``bool`` is checked before numbers since it subclasses ``int``. Tuples are
    treated as arrays, and ``Decimal`` (from ``json.loads(parse_float=Decimal)``)
    as a number.
    """
    if value is None:
        return JsonKind.NULL
    elif isinstance(value, bool):
        return JsonKind.BOOLEAN
    elif isinstance(value, (int, float, Decimal)):
        return JsonKind.NUMBER
    elif isinstance(value, str):
        return JsonKind.STRING
    elif isinstance(value, dict):
        return JsonKind.OBJECT
    elif isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    return JsonKind.UNKNOWN


def is_container(kind: JsonKind) -> bool:
    return kind in (JsonKind.OBJECT, JsonKind.ARRAY)
