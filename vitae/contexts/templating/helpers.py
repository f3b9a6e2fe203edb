"""
Template helper functions.

Registered as Jinja2 globals so templates can call them directly:

    {% if isObject(value) %} ... {% endif %}
    <script>const themes = {{ json(allThemes) }};</script>

Template values are classified into a small set of kinds (the JSON/YAML data
model) and the predicates are checks against that classification.
"""

import json as _json
from enum import Enum
from typing import Any, Callable, Dict


class ValueKind(Enum):
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    LIST = "list"
    MAPPING = "mapping"
    NULL = "null"
    OTHER = "other"


def value_kind(value: Any) -> ValueKind:
    """Classify a template value. Booleans are checked before numbers."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, (list, tuple)):
        return ValueKind.LIST
    if isinstance(value, dict):
        return ValueKind.MAPPING
    return ValueKind.OTHER


def to_json(value: Any) -> str:
    """Compact JSON serialization (no whitespace, non-ASCII kept as-is)."""
    return _json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def is_string(value: Any) -> bool:
    return value_kind(value) is ValueKind.STRING


def is_object(value: Any) -> bool:
    """True only for mappings; lists and None are not objects."""
    return value_kind(value) is ValueKind.MAPPING


def is_array(value: Any) -> bool:
    return value_kind(value) is ValueKind.LIST


# Names as seen from inside templates
TEMPLATE_HELPERS: Dict[str, Callable[[Any], Any]] = {
    "json": to_json,
    "isString": is_string,
    "isObject": is_object,
    "isArray": is_array,
}
