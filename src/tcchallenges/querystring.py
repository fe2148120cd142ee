"""
Query String Encoding

Serializes nested mappings the way the Topcoder API parses them:
``{"a": {"b": "c"}, "d": [1, 2]}`` becomes ``a%5Bb%5D=c&d%5B0%5D=1&d%5B1%5D=2``.
"""

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any
from urllib.parse import quote


def _encode(value: str) -> str:
    # RFC 3986: only unreserved characters stay raw
    return quote(value, safe="")


def _scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _flatten(prefix: str, value: Any) -> list[tuple[str, str]]:
    if isinstance(value, Mapping):
        pairs: list[tuple[str, str]] = []
        for key, item in value.items():
            pairs.extend(_flatten(f"{prefix}[{key}]", item))
        return pairs

    if isinstance(value, (list, tuple)):
        pairs = []
        for index, item in enumerate(value):
            pairs.extend(_flatten(f"{prefix}[{index}]", item))
        return pairs

    return [(prefix, _scalar(value))]


def stringify(obj: Mapping[str, Any] | None) -> str:
    """
    Encode a mapping as a query string with bracketed nested keys.

    Args:
        obj: Mapping to encode. ``None`` or an empty mapping yields "".

    Returns:
        The encoded query string without a leading "?".
    """
    if not obj:
        return ""

    pairs: list[tuple[str, str]] = []
    for key, value in obj.items():
        pairs.extend(_flatten(str(key), value))

    return "&".join(f"{_encode(key)}={_encode(value)}" for key, value in pairs)
