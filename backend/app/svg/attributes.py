"""Typed accessors over raw SVG attribute mappings.

Attribute values arrive as strings straight from the markup. Every numeric
read goes through a lenient leading-number parse and falls back to a default
instead of raising, so odd input degrades to a usable value.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping

# Longest leading decimal: "12.5px" -> 12.5, "1e3" -> 1000.0, ".5" -> 0.5
_LEADING_NUMBER_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(text: str | None) -> float:
    """Parse the leading number of ``text``. Returns NaN when there is none."""
    if not text:
        return math.nan
    m = _LEADING_NUMBER_RE.match(text)
    if m is None:
        return math.nan
    return float(m.group(1))


def is_missing(value: float) -> bool:
    """True for values that cannot serve as a dimension (NaN, infinite or zero)."""
    return not math.isfinite(value) or value == 0


def attr_float(attrs: Mapping[str, str], name: str, default: float = 0.0) -> float:
    value = parse_number(attrs.get(name))
    if not math.isfinite(value):
        return default
    return value


def attr_str(attrs: Mapping[str, str], *names: str, default: str) -> str:
    """First non-empty attribute among ``names``, else ``default``."""
    for name in names:
        value = attrs.get(name)
        if value:
            return value
    return default
