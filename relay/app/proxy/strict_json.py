"""
Strict JSON decoding for request and deploy service bodies.

The json module accepts the NaN, Infinity and -Infinity literals, and turns
number literals too large for a float into inf. JSONResponse refuses to
render any of these, so such bodies are rejected as invalid JSON on the way
in rather than failing when the response is rendered.
"""

import json
import math
from typing import Any, Union


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"JSON number out of range: {literal}")
    return value


def loads_strict(data: Union[str, bytes]) -> Any:
    """
    Decode standard JSON only.

    Raises:
        ValueError: If data is not valid JSON or holds a non-finite number
    """
    return json.loads(
        data,
        parse_constant=_reject_constant,
        parse_float=_parse_finite_float,
    )
