"""Transparent single-field encoding for angle values.

An angle serializes as its bare number, with no unit metadata: the unit is
carried by the type the caller decodes into, never by the payload. This is
the same shape a newtype gets from a derive-based serializer, so payloads
stay interchangeable with other producers of plain numbers.

Functions:
    to_primitive: Angle -> float.
    from_primitive: float -> angle of a given type.
    dumps / loads: JSON text helpers built on the stdlib ``json`` module.

Classes:
    AngleJSONEncoder: ``json.JSONEncoder`` that encodes angles anywhere in a
        larger structure.

Example:
    >>> from angleunit import Degrees
    >>> dumps({"heading": Degrees(90.0)})
    '{"heading": 90.0}'
    >>> loads("90.0", Degrees)
    90.0°
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import numpy as np

from .unit_float import UnitFloat

logger = logging.getLogger(__name__)

U = TypeVar("U", bound=UnitFloat)


def to_primitive(angle: UnitFloat) -> float:
    """Return the wrapped value as a Python float (exact for any float32)."""
    if not isinstance(angle, UnitFloat):
        msg = f"expected an angle, got {type(angle).__name__}"
        raise TypeError(msg)
    return float(angle.value)


def from_primitive(cls: type[U], number: Any) -> U:
    """Rebuild an angle of type ``cls`` from its encoded number.

    The number is wrapped verbatim; no conversion between units happens even
    if the payload was produced by a different angle type.

    Raises:
        TypeError: If number is not an int or float (bools are rejected too).
    """
    if isinstance(number, bool) or not isinstance(number, (int, float, np.floating, np.integer)):
        msg = f"cannot decode {cls.__name__} from {type(number).__name__}"
        raise TypeError(msg)
    return cls(number)


class AngleJSONEncoder(json.JSONEncoder):
    """JSON encoder writing every angle as its single numeric field."""

    def default(self, o):
        if isinstance(o, UnitFloat):
            return to_primitive(o)
        return super().default(o)


def dumps(obj: Any, **kwargs) -> str:
    """Serialize ``obj`` to JSON, encoding angles as plain numbers.

    Non-finite values use the ``NaN`` / ``Infinity`` literals accepted by
    :func:`json.loads`.
    """
    if isinstance(obj, UnitFloat):
        obj = to_primitive(obj)
    kwargs.setdefault("cls", AngleJSONEncoder)
    return json.dumps(obj, **kwargs)


def loads(text: str | bytes, cls: type[U]) -> U:
    """Decode a JSON document holding a single number into ``cls``.

    Raises:
        json.JSONDecodeError: If text is not valid JSON.
        TypeError: If the document is valid JSON but not a number.
    """
    number = json.loads(text)
    logger.debug("Decoded %s from %r", cls.__name__, number)
    return from_primitive(cls, number)
