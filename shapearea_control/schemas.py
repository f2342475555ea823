"""
Request/Reply Schemas
=====================

Bounded Context: Wire data structures

Immutable, typed structures for calculation requests and replies, plus
deserializers that turn snake_case payloads into geometry shapes.

Design Principles:
- Immutability: frozen=True prevents accidental mutation
- Serialization: to_dict() for JSON export
- Validation: from_dict() raises RequestError with the offending field

Wire format:

    request = {
        "command": "calc_rectangle_area",
        "request_id": "a1",                 # optional, echoed back
        "unit": "cm",                       # optional
        "target": {
            "top_left": {"x": 0, "y": 0},
            "bottom_right": {"x": 4, "y": 3}
        }
    }

    reply = {"request_id": "a1", "command": "calc_rectangle_area",
             "ok": true, "result": 12, "timestamp": "..."}
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from shapearea_geometry import Circle, LegacyRectangle, Point, Polygon, Rectangle


# Legacy integer rectangles carry 32-bit signed coordinates
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


class RequestError(ValueError):
    """Raised when a request payload cannot be deserialized."""

    def __init__(self, message: str):
        super().__init__(f"invalid request: {message}")


def _number(data: Dict[str, Any], key: str, integer: bool = False):
    try:
        value = data[key]
    except KeyError:
        raise RequestError(f"missing field '{key}'")
    except TypeError:
        raise RequestError(f"expected an object containing '{key}'")

    if isinstance(value, bool):
        raise RequestError(f"field '{key}' must be a number, got bool")
    if integer:
        if not isinstance(value, int):
            raise RequestError(f"field '{key}' must be an integer, got {value!r}")
    elif not isinstance(value, (int, float)):
        raise RequestError(f"field '{key}' must be a number, got {value!r}")

    try:
        finite = math.isfinite(value)
    except OverflowError:
        finite = False
    if not finite:
        raise RequestError(f"field '{key}' must be a finite number")
    if integer and not INT32_MIN <= value <= INT32_MAX:
        raise RequestError(f"field '{key}' is out of range for a 32-bit integer")
    return value


def _object(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise RequestError(f"expected an object containing '{key}'")
    if key not in data:
        raise RequestError(f"missing field '{key}'")
    value = data[key]
    if not isinstance(value, dict):
        raise RequestError(f"field '{key}' must be an object")
    return value


def point_from_dict(data: Dict[str, Any], integer: bool = False) -> Point:
    """
    Deserialize {"x": .., "y": ..}.

    Raises:
        RequestError: If a coordinate is missing or not a number
    """
    return Point(x=_number(data, "x", integer), y=_number(data, "y", integer))


def rectangle_from_dict(data: Dict[str, Any]) -> Rectangle:
    return Rectangle(
        top_left=point_from_dict(_object(data, "top_left")),
        bottom_right=point_from_dict(_object(data, "bottom_right")),
    )


def legacy_rectangle_from_dict(data: Dict[str, Any]) -> LegacyRectangle:
    """Deserialize a rectangle whose coordinates must be integers."""
    return LegacyRectangle(
        top_left=point_from_dict(_object(data, "top_left"), integer=True),
        bottom_right=point_from_dict(_object(data, "bottom_right"), integer=True),
    )


def circle_from_dict(data: Dict[str, Any]) -> Circle:
    return Circle(
        center=point_from_dict(_object(data, "center")),
        radius=_number(data, "radius"),
    )


def polygon_from_dict(data: Dict[str, Any]) -> Polygon:
    if not isinstance(data, dict) or "points" not in data:
        raise RequestError("missing field 'points'")
    points = data["points"]
    if not isinstance(points, list):
        raise RequestError("field 'points' must be a list")
    for index, point in enumerate(points):
        if not isinstance(point, dict):
            raise RequestError(f"points[{index}] must be an object")
    return Polygon(points=[point_from_dict(p) for p in points])


@dataclass(frozen=True)
class AreaRequest:
    """
    Calculation request.

    Attributes:
        command: Operation name (e.g., "calc_circle_area")
        target: Shape payload (snake_case fields)
        request_id: Caller correlation id, echoed in the reply
        unit: Optional unit for converted_area in the reply
    """

    command: str
    target: Dict[str, Any] = field(default_factory=dict)
    request_id: Optional[str] = None
    unit: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'command': self.command, 'target': self.target}
        if self.request_id is not None:
            data['request_id'] = self.request_id
        if self.unit is not None:
            data['unit'] = self.unit
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AreaRequest':
        """
        Raises:
            RequestError: If command is missing or target is not an object
        """
        if not isinstance(data, dict):
            raise RequestError("request must be a JSON object")

        command = str(data.get('command') or '').strip().lower()
        if not command:
            raise RequestError("missing field 'command'")

        target = data.get('target', {})
        if not isinstance(target, dict):
            raise RequestError("field 'target' must be an object")

        request_id = data.get('request_id')
        unit = data.get('unit')
        return cls(
            command=command,
            target=target,
            request_id=str(request_id) if request_id is not None else None,
            unit=str(unit) if unit is not None else None,
        )


@dataclass(frozen=True)
class AreaReply:
    """
    Reply to a calculation request.

    Exactly one of result/error is set: ok=True carries result, ok=False
    carries the human-readable error message.
    """

    command: str
    ok: bool
    result: Any = None
    error: Optional[str] = None
    request_id: Optional[str] = None
    unit: Optional[str] = None
    converted_area: Optional[float] = None
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @classmethod
    def success(cls, command: str, result: Any, request_id: Optional[str] = None, **extra) -> 'AreaReply':
        return cls(command=command, ok=True, result=result, request_id=request_id, **extra)

    @classmethod
    def failure(cls, command: str, error: str, request_id: Optional[str] = None) -> 'AreaReply':
        return cls(command=command, ok=False, error=error, request_id=request_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict (unset optional fields omitted)."""
        data: Dict[str, Any] = {
            'request_id': self.request_id,
            'command': self.command,
            'ok': self.ok,
            'timestamp': self.timestamp,
        }
        if self.ok:
            data['result'] = self.result
            if self.unit is not None:
                data['unit'] = self.unit
                data['converted_area'] = self.converted_area
        else:
            data['error'] = self.error
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AreaReply':
        try:
            return cls(
                command=data['command'],
                ok=bool(data['ok']),
                result=data.get('result'),
                error=data.get('error'),
                request_id=data.get('request_id'),
                unit=data.get('unit'),
                converted_area=data.get('converted_area'),
                timestamp=data.get('timestamp', ''),
            )
        except KeyError as e:
            raise ValueError(f"Missing required AreaReply field: {e}")
