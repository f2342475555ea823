"""
Area Commands - Remote-callable area operations

Bounded Context: Command handlers
Responsibilities:
  - Deserialize request targets into shapes
  - Run validate-then-measure through shapearea_geometry
  - Convert results and errors into AreaReply envelopes

Commands:
  - calc_rectangle_area: normalizing rectangle (corner order ignored)
  - calc_circle_area: circle
  - calc_polygon_area: Shoelace polygon
  - calc_area: strict integer rectangle (unordered corners rejected)
  - help: registered commands with descriptions

Every failure is returned as a reply with ok=False; nothing is raised
past dispatch_request().
"""

import logging
import math
from typing import Any, Callable, Dict, Optional

from shapearea_geometry import (
    area_to_unit,
    compute_area,
    compute_legacy_area,
    parse_unit,
)

from .logging import LogEvent, StructuredLogger
from .registry import CommandNotAvailableError, CommandRegistry
from .schemas import (
    AreaReply,
    AreaRequest,
    RequestError,
    circle_from_dict,
    legacy_rectangle_from_dict,
    polygon_from_dict,
    rectangle_from_dict,
)

logger = logging.getLogger(__name__)


class AreaCommands:
    """
    Handlers for the area operations.

    Example:
        registry = CommandRegistry()
        commands = AreaCommands(structured_logger)
        commands.register(registry)

        reply = dispatch_request(registry, {
            "command": "calc_circle_area",
            "target": {"center": {"x": 0, "y": 0}, "radius": 2},
        })
        reply.result  # 12.566...
    """

    def __init__(self, structured_logger: StructuredLogger, default_unit: Optional[str] = None):
        """
        Args:
            structured_logger: Logger for request-level events
            default_unit: Unit used for converted_area when a request names none
        """
        self.structured_logger = structured_logger
        self.default_unit = parse_unit(default_unit).value if default_unit else None
        self._registry: Optional[CommandRegistry] = None

    def register(self, registry: CommandRegistry) -> None:
        """Register all area commands with the registry."""
        registry.register(
            "calc_rectangle_area",
            self.calc_rectangle_area,
            "Area of a rectangle given two corners in any order"
        )
        registry.register(
            "calc_circle_area",
            self.calc_circle_area,
            "Area of a circle given center and radius"
        )
        registry.register(
            "calc_polygon_area",
            self.calc_polygon_area,
            "Area of a polygon (more than 3 points) via the Shoelace formula"
        )
        registry.register(
            "calc_area",
            self.calc_area,
            "Area of an integer rectangle with top_left above-left of bottom_right"
        )
        registry.register(
            "help",
            self.help,
            "List available commands"
        )
        self._registry = registry
        logger.info(f"Area commands registered ({registry.count()} total)")

    # ─────────────────────────────────────────────────────────────────────
    # Command Handlers
    # ─────────────────────────────────────────────────────────────────────

    def calc_rectangle_area(self, request: Dict[str, Any]) -> AreaReply:
        return self._measure(request, lambda target: compute_area(rectangle_from_dict(target)))

    def calc_circle_area(self, request: Dict[str, Any]) -> AreaReply:
        return self._measure(request, lambda target: compute_area(circle_from_dict(target)))

    def calc_polygon_area(self, request: Dict[str, Any]) -> AreaReply:
        return self._measure(request, lambda target: compute_area(polygon_from_dict(target)))

    def calc_area(self, request: Dict[str, Any]) -> AreaReply:
        return self._measure(
            request,
            lambda target: compute_legacy_area(legacy_rectangle_from_dict(target)),
        )

    def help(self, request: Dict[str, Any]) -> AreaReply:
        req = AreaRequest.from_dict(request)
        commands = self._registry.get_help() if self._registry else {}
        return AreaReply.success(req.command, commands, request_id=req.request_id)

    # ─────────────────────────────────────────────────────────────────────

    def _measure(self, request: Dict[str, Any], compute: Callable[[Dict[str, Any]], Any]) -> AreaReply:
        req = AreaRequest.from_dict(request)
        metadata = {'command': req.command, 'request_id': req.request_id}

        message = None
        try:
            unit = req.unit or self.default_unit
            if unit is not None:
                unit = parse_unit(unit).value
            area = compute(req.target)
            if not math.isfinite(area):
                raise OverflowError(area)
            extra = {}
            if unit is not None:
                extra = {'unit': unit, 'converted_area': area_to_unit(area, unit)}
        except ArithmeticError:
            message = "invalid request: area is out of range"
        except ValueError as e:
            # RequestError, ShapeError, unknown unit
            message = str(e)

        if message is not None:
            self.structured_logger.warning(
                event=LogEvent.AREA_REJECTED,
                message=f"{req.command} rejected",
                metadata={**metadata, 'error': message},
            )
            return AreaReply.failure(req.command, message, request_id=req.request_id)

        self.structured_logger.info(
            event=LogEvent.AREA_COMPUTED,
            message=f"{req.command} succeeded",
            metadata={**metadata, 'area': area},
        )
        return AreaReply.success(req.command, area, request_id=req.request_id, **extra)


def dispatch_request(
    registry: CommandRegistry,
    data: Dict[str, Any],
    structured_logger: Optional[StructuredLogger] = None,
) -> AreaReply:
    """
    Route a decoded request through the registry.

    Malformed envelopes and unknown commands become failure replies.

    Args:
        registry: Registry with area commands registered
        data: Decoded JSON request
        structured_logger: Optional logger for request events

    Returns:
        AreaReply (never raises for bad input)
    """
    try:
        req = AreaRequest.from_dict(data)
    except RequestError as e:
        request_id = data.get('request_id') if isinstance(data, dict) else None
        if structured_logger:
            structured_logger.warning(
                event=LogEvent.SCHEMA_VALIDATION_ERROR,
                message="Malformed request envelope",
                metadata={'error': str(e)},
            )
        return AreaReply.failure('', str(e), request_id=request_id)

    if structured_logger:
        structured_logger.debug(
            event=LogEvent.REQUEST_RECEIVED,
            message=f"Request received: {req.command}",
            metadata={'command': req.command, 'request_id': req.request_id},
        )

    try:
        return registry.execute(req.command, data)
    except CommandNotAvailableError as e:
        if structured_logger:
            structured_logger.warning(
                event=LogEvent.REQUEST_UNKNOWN_COMMAND,
                message=str(e),
                metadata={'command': req.command, 'request_id': req.request_id},
            )
        return AreaReply.failure(req.command, str(e), request_id=req.request_id)
