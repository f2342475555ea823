"""
shapearea_control - Request/reply plane for the area service

Bounded Context: MQTT-based remote-callable area operations
Responsibilities:
  - Command registration and dispatch
  - Request payload deserialization / reply serialization
  - MQTT connection management (request, reply, status topics)

Architecture:
  - CommandRegistry: Explicit registration pattern
  - AreaCommands: calc_rectangle_area, calc_circle_area,
    calc_polygon_area, calc_area, help
  - MQTTControlPlane: MQTT client + request reception + replies
"""

from .registry import CommandRegistry, CommandNotAvailableError
from .schemas import AreaReply, AreaRequest, RequestError
from .commands import AreaCommands, dispatch_request
from .plane import MQTTControlPlane

__all__ = [
    "CommandRegistry",
    "CommandNotAvailableError",
    "AreaReply",
    "AreaRequest",
    "RequestError",
    "AreaCommands",
    "dispatch_request",
    "MQTTControlPlane",
]
