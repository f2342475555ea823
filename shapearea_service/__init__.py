"""
shapearea_service - Area computation service

Architecture:
- AreaService: Lifecycle orchestrator (setup, start, wait, stop)
- ServiceConfig / MQTTConfig: YAML configuration

Threading Model:
- Control Plane Thread (paho-mqtt internal, runs request handlers)
"""

from shapearea_service.config import MQTTConfig, ServiceConfig
from shapearea_service.service import AreaService

__all__ = [
    "MQTTConfig",
    "ServiceConfig",
    "AreaService",
]
