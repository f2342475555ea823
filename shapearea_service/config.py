"""
Configuration schema for the area service.

Defines service identification, MQTT broker settings and topic layout.
Loaded from YAML and validated at startup.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import yaml

from shapearea_geometry import parse_unit


@dataclass(frozen=True)
class MQTTConfig:
    """MQTT broker configuration."""

    broker: str = "localhost"
    port: int = 1883
    username: Optional[str] = None
    password: Optional[str] = None
    qos: int = 1  # Request/reply QoS (at-least-once)

    def __post_init__(self):
        """Validate MQTT configuration."""
        if not self.broker:
            raise ValueError("MQTT broker cannot be empty")

        if not 1 <= self.port <= 65535:
            raise ValueError(
                f"MQTT port must be in [1, 65535], got {self.port}"
            )

        if self.qos not in {0, 1, 2}:
            raise ValueError(
                f"MQTT QoS must be 0, 1, or 2, got {self.qos}"
            )


@dataclass(frozen=True)
class ServiceConfig:
    """
    Main configuration for the area service.

    Immutable after construction (frozen dataclass).
    """

    service_id: str
    topic_prefix: str = "shapearea"
    default_unit: Optional[str] = None
    mqtt_config: MQTTConfig = field(default_factory=MQTTConfig)

    def __post_init__(self):
        if not self.service_id:
            raise ValueError("service_id cannot be empty")

        if not self.topic_prefix or self.topic_prefix.endswith("/"):
            raise ValueError(
                f"topic_prefix must be non-empty without trailing '/', got {self.topic_prefix!r}"
            )

        if self.default_unit is not None:
            # Raises ValueError on unknown units
            parse_unit(self.default_unit)

    @property
    def request_topic(self) -> str:
        return f"{self.topic_prefix}/{self.service_id}/requests"

    @property
    def reply_topic(self) -> str:
        return f"{self.topic_prefix}/{self.service_id}/replies"

    @property
    def status_topic(self) -> str:
        return f"{self.topic_prefix}/{self.service_id}/status"

    @classmethod
    def from_dict(cls, data: dict) -> "ServiceConfig":
        mqtt_config_data = data.get("mqtt_config") or {}
        mqtt_config = MQTTConfig(**mqtt_config_data)

        return cls(
            service_id=data["service_id"],
            topic_prefix=data.get("topic_prefix", "shapearea"),
            default_unit=data.get("default_unit"),
            mqtt_config=mqtt_config,
        )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "ServiceConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            service_id: "area_01"
            topic_prefix: "shapearea"
            default_unit: null   # px | cm | mm | in

            mqtt_config:
              broker: "localhost"
              port: 1883
              username: null
              password: null
              qos: 1
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        if "service_id" not in data:
            raise ValueError(f"service_id missing in {yaml_path}")

        return cls.from_dict(data)
