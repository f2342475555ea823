"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: mqtt, request, area, error

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, message, metadata.command
    | filter event = "area.rejected"
    | stats count() by metadata.error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - mqtt.*: MQTT broker interactions
    - request.*: Request handling
    - area.*: Area computation outcomes
    - error.*: Error conditions
    """

    # ========== MQTT Events ==========
    MQTT_CONNECTED = "mqtt.connected"
    """MQTT broker connection established."""

    MQTT_DISCONNECTED = "mqtt.disconnected"
    """MQTT broker connection lost."""

    MQTT_REPLY_PUBLISHED = "mqtt.reply.published"
    """Reply published to broker."""

    # ========== Request Events ==========
    REQUEST_RECEIVED = "request.received"
    """Calculation request received."""

    REQUEST_UNKNOWN_COMMAND = "request.unknown_command"
    """Request named a command that is not registered."""

    # ========== Area Events ==========
    AREA_COMPUTED = "area.computed"
    """Shape validated and area computed."""

    AREA_REJECTED = "area.rejected"
    """Shape failed validation."""

    # ========== Error Events ==========
    DESERIALIZATION_ERROR = "error.deserialization"
    """Failed to decode request JSON."""

    SCHEMA_VALIDATION_ERROR = "error.schema_validation"
    """Request payload failed schema validation."""

    MQTT_CONNECTION_ERROR = "error.mqtt_connection"
    """Failed to connect to MQTT broker."""

    MQTT_PUBLISH_ERROR = "error.mqtt_publish"
    """Error during reply publication."""

