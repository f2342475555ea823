"""
MQTTControlPlane - MQTT request/reply plane for the area service

Bounded Context: MQTT connection management + request handling
Responsibilities:
  - MQTT connection lifecycle (connect, disconnect)
  - Request reception (subscribe to request topic)
  - Reply publishing (one reply per request)
  - Status publishing (retained)
  - Command delegation to CommandRegistry

QoS Policy:
  - Requests: QoS 1 (at-least-once delivery)
  - Replies: QoS 1, not retained
  - Status: QoS 1 + retained (last status persisted)

Threading:
  - MQTT client runs own background thread (loop_start/loop_stop)
  - Callbacks (_on_connect, _on_message) run in MQTT thread
  - Area computations are pure and fast, so they run inline
"""

import json
import logging
from datetime import datetime, timezone
from threading import Event
from typing import Any, Dict, Optional

import paho.mqtt.client as mqtt

from .commands import dispatch_request
from .logging import LogEvent, StructuredLogger, create_logger
from .registry import CommandRegistry
from .schemas import AreaReply

logger = logging.getLogger(__name__)


class MQTTControlPlane:
    """
    MQTT control plane answering area requests.

    Example:
        control_plane = MQTTControlPlane(
            broker_host="localhost",
            broker_port=1883,
            request_topic="shapearea/area_01/requests",
            reply_topic="shapearea/area_01/replies",
            status_topic="shapearea/area_01/status",
            client_id="area_service_01"
        )

        AreaCommands(structured_logger).register(control_plane.command_registry)

        if control_plane.connect(timeout=5.0):
            print("Connected to MQTT broker")

        control_plane.disconnect()
    """

    def __init__(
        self,
        broker_host: str,
        broker_port: int,
        request_topic: str,
        reply_topic: str,
        status_topic: str,
        client_id: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        qos: int = 1,
        structured_logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            broker_host: MQTT broker hostname
            broker_port: MQTT broker port (typically 1883)
            request_topic: Topic for receiving requests (subscribe)
            reply_topic: Topic for publishing replies
            status_topic: Topic for publishing status
            client_id: MQTT client identifier
            username: Optional MQTT authentication username
            password: Optional MQTT authentication password
            qos: QoS for requests and replies
            structured_logger: Logger for request events (default: control_plane)
        """
        self.broker_host = broker_host
        self.broker_port = broker_port
        self.request_topic = request_topic
        self.reply_topic = reply_topic
        self.status_topic = status_topic
        self.client_id = client_id
        self.qos = qos
        self.structured_logger = structured_logger or create_logger("control_plane")

        self.client = mqtt.Client(
            mqtt.CallbackAPIVersion.VERSION2,
            client_id=client_id,
            protocol=mqtt.MQTTv311,
        )
        self.client.on_connect = self._on_connect
        self.client.on_message = self._on_message
        self.client.on_disconnect = self._on_disconnect

        if username and password:
            self.client.username_pw_set(username, password)

        # Connection synchronization
        self._connected = Event()
        self._running = False

        self.command_registry = CommandRegistry()

    def connect(self, timeout: float = 5.0) -> bool:
        """
        Connect to MQTT broker with timeout.

        Returns:
            True if connected successfully, False otherwise
        """
        try:
            logger.info(f"🔌 Connecting to MQTT broker: {self.broker_host}:{self.broker_port}")
            self.client.connect(self.broker_host, self.broker_port, keepalive=60)
            self.client.loop_start()
            self._running = True

            if self._connected.wait(timeout=timeout):
                logger.info("✅ MQTT Control Plane connected")
                return True
            else:
                logger.error(f"❌ Connection timeout after {timeout}s")
                return False

        except OSError as e:
            self.structured_logger.error(
                event=LogEvent.MQTT_CONNECTION_ERROR,
                message="Error connecting to MQTT broker",
                metadata={'broker': f"{self.broker_host}:{self.broker_port}"},
                exc_info=e,
            )
            return False

    def disconnect(self) -> None:
        """Disconnect from MQTT broker. Safe to call multiple times."""
        if self._running:
            logger.info("🔌 Disconnecting from MQTT broker")
            self.publish_status("disconnected")
            self.client.loop_stop()
            self.client.disconnect()
            self._running = False
            self._connected.clear()
            logger.info("✅ MQTT Control Plane disconnected")

    def publish_status(self, status: str, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Publish status update to status topic (QoS 1, retained).

        Args:
            status: Status string (e.g., "connected", "disconnected")
            details: Optional extra fields merged into the message
        """
        message = {
            "status": status,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "client_id": self.client_id,
        }
        if details:
            message.update(details)

        try:
            self.client.publish(
                self.status_topic,
                json.dumps(message),
                qos=1,
                retain=True,
            )
            logger.debug(f"📤 Status published: {status}")
        except (OSError, ValueError) as e:
            logger.error(f"❌ Error publishing status: {e}")

    def publish_reply(self, reply: AreaReply) -> None:
        """Publish a reply to the reply topic."""
        try:
            self.client.publish(
                self.reply_topic,
                json.dumps(reply.to_dict(), allow_nan=False),
                qos=self.qos,
                retain=False,
            )
            self.structured_logger.debug(
                event=LogEvent.MQTT_REPLY_PUBLISHED,
                message=f"Reply published: {reply.command}",
                metadata={'request_id': reply.request_id, 'ok': reply.ok},
            )
        except (OSError, ValueError) as e:
            self.structured_logger.error(
                event=LogEvent.MQTT_PUBLISH_ERROR,
                message="Error publishing reply",
                metadata={'request_id': reply.request_id},
                exc_info=e,
            )

    def handle_payload(self, payload: bytes) -> AreaReply:
        """
        Decode a raw request payload and dispatch it.

        Invalid JSON becomes a failure reply.
        """
        try:
            data = json.loads(payload.decode('utf-8'))
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError, oversized integer literals
            self.structured_logger.error(
                event=LogEvent.DESERIALIZATION_ERROR,
                message="Failed to decode request JSON",
                metadata={'payload': payload[:200]},
                exc_info=e,
            )
            return AreaReply.failure('', f"invalid request: {e}")

        return dispatch_request(self.command_registry, data, self.structured_logger)

    # ===== MQTT Callbacks (run in MQTT thread) =====

    def _on_connect(self, client, userdata, flags, reason_code, properties=None):
        if reason_code.is_failure:
            logger.error(f"❌ Connection failed (reason={reason_code})")
            self._connected.clear()
            return

        client.subscribe(self.request_topic, qos=self.qos)
        self.structured_logger.info(
            event=LogEvent.MQTT_CONNECTED,
            message="Connected to broker and subscribed to requests",
            metadata={
                'broker': f"{self.broker_host}:{self.broker_port}",
                'request_topic': self.request_topic,
                'reply_topic': self.reply_topic,
            },
        )

        self.publish_status("connected", {"commands": sorted(self.command_registry.available_commands)})
        self._connected.set()

    def _on_disconnect(self, client, userdata, disconnect_flags, reason_code, properties=None):
        if reason_code.is_failure:
            self.structured_logger.warning(
                event=LogEvent.MQTT_DISCONNECTED,
                message="Unexpected disconnection",
                metadata={'reason_code': str(reason_code)},
            )
        else:
            logger.info("✅ Disconnected from broker")
        self._connected.clear()

    def _on_message(self, client, userdata, msg):
        """
        MQTT callback: request message received.

        Thread: Runs in MQTT client thread
        """
        logger.debug(f"📦 Request received on {msg.topic}")
        reply = self.handle_payload(msg.payload)
        self.publish_reply(reply)
