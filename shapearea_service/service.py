"""
Area Service - Request/reply orchestrator.

Wires the area command handlers into the MQTT control plane and manages
the service lifecycle (start, wait, stop).

Threading Model:
- Control Plane Thread (paho-mqtt internal, runs request handlers)
- Caller thread blocks in wait() until stop() is called
"""

import logging
import threading

from shapearea_control import AreaCommands, MQTTControlPlane
from shapearea_control.logging import create_logger
from shapearea_service.config import ServiceConfig

logger = logging.getLogger(__name__)


class AreaService:
    """
    Main area service.

    Usage:
        config = ServiceConfig.from_yaml("config/area_service.yaml")
        control_plane = MQTTControlPlane(...)

        service = AreaService(config=config, control_plane=control_plane)
        service.setup()
        service.start()
        service.wait()  # Blocks until stopped
    """

    def __init__(self, config: ServiceConfig, control_plane: MQTTControlPlane):
        self.config = config
        self.control_plane = control_plane
        self.commands = AreaCommands(
            structured_logger=create_logger("commands"),
            default_unit=config.default_unit,
        )

        self._running = False
        self._setup_done = False
        self._stopped_event = threading.Event()

    @classmethod
    def from_config(cls, config: ServiceConfig) -> "AreaService":
        """Build the service and its control plane from configuration."""
        control_plane = MQTTControlPlane(
            broker_host=config.mqtt_config.broker,
            broker_port=config.mqtt_config.port,
            request_topic=config.request_topic,
            reply_topic=config.reply_topic,
            status_topic=config.status_topic,
            client_id=f"area_service_{config.service_id}",
            username=config.mqtt_config.username,
            password=config.mqtt_config.password,
            qos=config.mqtt_config.qos,
        )
        return cls(config=config, control_plane=control_plane)

    @property
    def is_running(self) -> bool:
        return self._running

    def setup(self) -> None:
        """Register command handlers with the control plane."""
        if self._setup_done:
            return
        self.commands.register(self.control_plane.command_registry)
        self._setup_done = True
        logger.info(
            f"Commands available: {', '.join(sorted(self.control_plane.command_registry.available_commands))}"
        )

    def start(self) -> None:
        """
        Start the service (non-blocking).

        Raises:
            RuntimeError: If the broker connection fails
        """
        if self._running:
            logger.warning("Service already running")
            return

        self.setup()
        logger.info("Starting area service")

        if not self.control_plane.connect(timeout=5.0):
            raise RuntimeError("Failed to connect to MQTT broker (control plane)")

        self._stopped_event.clear()
        self._running = True
        self.control_plane.publish_status("running")
        logger.info(f"✅ Area service started (requests on {self.config.request_topic})")

    def wait(self, timeout: float = None) -> bool:
        """
        Block until stop() is called.

        Returns:
            True if the service stopped, False on timeout
        """
        if not self._running:
            logger.warning("Service not running")
            return True
        return self._stopped_event.wait(timeout=timeout)

    def stop(self) -> None:
        """Publish stopped status and disconnect the control plane."""
        if not self._running:
            logger.warning("Service not running")
            return

        logger.info("Stopping area service")
        self.control_plane.publish_status("stopped")
        self.control_plane.disconnect()

        self._running = False
        self._stopped_event.set()
        logger.info("✅ Area service stopped")
