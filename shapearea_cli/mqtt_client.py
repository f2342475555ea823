"""
MQTT client wrapper for sending area requests and awaiting replies.

Handles MQTT connection, publishing, reply correlation and disconnection.
"""

import json
import threading
import uuid
from typing import Any, Dict, Optional

import paho.mqtt.client as mqtt


class MQTTAreaClient:
    """
    Request/reply client for the area service.

    Subscribes to the reply topic, publishes the request with a fresh
    request_id, and waits for the reply carrying the same id.
    """

    def __init__(
        self,
        broker: str = "localhost",
        port: int = 1883,
        username: Optional[str] = None,
        password: Optional[str] = None
    ):
        self.broker = broker
        self.port = port

        self.client = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2)
        self.client.on_connect = self._on_connect
        self.client.on_subscribe = self._on_subscribe
        self.client.on_message = self._on_message

        if username and password:
            self.client.username_pw_set(username, password)

        self._subscribed = threading.Event()
        self._reply_received = threading.Event()
        self._reply_topic: Optional[str] = None
        self._request_id: Optional[str] = None
        self._reply: Optional[Dict[str, Any]] = None

    def request(
        self,
        request_topic: str,
        reply_topic: str,
        request: Dict[str, Any],
        timeout: float = 5.0,
        qos: int = 1
    ) -> Dict[str, Any]:
        """
        Send a request and block until its reply arrives.

        Args:
            request_topic: Topic the service listens on
            reply_topic: Topic the service replies on
            request: Request dictionary (request_id added if missing)
            timeout: Seconds to wait for connection and for the reply
            qos: Quality of Service (default: 1)

        Returns:
            Decoded reply dictionary

        Raises:
            ConnectionError: If unable to connect to MQTT broker
            TimeoutError: If no reply arrives in time
        """
        request = dict(request)
        request.setdefault("request_id", uuid.uuid4().hex)
        self._request_id = str(request["request_id"])
        self._reply_topic = reply_topic
        self._reply = None
        self._reply_received.clear()
        self._subscribed.clear()

        try:
            self.client.connect(self.broker, self.port, keepalive=60)
        except OSError:
            raise ConnectionError(
                f"Unable to connect to MQTT broker at {self.broker}:{self.port}. "
                "Is mosquitto running?"
            )

        self.client.loop_start()
        try:
            if not self._subscribed.wait(timeout=timeout):
                raise ConnectionError(f"Timed out connecting to {self.broker}:{self.port}")

            result = self.client.publish(request_topic, json.dumps(request), qos=qos)
            result.wait_for_publish(timeout=timeout)

            if not self._reply_received.wait(timeout=timeout):
                raise TimeoutError(
                    f"No reply for request {self._request_id} on {reply_topic} after {timeout}s"
                )
            return self._reply
        finally:
            self.client.loop_stop()
            self.client.disconnect()

    def _on_connect(self, client, userdata, flags, reason_code, properties=None):
        if reason_code.is_failure:
            return
        client.subscribe(self._reply_topic, qos=1)

    def _on_subscribe(self, client, userdata, mid, reason_code_list, properties=None):
        self._subscribed.set()

    def _on_message(self, client, userdata, msg):
        try:
            data = json.loads(msg.payload.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            return
        if isinstance(data, dict) and str(data.get("request_id")) == self._request_id:
            self._reply = data
            self._reply_received.set()
