"""Tests for CLI request building, reply formatting and reply correlation."""

import argparse
import json
from types import SimpleNamespace

import pytest

from shapearea_cli.cli import build_parser, build_request, format_reply, parse_number, parse_point
from shapearea_cli.mqtt_client import MQTTAreaClient
from shapearea_control import RequestError


def test_parse_number() -> None:
    assert parse_number("4") == 4
    assert isinstance(parse_number("4"), int)
    assert parse_number("-2.5") == -2.5
    with pytest.raises(argparse.ArgumentTypeError):
        parse_number("four")


def test_parse_point() -> None:
    assert parse_point("1, 2.5") == {"x": 1, "y": 2.5}
    with pytest.raises(argparse.ArgumentTypeError):
        parse_point("1;2")


def test_rectangle_request() -> None:
    args = build_parser().parse_args(["rectangle", "4,3", "0,0", "--unit", "cm"])
    assert build_request(args) == {
        "command": "calc_rectangle_area",
        "target": {"top_left": {"x": 4, "y": 3}, "bottom_right": {"x": 0, "y": 0}},
        "unit": "cm",
    }


def test_legacy_rectangle_request() -> None:
    args = build_parser().parse_args(["legacy-rectangle", "0,0", "4,3"])
    assert build_request(args)["command"] == "calc_area"


def test_circle_request() -> None:
    args = build_parser().parse_args(["circle", "0,0", "2"])
    assert build_request(args) == {
        "command": "calc_circle_area",
        "target": {"center": {"x": 0, "y": 0}, "radius": 2},
    }


def test_polygon_request() -> None:
    args = build_parser().parse_args(["polygon", "0,0", "4,0", "4,4", "0,4"])
    request = build_request(args)
    assert request["command"] == "calc_polygon_area"
    assert len(request["target"]["points"]) == 4


def test_yaml_request(tmp_path) -> None:
    path = tmp_path / "req.yaml"
    path.write_text("command: calc_circle_area\ntarget:\n  center: {x: 0, y: 0}\n  radius: 1\n")
    args = build_parser().parse_args(["request", str(path)])
    assert build_request(args)["target"]["radius"] == 1


def test_yaml_request_missing_file(tmp_path) -> None:
    args = build_parser().parse_args(["request", str(tmp_path / "missing.yaml")])
    with pytest.raises(FileNotFoundError):
        build_request(args)


def test_format_reply() -> None:
    assert format_reply({"ok": False, "error": "invalid circle"}) == "❌ invalid circle"
    assert format_reply({"ok": True, "result": 12}) == "✅ area = 12"
    assert "cm²" in format_reply({"ok": True, "result": 12, "unit": "cm", "converted_area": 0.0084})
    assert "help: List" in format_reply({"ok": True, "result": {"help": "List available commands"}})


def test_help_request() -> None:
    args = build_parser().parse_args(["help"])
    assert build_request(args) == {"command": "help", "target": {}}


def test_yaml_request_without_command(tmp_path) -> None:
    path = tmp_path / "req.yaml"
    path.write_text("target:\n  radius: 1\n")
    args = build_parser().parse_args(["request", str(path)])
    with pytest.raises(RequestError, match="command"):
        build_request(args)


def reply_message(payload) -> SimpleNamespace:
    if not isinstance(payload, bytes):
        payload = json.dumps(payload).encode("utf-8")
    return SimpleNamespace(topic="shapearea/area_01/replies", payload=payload)


def test_client_ignores_other_replies() -> None:
    client = MQTTAreaClient()
    client._request_id = "mine"

    client._on_message(client.client, None, reply_message(b"{not json"))
    client._on_message(client.client, None, reply_message({"request_id": "theirs", "ok": True, "result": 1}))
    assert client._reply is None
    assert not client._reply_received.is_set()

    client._on_message(client.client, None, reply_message({"request_id": "mine", "ok": True, "result": 12}))
    assert client._reply == {"request_id": "mine", "ok": True, "result": 12}
    assert client._reply_received.is_set()


def test_client_subscribes_to_reply_topic_on_connect() -> None:
    client = MQTTAreaClient()
    client._reply_topic = "shapearea/area_01/replies"
    subscriptions = []
    recorder = SimpleNamespace(subscribe=lambda topic, qos=0: subscriptions.append((topic, qos)))

    client._on_connect(recorder, None, {}, SimpleNamespace(is_failure=True))
    assert subscriptions == []

    client._on_connect(recorder, None, {}, SimpleNamespace(is_failure=False))
    assert subscriptions == [("shapearea/area_01/replies", 1)]

    client._on_subscribe(recorder, None, 1, [])
    assert client._subscribed.is_set()
