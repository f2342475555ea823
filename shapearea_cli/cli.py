"""
Shape Area CLI - Main entry point.

Builds area requests from command-line arguments (or a YAML file), sends
them to the area service over MQTT and prints the reply.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from shapearea_control.schemas import AreaRequest

from .mqtt_client import MQTTAreaClient


def parse_number(text: str) -> Union[int, float]:
    """
    Parse "4" as int and "4.5" as float.

    Raises:
        argparse.ArgumentTypeError: If text is not a number
    """
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")


def parse_point(text: str) -> Dict[str, Union[int, float]]:
    """
    Parse "x,y" into {"x": x, "y": y}.

    Raises:
        argparse.ArgumentTypeError: If text is not two comma-separated numbers
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"point must be 'x,y', got {text!r}")
    return {"x": parse_number(parts[0].strip()), "y": parse_number(parts[1].strip())}


def load_yaml_config(config_path: str) -> Dict[str, Any]:
    """
    Load a request from a YAML file.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If YAML is invalid
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}")

    if not isinstance(config, dict):
        raise ValueError(f"Request in {config_path} must be a mapping")
    return config


def build_request(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Build the request dictionary for the parsed subcommand.

    Raises:
        RequestError: If a YAML request has no command or a non-object target
    """
    unit = getattr(args, "unit", None)

    if args.command == "rectangle":
        request = AreaRequest(
            command="calc_rectangle_area",
            target={"top_left": args.top_left, "bottom_right": args.bottom_right},
            unit=unit,
        )
    elif args.command == "legacy-rectangle":
        request = AreaRequest(
            command="calc_area",
            target={"top_left": args.top_left, "bottom_right": args.bottom_right},
        )
    elif args.command == "circle":
        request = AreaRequest(
            command="calc_circle_area",
            target={"center": args.center, "radius": args.radius},
            unit=unit,
        )
    elif args.command == "polygon":
        request = AreaRequest(
            command="calc_polygon_area",
            target={"points": list(args.points)},
            unit=unit,
        )
    elif args.command == "request":
        request = AreaRequest.from_dict(load_yaml_config(args.config))
    elif args.command == "help":
        request = AreaRequest(command="help")
    else:
        raise ValueError(f"Unknown command: {args.command}")

    return request.to_dict()


def format_reply(reply: Dict[str, Any]) -> str:
    """Human-readable one-line rendering of a reply."""
    if not reply.get("ok"):
        return f"❌ {reply.get('error')}"

    result = reply.get("result")
    if isinstance(result, dict):
        return "\n".join(f"  {name}: {description}" for name, description in sorted(result.items()))

    text = f"✅ area = {result}"
    if reply.get("unit"):
        text += f" ({reply['converted_area']:.4f} {reply['unit']}²)"
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapearea-cli",
        description="Shape Area CLI - Send area requests to the area service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  shapearea-cli rectangle 0,0 4,3
  shapearea-cli legacy-rectangle 0,0 4,3
  shapearea-cli circle 0,0 2 --unit cm
  shapearea-cli polygon 0,0 4,0 4,4 0,4
  shapearea-cli request config/requests/square.yaml
  shapearea-cli help
"""
    )

    parser.add_argument("--service-id", default="area_01", help="Target service ID (default: area_01)")
    parser.add_argument("--topic-prefix", default="shapearea", help="Topic prefix (default: shapearea)")
    parser.add_argument("--broker", default="localhost", help="MQTT broker host (default: localhost)")
    parser.add_argument("--port", type=int, default=1883, help="MQTT broker port (default: 1883)")
    parser.add_argument("--timeout", type=float, default=5.0, help="Reply timeout in seconds (default: 5)")
    parser.add_argument("--json", action="store_true", help="Print the raw JSON reply")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_unit(sub):
        sub.add_argument("--unit", choices=["px", "cm", "mm", "in"], help="Also report area in this unit")

    rectangle = subparsers.add_parser("rectangle", help="Rectangle area (corners in any order)")
    rectangle.add_argument("top_left", type=parse_point, help="First corner as x,y")
    rectangle.add_argument("bottom_right", type=parse_point, help="Opposite corner as x,y")
    add_unit(rectangle)

    legacy = subparsers.add_parser("legacy-rectangle", help="Integer rectangle area (strict corner order)")
    legacy.add_argument("top_left", type=parse_point, help="Top-left corner as x,y")
    legacy.add_argument("bottom_right", type=parse_point, help="Bottom-right corner as x,y")

    circle = subparsers.add_parser("circle", help="Circle area")
    circle.add_argument("center", type=parse_point, help="Center as x,y")
    circle.add_argument("radius", type=parse_number, help="Radius")
    add_unit(circle)

    polygon = subparsers.add_parser("polygon", help="Polygon area (more than 3 points)")
    polygon.add_argument("points", type=parse_point, nargs="+", help="Vertices as x,y")
    add_unit(polygon)

    request = subparsers.add_parser("request", help="Send a request from a YAML file")
    request.add_argument("config", help="Path to request YAML")

    subparsers.add_parser("help", help="List commands offered by the service")

    return parser


def main(argv: List[str] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    prefix = f"{args.topic_prefix}/{args.service_id}"

    try:
        request = build_request(args)
        client = MQTTAreaClient(broker=args.broker, port=args.port)
        reply = client.request(
            request_topic=f"{prefix}/requests",
            reply_topic=f"{prefix}/replies",
            request=request,
            timeout=args.timeout,
        )
    except (OSError, ValueError, TimeoutError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(reply, indent=2) if args.json else format_reply(reply))
    sys.exit(0 if reply.get("ok") else 2)


if __name__ == '__main__':
    main()
