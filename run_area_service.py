#!/usr/bin/env python3
"""
Area Service - Entry Point
==========================

Starts the shape area service, which:
- Subscribes to the request topic on the MQTT broker
- Computes rectangle / circle / polygon areas (or reports invalid shapes)
- Publishes one reply per request

Usage:
    python run_area_service.py --config config/area_service.yaml

Lifecycle:
    1. Load configuration from YAML
    2. Setup logging (console + file)
    3. Create AreaService (control plane + command handlers)
    4. Start service (non-blocking)
    5. Wait for stop signal (Ctrl+C or SIGTERM)
    6. Graceful shutdown
"""

import argparse
import signal
import sys
import logging
from pathlib import Path
from typing import Optional

from shapearea_service import AreaService, ServiceConfig


# ─────────────────────────────────────────────────────────────────────────────
# Logging Setup
# ─────────────────────────────────────────────────────────────────────────────

def setup_logging(log_file: Optional[Path] = None, level: int = logging.INFO) -> logging.Logger:
    """
    Setup logging for the area service.

    Args:
        log_file: Optional path to log file
        level: Root logging level
    """
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
            *(
                [logging.FileHandler(log_file)]
                if log_file
                else []
            )
        ]
    )

    return logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Main Service
# ─────────────────────────────────────────────────────────────────────────────

class AreaApp:
    """
    Application wrapper for AreaService.

    Handles configuration loading, signal handling and graceful shutdown.
    """

    def __init__(self, config_path: Path, log_file: Optional[Path] = None, verbose: bool = False):
        self.config_path = config_path
        self.logger = setup_logging(log_file, logging.DEBUG if verbose else logging.INFO)

        self.config: Optional[ServiceConfig] = None
        self.service: Optional[AreaService] = None

        self._shutdown_requested = False

    def setup(self):
        self.logger.info("=" * 80)
        self.logger.info("🚀 Shape Area Service - Starting")
        self.logger.info("=" * 80)

        self.logger.info(f"📄 Loading configuration: {self.config_path}")
        self.config = ServiceConfig.from_yaml(self.config_path)
        self.logger.info(f"✅ Configuration loaded (service_id={self.config.service_id})")

        self.service = AreaService.from_config(self.config)
        self.service.setup()

        self.logger.info(f"  - Request topic: {self.config.request_topic}")
        self.logger.info(f"  - Reply topic: {self.config.reply_topic}")
        self.logger.info(f"  - Status topic: {self.config.status_topic}")
        self.logger.info("=" * 80)

    def run(self):
        """Run the service. Blocks until shutdown is requested."""
        if not self.service:
            raise RuntimeError("Service not initialized. Call setup() first.")

        signal.signal(signal.SIGTERM, self._signal_handler)
        signal.signal(signal.SIGINT, self._signal_handler)

        try:
            self.service.start()
            self.logger.info("Press Ctrl+C to stop")
            self.service.wait()

        except KeyboardInterrupt:
            self.logger.info("⚠️  KeyboardInterrupt received")
            self.shutdown()

        except RuntimeError as e:
            self.logger.error(f"❌ Service error: {e}", exc_info=True)
            self.shutdown()
            sys.exit(1)

    def shutdown(self):
        if self._shutdown_requested:
            self.logger.warning("⚠️  Shutdown already in progress")
            return

        self._shutdown_requested = True
        self.logger.info("🛑 Shutting down area service")

        if self.service and self.service.is_running:
            self.service.stop()

        self.logger.info("✅ Shutdown complete")

    def _signal_handler(self, signum, frame):
        signal_name = signal.Signals(signum).name
        self.logger.info(f"⚠️  Received signal {signal_name} ({signum})")
        self.shutdown()
        sys.exit(0)


# ─────────────────────────────────────────────────────────────────────────────
# CLI
# ─────────────────────────────────────────────────────────────────────────────

def parse_args():
    parser = argparse.ArgumentParser(
        description="Shape Area Service - MQTT request/reply area computation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start with default config
  python run_area_service.py --config config/area_service.yaml

  # Console only, debug logs
  python run_area_service.py --config config/area_service.yaml --no-log-file --verbose
        """
    )

    parser.add_argument(
        '--config',
        type=Path,
        required=True,
        help='Path to service configuration YAML file'
    )
    parser.add_argument(
        '--log-file',
        type=Path,
        default=Path('logs/area_service.log'),
        help='Path to log file (default: logs/area_service.log)'
    )
    parser.add_argument(
        '--no-log-file',
        action='store_true',
        help='Disable file logging (console only)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable DEBUG logging'
    )

    return parser.parse_args()


def main():
    args = parse_args()

    log_file = None if args.no_log_file else args.log_file

    if not args.config.exists():
        print(f"❌ Error: Configuration file not found: {args.config}", file=sys.stderr)
        sys.exit(1)

    app = AreaApp(config_path=args.config, log_file=log_file, verbose=args.verbose)

    try:
        app.setup()
        app.run()
    except (OSError, ValueError, RuntimeError) as e:
        print(f"❌ Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
