"""
Shape Area CLI - Command-line client for the area service.

Sends one area request over MQTT and prints the reply.

Usage:
    shapearea-cli rectangle 0,0 4,3
    shapearea-cli circle 0,0 2 --unit cm
    shapearea-cli polygon 0,0 4,0 4,4 0,4
    shapearea-cli legacy-rectangle 0,0 4,3
    shapearea-cli request config/requests/square.yaml
    shapearea-cli help
"""

__version__ = "1.0.0"
