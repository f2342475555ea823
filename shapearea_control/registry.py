"""
CommandRegistry - Explicit command registration pattern

Bounded Context: Command registration and dispatch
Responsibilities:
  - Register remote-callable operations with handlers
  - Validate command existence before execution
  - Provide introspection (available_commands, get_help)

Threading: Thread-safe (uses lock for write operations)
"""

from typing import Any, Callable, Dict, Set
import threading


class CommandNotAvailableError(Exception):
    """Raised when attempting to execute an unregistered command"""
    pass


class CommandRegistry:
    """
    Registry for remote-callable commands with explicit registration.

    Handlers receive the full request payload and return the command result.

    Example:
        registry = CommandRegistry()
        registry.register('calc_circle_area', handler.calc_circle_area, "Circle area")

        try:
            result = registry.execute('calc_circle_area', request)
        except CommandNotAvailableError as e:
            print(f"Command not available: {e}")
    """

    def __init__(self):
        self._commands: Dict[str, Callable] = {}
        self._descriptions: Dict[str, str] = {}
        self._lock = threading.Lock()

    def register(self, command: str, handler: Callable, description: str) -> None:
        """
        Register a command with its handler function.

        Args:
            command: Command name (lowercase, underscores)
            handler: Callable that executes the command
            description: Human-readable description for help text

        Raises:
            ValueError: If command already registered (double registration)
        """
        with self._lock:
            if command in self._commands:
                raise ValueError(f"Command '{command}' already registered")

            self._commands[command] = handler
            self._descriptions[command] = description

    def execute(self, command: str, command_data: Dict[str, Any]) -> Any:
        """
        Execute a registered command.

        Args:
            command: Command name to execute
            command_data: Request payload passed to the handler

        Returns:
            Whatever the handler returns

        Raises:
            CommandNotAvailableError: If command not registered
        """
        if command not in self._commands:
            raise CommandNotAvailableError(
                f"Command '{command}' not available. "
                f"Available commands: {', '.join(sorted(self.available_commands))}"
            )

        return self._commands[command](command_data)

    @property
    def available_commands(self) -> Set[str]:
        """Snapshot of registered command names."""
        return set(self._commands.keys())

    def get_help(self) -> Dict[str, str]:
        """Snapshot of commands with descriptions."""
        return dict(self._descriptions)

    def count(self) -> int:
        return len(self._commands)
