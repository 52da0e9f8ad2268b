"""Synchronous command dispatch for the service layer."""

import logging
from collections.abc import Callable
from typing import Any

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Raised when a command type has no registered handler."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """Route each command to the single handler registered for its type.

    Handlers are called with the command only; their collaborators are bound
    beforehand (see `userdir.bootstrap.inject_dependencies`). Whatever the
    handler returns is returned from `handle`, so a save can hand back the
    stored record with its new id.

    Args:
        command_handlers: Command type -> handler.
    """

    def __init__(
        self,
        command_handlers: dict[type[Command], Callable[..., Any]],
    ) -> None:
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> Any:
        """Dispatch `cmd` and return the handler's result.

        Raises:
            NoHandlerForCommand: If nothing is registered for ``type(cmd)``.
            Exception: Whatever the handler raises, after logging it.
        """
        try:
            handler = self._command_handlers[type(cmd)]
        except KeyError:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd) from None

        handler_name = self._get_handler_name(handler)
        logger.debug("Handling command %s with handler %s", cmd, handler_name)
        try:
            return handler(cmd)
        except Exception:  # pylint: disable=broad-except
            logger.exception(
                "Exception handling command %s with handler %s", cmd, handler_name
            )
            raise

    @staticmethod
    def _get_handler_name(fn: Callable[..., Any]) -> str:
        # functools.partial keeps the wrapped function in .func
        target = getattr(fn, "func", fn)
        return getattr(target, "__name__", None) or repr(fn)
