"""Uniform catch-log-notify wrapper around command handlers.

Handlers run inside :meth:`ErrorBoundary.run`. Anything they raise, apart
from a configuration mismatch, is logged with full detail, shown once in a
blocking error dialog and turned into ``CommandResult.failed``. A per-command
cleanup callback runs between logging and the dialog. Expected
validation problems never reach this module; handlers report them directly.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from ..domain.errors import ConfigurationMismatch
from ..domain.ports import DialogPort, UseCaseError, ViewPort
from ..domain.results import CommandResult

Handler = Callable[[], Awaitable[CommandResult]]


def map_command_error(exc: Exception, *, default_code: str = "UNEXPECTED") -> UseCaseError:
    """Map any exception to a user-presentable UseCaseError."""
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, OSError):
        detail = exc.strerror or str(exc)
        if exc.filename:
            return UseCaseError("IO_ERROR", f"{detail}: {exc.filename}")
        return UseCaseError("IO_ERROR", detail)
    message = str(exc) or exc.__class__.__name__
    return UseCaseError(default_code, message)


class ErrorBoundary:
    """Convert handler failures into one logged, user-visible error."""

    def __init__(
        self,
        *,
        dialogs: DialogPort,
        view: ViewPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._dialogs = dialogs
        self._view = view
        self._log = logger or logging.getLogger(__name__)

    async def run(
        self,
        command_id: str,
        handler: Handler,
        on_failure: Optional[Callable[[], None]] = None,
    ) -> CommandResult:
        """Run ``handler``; on failure log, call ``on_failure``, notify, refresh."""
        try:
            return await handler()
        except ConfigurationMismatch:
            raise
        except Exception as exc:
            error = map_command_error(exc)
            self._log.error(
                "Command %s failed (%s): %s", command_id, error.code, error.message, exc_info=exc
            )
            if on_failure is not None:
                try:
                    on_failure()
                except Exception:
                    self._log.exception("Cleanup after %s failed", command_id)
            await self._notify(error.message)
            self._view.refresh_view()
            return CommandResult.failed(error)

    async def _notify(self, message: str) -> None:
        try:
            await self._dialogs.notify_error(message)
        except Exception:
            self._log.exception("Could not show error dialog")


__all__ = ["ErrorBoundary", "map_command_error"]
