"""Domain-level error types for use-case and controller mapping.

Every error here is a :class:`~assetdesk.domain.ports.UseCaseError` so the
error boundary can present ``message`` without knowing the concrete type.
User cancellation is deliberately absent: it is reported as
``CommandResult.cancelled()`` and never raised.
"""
from __future__ import annotations

from .ports import UseCaseError


class ValidationError(UseCaseError):
    """Bad selection or destination; shown to the user, state untouched."""

    def __init__(self, message: str):
        super().__init__("VALIDATION", message)


class LoadError(UseCaseError):
    """The engine could not load or process the selected inputs."""

    def __init__(self, message: str):
        super().__init__("LOAD_FAILED", message)


class ExportError(UseCaseError):
    """The engine failed while writing output."""

    def __init__(self, message: str):
        super().__init__("EXPORT_FAILED", message)


class NotLoaded(UseCaseError):
    def __init__(self, message: str = "No files loaded"):
        super().__init__("NOT_LOADED", message)


class ConfigurationMismatch(UseCaseError):
    """An engine binding was built against a different configuration."""

    def __init__(self, message: str = "Export engine settings do not match the controller settings."):
        super().__init__("CONFIG_MISMATCH", message)


class Busy(UseCaseError):
    def __init__(self, message: str = "Another command is still running."):
        super().__init__("BUSY", message)


__all__ = [
    "Busy",
    "ConfigurationMismatch",
    "ExportError",
    "LoadError",
    "NotLoaded",
    "ValidationError",
]
