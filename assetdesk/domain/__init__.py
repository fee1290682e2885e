"""Domain models, ports and errors for the AssetDesk controller."""

from .configuration import LibraryConfiguration
from .errors import (
    Busy,
    ConfigurationMismatch,
    ExportError,
    LoadError,
    NotLoaded,
    ValidationError,
)
from .ports import UseCaseError
from .project import Project, ProjectEntry, ProjectState
from .results import CommandResult

__all__ = [
    "Busy",
    "CommandResult",
    "ConfigurationMismatch",
    "ExportError",
    "LibraryConfiguration",
    "LoadError",
    "NotLoaded",
    "Project",
    "ProjectEntry",
    "ProjectState",
    "UseCaseError",
    "ValidationError",
]
