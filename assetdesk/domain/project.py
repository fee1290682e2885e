"""Loaded project DTOs and the single project slot owned by the controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .errors import NotLoaded


@dataclass(frozen=True)
class ProjectEntry:
    """One loaded input file.

    Attributes:
        source: Absolute path of the file on disk.
        relative_path: Path relative to the selected input root, used as the
            export location.
        size: File size in bytes at load time.
    """

    source: str
    relative_path: str
    size: int


@dataclass
class Project:
    """Result of a successful load; opaque to the controller.

    ``temporary_bundles`` is engine bookkeeping for staging directories
    created while exporting. It is the only field that changes after load.
    """

    source_paths: Tuple[str, ...]
    entries: Tuple[ProjectEntry, ...]
    metadata: Dict[str, Any] = field(default_factory=dict)
    temporary_bundles: List[str] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.entries)

    @property
    def total_bytes(self) -> int:
        return sum(entry.size for entry in self.entries)


class ProjectState:
    """Holds at most one project; ``is_loaded`` is derived from the slot."""

    def __init__(self) -> None:
        self._project: Optional[Project] = None

    @property
    def is_loaded(self) -> bool:
        return self._project is not None

    def current(self) -> Project:
        """Return the loaded project.

        Raises:
            NotLoaded: If no project is loaded.
        """
        if self._project is None:
            raise NotLoaded()
        return self._project

    def replace(self, project: Project) -> None:
        if project is None:
            raise ValueError("Use clear() to unload the project.")
        self._project = project

    def clear(self) -> None:
        self._project = None


__all__ = ["Project", "ProjectEntry", "ProjectState"]
