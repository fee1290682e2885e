from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..domain.errors import LoadError, ValidationError
from ..domain.ports import ExportEnginePort, UseCaseError
from ..domain.project import Project


@dataclass
class LoadProject:
    engine: ExportEnginePort

    def __call__(self, paths: Sequence[str]) -> Project:
        """Load and process the selected inputs into a new project."""
        selected = [str(path) for path in paths if str(path).strip()]
        if not selected:
            raise ValidationError("No input paths selected.")
        try:
            project = self.engine.load_and_process(selected)
        except UseCaseError:
            raise
        except Exception as exc:
            raise LoadError(str(exc) or exc.__class__.__name__) from exc
        if project is None:
            raise LoadError("Engine returned no project.")
        return project
