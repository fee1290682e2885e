"""Use case that writes the loaded project into a resolved destination.

A failed export leaves the project loaded and usable. The caller releases the
engine's temporary bundles through :meth:`ExportProject.release` once the
failure has been logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.errors import ExportError
from ..domain.ports import ExportEnginePort, UseCaseError
from ..domain.project import Project

_log = logging.getLogger(__name__)


@dataclass
class ExportProject:
    engine: ExportEnginePort

    def __call__(self, project: Project, destination: str) -> str:
        """Export ``project`` into ``destination`` and return the destination.

        Raises:
            ExportError: When the engine fails. Temporary bundles are left in
                place for :meth:`release`.
        """
        try:
            self.engine.export(project, destination)
        except UseCaseError as exc:
            if exc.code == "EXPORT_FAILED":
                raise
            raise ExportError(exc.message) from exc
        except Exception as exc:
            raise ExportError(str(exc) or exc.__class__.__name__) from exc
        return destination

    def release(self, project: Project) -> None:
        """Discard temporary export resources; failures are only logged."""
        try:
            self.engine.release_temporary_resources(project)
        except Exception:
            _log.exception("Releasing temporary export resources failed")
