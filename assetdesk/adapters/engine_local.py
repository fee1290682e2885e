"""Filesystem export engine used as the default engine binding.

Loading collects the selected files (folders are walked recursively) into a
:class:`~assetdesk.domain.project.Project`. Exporting stages every file in a
temporary bundle directory first and only then moves the bundle into the
destination, so a failed copy leaves nothing half-written in the target.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections import Counter
from typing import Iterator, List, Sequence, Set, Tuple

from ..domain.configuration import LibraryConfiguration
from ..domain.errors import ExportError, LoadError
from ..domain.project import Project, ProjectEntry


class LocalExportEngine:
    """Load plain files from disk and copy them into an export directory."""

    def __init__(self, settings: LibraryConfiguration) -> None:
        self._log = logging.getLogger(__name__)
        self.settings = settings

    # ---- load ----
    def load_and_process(self, paths: Sequence[str]) -> Project:
        roots = [os.path.abspath(os.path.expanduser(str(path))) for path in paths]
        entries: List[ProjectEntry] = []
        used: Set[str] = set()
        for root in roots:
            if not os.path.exists(root):
                raise LoadError(f"Path does not exist: {root}")
            base = _unique_name(os.path.basename(os.path.normpath(root)), used)
            if os.path.isdir(root):
                entries.extend(self._walk(root, base))
            else:
                entries.append(self._entry(root, base))

        if not entries:
            raise LoadError("No loadable files found")

        extensions = Counter(
            os.path.splitext(entry.relative_path)[1].lower() or "<none>" for entry in entries
        )
        project = Project(
            source_paths=tuple(roots),
            entries=tuple(entries),
            metadata={
                "file_count": len(entries),
                "total_bytes": sum(entry.size for entry in entries),
                "extensions": dict(sorted(extensions.items())),
            },
        )
        self._log.debug("Collected %d entries from %s", len(entries), roots)
        return project

    def _walk(self, root: str, base: str) -> Iterator[ProjectEntry]:
        for current, dirnames, filenames in os.walk(root):
            if self.settings.skip_hidden_files:
                dirnames[:] = [name for name in dirnames if not name.startswith(".")]
            dirnames.sort()
            for name in sorted(filenames):
                if self.settings.skip_hidden_files and name.startswith("."):
                    continue
                source = os.path.join(current, name)
                relative = os.path.join(base, os.path.relpath(source, root))
                yield self._entry(source, relative)

    @staticmethod
    def _entry(source: str, relative: str) -> ProjectEntry:
        try:
            size = os.path.getsize(source)
        except OSError as exc:
            raise LoadError(f"Cannot read {source}: {exc.strerror or exc}") from exc
        return ProjectEntry(source=source, relative_path=relative.replace(os.sep, "/"), size=size)

    # ---- export ----
    def export(self, project: Project, destination: str) -> None:
        if not os.path.isdir(destination):
            raise ExportError(f"Export directory does not exist: {destination}")

        staging = tempfile.mkdtemp(prefix="assetdesk-bundle-", dir=self.settings.temp_dir or None)
        project.temporary_bundles.append(staging)
        self._log.debug("Staging export in %s", staging)

        for relative, source in self._targets(project):
            target = os.path.join(staging, relative)
            os.makedirs(os.path.dirname(target), exist_ok=True)
            shutil.copy2(source, target)

        for name in sorted(os.listdir(staging)):
            shutil.move(os.path.join(staging, name), os.path.join(destination, name))

        self._discard(project, staging)

    def _targets(self, project: Project) -> List[Tuple[str, str]]:
        if self.settings.preserve_structure:
            return [(entry.relative_path, entry.source) for entry in project.entries]
        used: Set[str] = set()
        return [
            (_unique_name(os.path.basename(entry.relative_path), used), entry.source)
            for entry in project.entries
        ]

    # ---- cleanup ----
    def release_temporary_resources(self, project: Project) -> None:
        for staging in list(project.temporary_bundles):
            self._discard(project, staging)

    def _discard(self, project: Project, staging: str) -> None:
        shutil.rmtree(staging, ignore_errors=True)
        if staging in project.temporary_bundles:
            project.temporary_bundles.remove(staging)


def _unique_name(name: str, used: Set[str]) -> str:
    """Return ``name``, or ``stem_N.ext`` when it was already handed out."""
    stem, ext = os.path.splitext(name)
    candidate, n = name, 0
    while candidate in used:
        n += 1
        candidate = f"{stem}_{n}{ext}"
    used.add(candidate)
    return candidate


__all__ = ["LocalExportEngine"]
