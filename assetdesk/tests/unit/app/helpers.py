from __future__ import annotations

import os
from typing import Dict, List, Optional, Sequence, Tuple

from assetdesk.app.controller import WorkflowController
from assetdesk.domain.configuration import LibraryConfiguration
from assetdesk.domain.errors import LoadError
from assetdesk.domain.project import Project, ProjectEntry


class DialogsDouble:
    """Scripted dialog port; every call is recorded in ``calls``."""

    def __init__(
        self,
        *,
        files: Sequence[Sequence[str]] = (),
        folders: Sequence[Sequence[str]] = (),
        save_path: Optional[str] = None,
        confirm_response: Optional[int] = None,
    ) -> None:
        self._files = [list(item) for item in files]
        self._folders = [list(item) for item in folders]
        self.save_path = save_path
        self.confirm_response = confirm_response
        self.calls: List[Tuple] = []
        self.errors: List[str] = []
        self.confirmations: List[Tuple[str, List[str]]] = []

    async def pick_files(self, multi: bool) -> Sequence[str]:
        self.calls.append(("pick_files", multi))
        return self._files.pop(0) if self._files else []

    async def pick_folders(self, multi: bool) -> Sequence[str]:
        self.calls.append(("pick_folders", multi))
        return self._folders.pop(0) if self._folders else []

    async def pick_save_file(self, default_name: str, file_filter) -> Optional[str]:
        self.calls.append(("pick_save_file", default_name, file_filter))
        return self.save_path

    async def confirm(self, message: str, buttons: Sequence[str]) -> Optional[int]:
        self.confirmations.append((message, list(buttons)))
        return self.confirm_response

    async def notify_error(self, message: str) -> None:
        self.errors.append(message)


class ViewSpy:
    def __init__(self) -> None:
        self.refreshes = 0
        self.reloads = 0

    def refresh_view(self) -> None:
        self.refreshes += 1

    def reload_view(self) -> None:
        self.reloads += 1


class WindowDouble:
    def __init__(self, native: bool = True) -> None:
        self.native = native
        self.actions: List[str] = []

    def has_native_window(self) -> bool:
        return self.native

    def toggle_fullscreen(self) -> None:
        self.actions.append("toggle_fullscreen")

    def minimize(self) -> None:
        self.actions.append("minimize")

    def quit(self) -> None:
        self.actions.append("quit")


class EngineDouble:
    """Engine binding that fabricates projects from path names.

    Paths containing ``broken`` fail to load; ``export_error`` makes the next
    export raise after registering a temporary bundle.
    """

    def __init__(self, settings: LibraryConfiguration) -> None:
        self.settings = settings
        self.loaded: List[List[str]] = []
        self.exports: List[Tuple[Project, str]] = []
        self.released: List[Project] = []
        self.export_error: Optional[Exception] = None
        self.destination_snapshot: Optional[List[str]] = None

    def load_and_process(self, paths: Sequence[str]) -> Project:
        self.loaded.append(list(paths))
        if any("broken" in path for path in paths):
            raise LoadError(f"Cannot read {paths[0]}")
        entries = tuple(
            ProjectEntry(source=path, relative_path=os.path.basename(path), size=1) for path in paths
        )
        return Project(source_paths=tuple(paths), entries=entries)

    def export(self, project: Project, destination: str) -> None:
        self.destination_snapshot = sorted(os.listdir(destination))
        self.exports.append((project, destination))
        if self.export_error is not None:
            project.temporary_bundles.append(os.path.join(destination, ".staging"))
            raise self.export_error

    def release_temporary_resources(self, project: Project) -> None:
        self.released.append(project)
        project.temporary_bundles.clear()


class LocalizationDouble:
    def __init__(self, names: Optional[Dict[str, str]] = None) -> None:
        self.current_language = "en"
        self.names = names or {"en": "English", "de": "Deutsch"}
        self.loaded: List[str] = []

    def language_names(self) -> Dict[str, str]:
        return dict(self.names)

    def load_language(self, code: str) -> None:
        if code not in self.names:
            raise KeyError(code)
        self.loaded.append(code)
        self.current_language = code

    def text(self, key: str, default: str = "") -> str:
        return default or key


class LogSourceDouble:
    def __init__(self, text: str = "") -> None:
        self._text = text

    def text(self) -> str:
        return self._text


def make_controller(
    dialogs: Optional[DialogsDouble] = None,
    *,
    log_text: str = "",
    window: Optional[WindowDouble] = None,
) -> Tuple[WorkflowController, DialogsDouble, ViewSpy, EngineDouble]:
    settings = LibraryConfiguration()
    dialogs = dialogs or DialogsDouble()
    view = ViewSpy()
    engine = EngineDouble(settings)
    controller = WorkflowController(
        settings=settings,
        dialogs=dialogs,
        view=view,
        window=window or WindowDouble(),
        localization=LocalizationDouble(),
        log_source=LogSourceDouble(log_text),
        engine=engine,
    )
    return controller, dialogs, view, engine


__all__ = [
    "DialogsDouble",
    "EngineDouble",
    "LocalizationDouble",
    "LogSourceDouble",
    "ViewSpy",
    "WindowDouble",
    "make_controller",
]
