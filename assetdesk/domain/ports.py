from __future__ import annotations
from typing import TYPE_CHECKING, Dict, Optional, Protocol, Sequence, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from .configuration import LibraryConfiguration
    from .project import Project

FileFilter = Tuple[str, Tuple[str, ...]]  # ("Log File", ("log",))


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class DialogPort(Protocol):
    """Native pickers and blocking message boxes.

    Every picker resolves to an empty result when the user cancels.
    """

    async def pick_files(self, multi: bool) -> Sequence[str]: ...
    async def pick_folders(self, multi: bool) -> Sequence[str]: ...
    async def pick_save_file(
        self, default_name: str, file_filter: FileFilter
    ) -> Optional[str]: ...
    async def confirm(
        self, message: str, buttons: Sequence[str]
    ) -> Optional[int]: ...  # index of the pressed button, None if dismissed
    async def notify_error(self, message: str) -> None: ...


class ExportEnginePort(Protocol):
    """Asset engine bound to one LibraryConfiguration instance."""

    settings: "LibraryConfiguration"

    def load_and_process(self, paths: Sequence[str]) -> "Project": ...
    def export(self, project: "Project", destination: str) -> None: ...
    def release_temporary_resources(self, project: "Project") -> None: ...


class ViewPort(Protocol):
    """Display of the current project state."""

    def refresh_view(self) -> None: ...
    def reload_view(self) -> None: ...


class WindowPort(Protocol):
    """Application window controls.

    ``has_native_window`` is False when the page is served to a browser tab;
    fullscreen and minimize only apply to the native window.
    """

    def has_native_window(self) -> bool: ...
    def toggle_fullscreen(self) -> None: ...
    def minimize(self) -> None: ...
    def quit(self) -> None: ...


class LocalizationPort(Protocol):
    """Text resources per locale."""

    current_language: str

    def language_names(self) -> Dict[str, str]: ...  # {"en": "English", ...}
    def load_language(self, code: str) -> None: ...
    def text(self, key: str, default: str = "") -> str: ...


class LogSourcePort(Protocol):
    """Accumulated log text of the running process."""

    def text(self) -> str: ...


class SettingsStoragePort(Protocol):
    """Persistence for the startup configuration."""

    def load_user_settings(self) -> Optional[Dict]: ...
    def save_user_settings(self, payload: Dict) -> None: ...
