"""Load/export workflow controller for the desktop app runtime.

This module owns the single project slot, the export engine binding and one
handler per menu command. It is constructed once in
:mod:`assetdesk.app.main` and handed to the page; nothing reaches the
project through module globals.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Awaitable, Callable, Dict, List, Optional

from ..adapters.engine_local import LocalExportEngine
from ..domain.configuration import LibraryConfiguration
from ..domain.errors import Busy, ConfigurationMismatch, NotLoaded, ValidationError
from ..domain.ports import (
    DialogPort,
    ExportEnginePort,
    LocalizationPort,
    LogSourcePort,
    UseCaseError,
    ViewPort,
    WindowPort,
)
from ..domain.project import Project, ProjectState
from ..domain.results import CommandResult
from ..usecases.change_language import ChangeLanguage
from ..usecases.export_project import ExportProject
from ..usecases.load_project import LoadProject
from ..usecases.resolve_export_directory import ResolveExportDirectory
from ..usecases.save_log import SaveLog
from .commands import COMMANDS, CommandId, MenuSection, build_menu
from .error_boundary import ErrorBoundary

LOG_FILE_FILTER = ("Log File", ("log",))

CommandHandler = Callable[..., Awaitable[CommandResult]]


class WorkflowController:
    """Serialize menu commands over one optional project.

    Call chain:
        Menu item click -> ``dispatch(command_id)`` -> busy guard ->
        ``ErrorBoundary.run`` -> command handler -> use case -> engine.
    """

    def __init__(
        self,
        *,
        settings: LibraryConfiguration,
        dialogs: DialogPort,
        view: ViewPort,
        window: WindowPort,
        localization: LocalizationPort,
        log_source: LogSourcePort,
        engine: Optional[ExportEnginePort] = None,
    ) -> None:
        """Wire ports and install the engine binding.

        Args:
            settings: Process-wide configuration; engines must share it.
            dialogs: Native pickers and message boxes.
            view: Refresh/reload of the rendered project page.
            window: Fullscreen, minimize and quit for the app window.
            localization: Locale store used by Change Language and the menu.
            log_source: Accumulated log text written by Save Log.
            engine: Engine binding; defaults to ``LocalExportEngine(settings)``.

        Raises:
            ConfigurationMismatch: If ``engine`` was built for other settings.
        """
        self._log = logging.getLogger(__name__)
        self._settings = settings
        self._dialogs = dialogs
        self._view = view
        self._window = window
        self._localization = localization
        self._state = ProjectState()
        self._busy = False
        self._boundary = ErrorBoundary(dialogs=dialogs, view=view)

        self.uc_resolve_destination = ResolveExportDirectory(dialogs)
        self.uc_save_log = SaveLog(log_source)
        self.uc_change_language = ChangeLanguage(localization)
        self.export_engine = engine if engine is not None else LocalExportEngine(settings)

        self._handlers: Dict[CommandId, CommandHandler] = {
            CommandId.LOAD_FILES: functools.partial(self._load, files=True),
            CommandId.LOAD_FOLDERS: functools.partial(self._load, files=False),
            CommandId.RESET: self._reset,
            CommandId.SAVE_LOG: self._save_log,
            CommandId.QUIT: self._quit,
            CommandId.RELOAD_VIEW: self._reload_view,
            CommandId.TOGGLE_FULLSCREEN: self._toggle_fullscreen,
            CommandId.EXPORT_ALL: self._export_all,
            CommandId.CHANGE_LANGUAGE: self._change_language,
            CommandId.MINIMIZE: self._minimize,
            CommandId.CLOSE_WINDOW: self._quit,
        }
        # Run by the error boundary after the failure is logged.
        self._failure_cleanups: Dict[CommandId, Callable[[], None]] = {
            CommandId.LOAD_FILES: self._state.clear,
            CommandId.LOAD_FOLDERS: self._state.clear,
            CommandId.EXPORT_ALL: self._release_export_resources,
        }

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    @property
    def settings(self) -> LibraryConfiguration:
        return self._settings

    @property
    def is_loaded(self) -> bool:
        return self._state.is_loaded

    def current_project(self) -> Project:
        """Return the loaded project; raises ``NotLoaded`` when absent."""
        return self._state.current()

    @property
    def busy(self) -> bool:
        """True while a command is running, including pending dialogs."""
        return self._busy

    @property
    def export_engine(self) -> ExportEnginePort:
        return self._engine

    @export_engine.setter
    def export_engine(self, engine: ExportEnginePort) -> None:
        if engine is None:
            raise ValueError("Export engine must not be None.")
        if getattr(engine, "settings", None) is not self._settings:
            raise ConfigurationMismatch()
        self._engine = engine
        self.uc_load = LoadProject(engine)
        self.uc_export = ExportProject(engine)

    def menu(self) -> List[MenuSection]:
        return build_menu(self._localization)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    async def dispatch(self, command_id: CommandId | str, argument: Optional[str] = None) -> CommandResult:
        """Run one command unless another is still in progress.

        Unknown ids and a missing or unexpected argument return
        ``failed(ValidationError)``. A re-entrant trigger returns
        ``failed(Busy)``. Neither touches state, dialogs nor the view.
        """
        try:
            command = CommandId(command_id)
        except ValueError:
            return self._invalid(f"Unknown command: {command_id}")
        if COMMANDS[command].takes_argument and argument is None:
            return self._invalid(f"Command {command.value} requires an argument")
        if not COMMANDS[command].takes_argument and argument is not None:
            return self._invalid(f"Command {command.value} takes no argument")

        if self._busy:
            self._log.debug("Ignoring %s: another command is running", command.value)
            return CommandResult.failed(Busy())

        handler = self._handlers[command]
        self._busy = True
        try:
            call = handler if argument is None else functools.partial(handler, argument)
            return await self._boundary.run(
                command.value, call, on_failure=self._failure_cleanups.get(command)
            )
        finally:
            self._busy = False

    def _invalid(self, message: str) -> CommandResult:
        self._log.warning("Rejected dispatch: %s", message)
        return CommandResult.failed(ValidationError(message))

    # ------------------------------------------------------------------
    # Command handlers
    # ------------------------------------------------------------------
    async def _load(self, *, files: bool) -> CommandResult:
        if files:
            selection = await self._dialogs.pick_files(multi=True)
        else:
            selection = await self._dialogs.pick_folders(multi=True)
        paths = [str(path) for path in selection or () if path]
        if not paths:
            return CommandResult.cancelled()

        project = await asyncio.to_thread(self.uc_load, paths)
        self._state.replace(project)
        self._log.info(
            "Loaded %d file(s) from %d input path(s)", project.file_count, len(paths)
        )
        self._view.refresh_view()
        return CommandResult.succeeded(project)

    async def _reset(self) -> CommandResult:
        self._state.clear()
        self._view.refresh_view()
        return CommandResult.succeeded()

    async def _export_all(self) -> CommandResult:
        if not self._state.is_loaded:
            return await self._reject(NotLoaded("No files loaded"))

        selection = await self._dialogs.pick_folders(multi=False)
        targets = [str(path) for path in selection or () if path]
        if not targets:
            return CommandResult.cancelled()
        if len(targets) > 1:
            return await self._reject(ValidationError("Only one directory can be selected"))

        resolved = await self.uc_resolve_destination(targets[0])
        if resolved.is_cancelled:
            return resolved
        if resolved.error is not None:
            return await self._reject(resolved.error)

        destination = resolved.value
        project = self._state.current()
        await asyncio.to_thread(self.uc_export, project, destination)
        self._log.info("Exported %d file(s) to %s", project.file_count, destination)
        self._view.refresh_view()
        return CommandResult.succeeded(destination)

    def _release_export_resources(self) -> None:
        if self._state.is_loaded:
            self.uc_export.release(self._state.current())

    async def _save_log(self) -> CommandResult:
        path = await self._dialogs.pick_save_file(self._settings.default_log_name, LOG_FILE_FILTER)
        if not path:
            return CommandResult.cancelled()
        written = self.uc_save_log(path)
        self._log.info("Saved log to %s", written)
        return CommandResult.succeeded(str(written))

    async def _change_language(self, code: str) -> CommandResult:
        self.uc_change_language(code)
        self._view.reload_view()
        return CommandResult.succeeded(code)

    async def _reload_view(self) -> CommandResult:
        self._view.reload_view()
        return CommandResult.succeeded()

    async def _toggle_fullscreen(self) -> CommandResult:
        if not self._window.has_native_window():
            return await self._reject(ValidationError("Only available in the desktop window"))
        self._window.toggle_fullscreen()
        return CommandResult.succeeded()

    async def _minimize(self) -> CommandResult:
        if not self._window.has_native_window():
            return await self._reject(ValidationError("Only available in the desktop window"))
        self._window.minimize()
        return CommandResult.succeeded()

    async def _quit(self) -> CommandResult:
        if self._state.is_loaded:
            self.uc_export.release(self._state.current())
        self._window.quit()
        return CommandResult.succeeded()

    async def _reject(self, error: UseCaseError) -> CommandResult:
        self._log.info("Rejected: %s", error.message)
        await self._dialogs.notify_error(error.message)
        return CommandResult.failed(error)


__all__ = ["LOG_FILE_FILTER", "WorkflowController"]
