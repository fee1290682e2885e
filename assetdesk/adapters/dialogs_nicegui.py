"""NiceGUI implementation of the dialog port.

Pickers use the native window's file dialog when the app runs with
``native=True``; in browser mode they fall back to a path entry dialog.
Message boxes are modal ``ui.dialog`` cards awaited until a button is pressed.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from nicegui import app, ui

from assetdesk.domain.ports import FileFilter, LocalizationPort


def _native_dialog_types() -> Tuple[int, int, int]:
    import webview

    kinds = getattr(webview, "FileDialog", None)
    if kinds is not None:
        return kinds.OPEN, kinds.FOLDER, kinds.SAVE
    return webview.OPEN_DIALOG, webview.FOLDER_DIALOG, webview.SAVE_DIALOG


def _normalize(result) -> Tuple[str, ...]:
    if not result:
        return ()
    if isinstance(result, str):
        return (result,)
    return tuple(str(item) for item in result if item)


class NiceGuiDialogs:
    """Dialogs rendered in the client that triggered the current command."""

    def __init__(self, localization: LocalizationPort) -> None:
        self._log = logging.getLogger(__name__)
        self._localization = localization

    # ---- pickers ----
    async def pick_files(self, multi: bool) -> Sequence[str]:
        open_kind, _, _ = self._kinds()
        if open_kind is None:
            return await self._prompt_paths("Load File(s)", multi)
        return await self._file_dialog(open_kind, allow_multiple=multi)

    async def pick_folders(self, multi: bool) -> Sequence[str]:
        _, folder_kind, _ = self._kinds()
        if folder_kind is None:
            return await self._prompt_paths("Select Folder", multi)
        return await self._file_dialog(folder_kind, allow_multiple=multi)

    async def pick_save_file(self, default_name: str, file_filter: FileFilter) -> Optional[str]:
        _, _, save_kind = self._kinds()
        if save_kind is None:
            paths = await self._prompt_paths("Save Log", False, initial=default_name)
            return paths[0] if paths else None
        label, extensions = file_filter
        patterns = ";".join(f"*.{ext}" for ext in extensions)
        paths = await self._file_dialog(
            save_kind,
            save_filename=default_name,
            file_types=(f"{label} ({patterns})",),
        )
        return paths[0] if paths else None

    # ---- message boxes ----
    async def confirm(self, message: str, buttons: Sequence[str]) -> Optional[int]:
        with ui.dialog().props("persistent") as dialog, ui.card():
            ui.label(self._localization.text("dialog_warning", "Warning")).classes("text-h6")
            ui.label(message)
            with ui.row().classes("w-full justify-end"):
                for index, label in enumerate(buttons):
                    ui.button(label, on_click=lambda _, i=index: dialog.submit(i)).props(
                        "flat" if index else ""
                    )
        result = await dialog
        dialog.delete()
        return result

    async def notify_error(self, message: str) -> None:
        with ui.dialog() as dialog, ui.card():
            ui.label(self._localization.text("dialog_error", "Error")).classes("text-h6 text-negative")
            ui.label(message).classes("whitespace-pre-wrap")
            with ui.row().classes("w-full justify-end"):
                ui.button(self._localization.text("button_ok", "OK"), on_click=lambda: dialog.submit(None))
        await dialog
        dialog.delete()

    # ---- helpers ----
    @staticmethod
    def _kinds() -> Tuple[Optional[int], Optional[int], Optional[int]]:
        if app.native.main_window is None:
            return None, None, None
        return _native_dialog_types()

    async def _file_dialog(self, kind: int, **options) -> Tuple[str, ...]:
        window = app.native.main_window
        result = await window.create_file_dialog(kind, **options)
        self._log.debug("File dialog returned %s", result)
        return _normalize(result)

    async def _prompt_paths(self, title: str, multi: bool, *, initial: str = "") -> Tuple[str, ...]:
        with ui.dialog() as dialog, ui.card().classes("w-[40rem]"):
            ui.label(title).classes("text-h6")
            if multi:
                field = ui.textarea("Paths (one per line)", value=initial).classes("w-full")
            else:
                field = ui.input("Path", value=initial).classes("w-full")
            with ui.row().classes("w-full justify-end"):
                ui.button("OK", on_click=lambda: dialog.submit(field.value))
                ui.button("Cancel", on_click=lambda: dialog.submit(None)).props("flat")
        raw = await dialog
        dialog.delete()
        lines = [line.strip() for line in str(raw or "").splitlines()]
        return tuple(line for line in lines if line)


__all__ = ["NiceGuiDialogs"]
