"""NiceGUI page that renders the command menu and the loaded project."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from nicegui import ui

from ..domain.ports import LocalizationPort
from .commands import MenuItem
from .controller import WorkflowController


def _install_theme() -> None:
    """Install global CSS tokens for the page."""
    ui.add_head_html(
        """
<style>
:root {
  --desk-border: #c9d7e9;
  --desk-muted: #45556c;
}
.desk-card {
  border: 1px solid var(--desk-border);
  border-radius: 10px;
}
.desk-mono { font-family: ui-monospace, monospace; }
.desk-muted { color: var(--desk-muted); }
</style>
        """
    )


def _format_size(size: int) -> str:
    value = float(size)
    for unit in ("B", "KB", "MB", "GB"):
        if value < 1024 or unit == "GB":
            return f"{value:.0f} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{size} B"


class PageView:
    """ViewPort backed by the refreshable project panel of the open page."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self._refresh: Optional[Callable[[], None]] = None

    def bind(self, refresh: Callable[[], None]) -> None:
        self._refresh = refresh

    def refresh_view(self) -> None:
        if self._refresh is None:
            self._log.debug("No page bound yet; skipping refresh")
            return
        self._refresh()

    def reload_view(self) -> None:
        ui.navigate.reload()


def build_ui(controller: WorkflowController, view: PageView, localization: LocalizationPort) -> None:
    """Register the NiceGUI pages for the controller."""
    _install_theme()

    @ui.page("/")
    async def index() -> None:
        t = localization.text

        async def run_command(item: MenuItem) -> None:
            await controller.dispatch(item.command_id, item.argument)

        with ui.header().classes("items-center q-py-xs q-gutter-x-xs"):
            ui.label(t("app_title", "AssetDesk")).classes("text-subtitle1 q-mr-md")
            for section in controller.menu():
                with ui.button(section.title).props("flat color=white no-caps") as button:
                    with ui.menu():
                        for item in section.items:
                            if item.separator_before:
                                ui.separator()
                            ui.menu_item(item.label, on_click=lambda _, i=item: run_command(i))
                button.bind_enabled_from(controller, "busy", backward=lambda busy: not busy)

        @ui.refreshable
        def render_project() -> None:
            with ui.column().classes("w-full q-pa-md"):
                if not controller.is_loaded:
                    ui.label(t("status_not_loaded", "No files loaded.")).classes("desk-muted")
                    return
                project = controller.current_project()
                with ui.card().classes("desk-card w-full"):
                    ui.label(t("status_loaded", "Loaded project")).classes("text-h6")
                    with ui.grid(columns=2).classes("q-gutter-xs"):
                        ui.label(t("label_files", "Files"))
                        ui.label(str(project.file_count)).classes("desk-mono")
                        ui.label(t("label_size", "Total size"))
                        ui.label(_format_size(project.total_bytes)).classes("desk-mono")
                    ui.label(t("label_sources", "Input paths")).classes("text-subtitle2 q-mt-sm")
                    for path in project.source_paths:
                        ui.label(path).classes("desk-mono text-caption")
                    extensions = project.metadata.get("extensions") or {}
                    if extensions:
                        ui.label(t("label_extensions", "File types")).classes("text-subtitle2 q-mt-sm")
                        ui.table(
                            columns=[
                                {"name": "ext", "label": "Extension", "field": "ext", "align": "left"},
                                {"name": "count", "label": "Count", "field": "count"},
                            ],
                            rows=[{"ext": ext, "count": count} for ext, count in extensions.items()],
                        ).props("dense flat")

        render_project()
        view.bind(render_project.refresh)


__all__ = ["PageView", "build_ui"]
