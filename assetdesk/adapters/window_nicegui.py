"""NiceGUI implementation of the window port.

Window controls forward to ``app.native.main_window`` (the pywebview window
proxy NiceGUI creates with ``native=True``). Quitting shuts the NiceGUI
server down, which also closes the native window.
"""

from __future__ import annotations

import logging

from nicegui import app


class NiceGuiWindow:
    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)

    def has_native_window(self) -> bool:
        return app.native.main_window is not None

    def toggle_fullscreen(self) -> None:
        window = app.native.main_window
        if window is not None:
            window.toggle_fullscreen()

    def minimize(self) -> None:
        window = app.native.main_window
        if window is not None:
            window.minimize()

    def quit(self) -> None:
        self._log.info("Shutting down")
        app.shutdown()


__all__ = ["NiceGuiWindow"]
