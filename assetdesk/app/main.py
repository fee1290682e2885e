"""Desktop entrypoint: configure logging, build the controller, start NiceGUI."""

from __future__ import annotations

import argparse
import logging
import os

from nicegui import ui

from ..adapters.dialogs_nicegui import NiceGuiDialogs
from ..adapters.engine_local import LocalExportEngine
from ..adapters.localization_json import JsonLocalization
from ..adapters.storage_local import StorageLocal, load_configuration
from ..adapters.window_nicegui import NiceGuiWindow
from ..utils import logging as logging_utils
from .controller import WorkflowController
from .page import PageView, build_ui

APP_NAME = "AssetDesk"


def build_controller(log_buffer: logging_utils.LogBuffer) -> tuple[WorkflowController, PageView, JsonLocalization]:
    """Compose the controller with NiceGUI dialogs and the local engine."""
    storage = StorageLocal(root_dir=os.environ.get("ASSETDESK_STORAGE_ROOT") or ".")
    settings = load_configuration(storage)
    localization = JsonLocalization(language=settings.default_language)
    view = PageView()
    controller = WorkflowController(
        settings=settings,
        dialogs=NiceGuiDialogs(localization),
        view=view,
        window=NiceGuiWindow(),
        localization=localization,
        log_source=log_buffer,
        engine=LocalExportEngine(settings),
    )
    return controller, view, localization


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for desktop startup."""
    parser = argparse.ArgumentParser(description=f"Run the {APP_NAME} desktop app.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--browser", action="store_true", help="serve in a browser tab instead of a native window")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the desktop runtime."""
    args = _parse_args()
    log_buffer = logging_utils.LogBuffer()
    level = logging_utils.configure_root(buffer=log_buffer)
    logging_utils.log_system_information(APP_NAME)
    logging.getLogger(__name__).debug("Effective log level: %s", logging_utils.level_name(level))

    controller, view, localization = build_controller(log_buffer)
    if args.smoke_test:
        print("desk-smoke-ok", sorted(localization.language_names()), controller.is_loaded)
        return

    build_ui(controller, view, localization)
    ui.run(
        host=args.host,
        port=args.port,
        title=APP_NAME,
        native=not args.browser,
        window_size=None if args.browser else (1280, 800),
        reload=False,
        show=args.browser,
    )


if __name__ == "__main__":
    main()
