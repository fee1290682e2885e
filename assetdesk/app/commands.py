"""Static command table and the menu model derived from it.

The table maps command identifiers to menu placement and labels only; the
controller owns the handlers and the NiceGUI page owns rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..domain.ports import LocalizationPort


class CommandId(str, Enum):
    LOAD_FILES = "load_files"
    LOAD_FOLDERS = "load_folders"
    RESET = "reset"
    SAVE_LOG = "save_log"
    RELOAD_VIEW = "reload_view"
    EXPORT_ALL = "export_all"
    CHANGE_LANGUAGE = "change_language"
    QUIT = "quit"
    TOGGLE_FULLSCREEN = "toggle_fullscreen"
    MINIMIZE = "minimize"
    CLOSE_WINDOW = "close_window"


@dataclass(frozen=True)
class CommandSpec:
    """Menu placement of one command.

    Attributes:
        command_id: Key into the controller's handler table.
        menu: Menu section id the command belongs to.
        label_key: Localization key for the menu label.
        label: English fallback label.
        separator_before: Render a divider above the item.
        takes_argument: The handler expects one string argument.
    """

    command_id: CommandId
    menu: str
    label_key: str
    label: str
    separator_before: bool = False
    takes_argument: bool = False


@dataclass(frozen=True)
class MenuItem:
    command_id: CommandId
    label: str
    argument: Optional[str] = None
    separator_before: bool = False


@dataclass
class MenuSection:
    menu: str
    title: str
    items: List[MenuItem] = field(default_factory=list)


MENU_ORDER: Tuple[Tuple[str, str, str], ...] = (
    ("file", "menu_file", "File"),
    ("view", "menu_view", "View"),
    ("export", "menu_export", "Export"),
    ("language", "menu_language", "Language"),
    ("window", "menu_window", "Window"),
)

COMMANDS: Dict[CommandId, CommandSpec] = {
    CommandId.LOAD_FILES: CommandSpec(CommandId.LOAD_FILES, "file", "menu_load_files", "Load File(s)"),
    CommandId.LOAD_FOLDERS: CommandSpec(CommandId.LOAD_FOLDERS, "file", "menu_load_folders", "Load Folder(s)"),
    CommandId.RESET: CommandSpec(CommandId.RESET, "file", "menu_reset", "Reset"),
    CommandId.SAVE_LOG: CommandSpec(
        CommandId.SAVE_LOG, "file", "menu_save_log", "Save Log", separator_before=True
    ),
    CommandId.QUIT: CommandSpec(CommandId.QUIT, "file", "menu_quit", "Quit", separator_before=True),
    CommandId.RELOAD_VIEW: CommandSpec(CommandId.RELOAD_VIEW, "view", "menu_reload", "Reload"),
    CommandId.TOGGLE_FULLSCREEN: CommandSpec(
        CommandId.TOGGLE_FULLSCREEN, "view", "menu_toggle_fullscreen", "Toggle Fullscreen", separator_before=True
    ),
    CommandId.EXPORT_ALL: CommandSpec(CommandId.EXPORT_ALL, "export", "menu_export_all", "Export All"),
    # Expanded into one item per available locale by build_menu().
    CommandId.CHANGE_LANGUAGE: CommandSpec(
        CommandId.CHANGE_LANGUAGE, "language", "menu_change_language", "Change Language", takes_argument=True
    ),
    CommandId.MINIMIZE: CommandSpec(CommandId.MINIMIZE, "window", "menu_minimize", "Minimize"),
    CommandId.CLOSE_WINDOW: CommandSpec(CommandId.CLOSE_WINDOW, "window", "menu_close", "Close"),
}


def build_menu(localization: LocalizationPort) -> List[MenuSection]:
    """Return the menu sections in display order with localized labels."""
    sections: List[MenuSection] = []
    for menu, title_key, title in MENU_ORDER:
        section = MenuSection(menu=menu, title=localization.text(title_key, title))
        if menu == "language":
            for code, name in localization.language_names().items():
                section.items.append(
                    MenuItem(command_id=CommandId.CHANGE_LANGUAGE, label=name, argument=code)
                )
        else:
            for entry in COMMANDS.values():
                if entry.menu != menu:
                    continue
                section.items.append(
                    MenuItem(
                        command_id=entry.command_id,
                        label=localization.text(entry.label_key, entry.label),
                        separator_before=entry.separator_before,
                    )
                )
        sections.append(section)
    return sections


__all__ = [
    "COMMANDS",
    "CommandId",
    "CommandSpec",
    "MENU_ORDER",
    "MenuItem",
    "MenuSection",
    "build_menu",
]
