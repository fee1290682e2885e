"""Decide whether an export destination is safe to write into.

The resolver is the only place that deletes user data: the contents of a
non-empty destination are removed only after an explicit "Yes".
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..domain.errors import ValidationError
from ..domain.ports import DialogPort
from ..domain.results import CommandResult

NOT_EMPTY_MESSAGE = "Directory is not empty. Continue?"
CONFIRM_BUTTONS: Tuple[str, str] = ("Yes", "No")
_YES = 0

_log = logging.getLogger(__name__)


def directory_has_entries(path: str) -> bool:
    """Return True when ``path`` contains at least one file system entry."""
    with os.scandir(path) as it:
        return any(True for _ in it)


def clear_directory(path: str) -> None:
    """Recursively remove everything inside ``path``, keeping ``path`` itself."""
    with os.scandir(path) as it:
        entries = list(it)
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            shutil.rmtree(entry.path)
        else:
            os.remove(entry.path)


@dataclass
class ResolveExportDirectory:
    dialogs: DialogPort
    buttons: Sequence[str] = CONFIRM_BUTTONS

    async def __call__(self, destination: str) -> CommandResult:
        """Validate ``destination`` and resolve a non-empty conflict.

        Returns:
            ``succeeded(path)`` when export may proceed, ``cancelled`` when
            the user declined the overwrite, ``failed(ValidationError)``
            when the path is not an existing directory.
        """
        if not os.path.isdir(destination):
            return CommandResult.failed(ValidationError("Directory does not exist"))

        if not directory_has_entries(destination):
            return CommandResult.succeeded(destination)

        response = await self.dialogs.confirm(NOT_EMPTY_MESSAGE, list(self.buttons))
        if response != _YES:
            _log.info("Export into %s declined by user", destination)
            return CommandResult.cancelled()

        _log.warning("Clearing existing contents of %s before export", destination)
        clear_directory(destination)
        return CommandResult.succeeded(destination)


__all__ = [
    "CONFIRM_BUTTONS",
    "NOT_EMPTY_MESSAGE",
    "ResolveExportDirectory",
    "clear_directory",
    "directory_has_entries",
]
