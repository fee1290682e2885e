from __future__ import annotations

import asyncio
from pathlib import Path

from assetdesk.tests.unit.app.helpers import DialogsDouble
from assetdesk.usecases.resolve_export_directory import (
    NOT_EMPTY_MESSAGE,
    ResolveExportDirectory,
    clear_directory,
    directory_has_entries,
)


def _snapshot(root: Path) -> dict:
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def _populate(root: Path) -> None:
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "a.bin").write_bytes(b"\x00\x01\x02")
    (root / "sub" / "b.txt").write_text("hello", encoding="utf-8")
    (root / "sub" / "deeper" / "c.txt").write_text("world", encoding="utf-8")


def test_empty_directory_needs_no_confirmation(tmp_path: Path) -> None:
    dialogs = DialogsDouble()

    result = asyncio.run(ResolveExportDirectory(dialogs)(str(tmp_path)))

    assert result.is_succeeded
    assert result.value == str(tmp_path)
    assert dialogs.confirmations == []


def test_declined_leaves_contents_untouched(tmp_path: Path) -> None:
    _populate(tmp_path)
    before = _snapshot(tmp_path)
    dialogs = DialogsDouble(confirm_response=1)

    result = asyncio.run(ResolveExportDirectory(dialogs)(str(tmp_path)))

    assert result.is_cancelled
    assert dialogs.confirmations == [(NOT_EMPTY_MESSAGE, ["Yes", "No"])]
    assert _snapshot(tmp_path) == before


def test_dismissed_dialog_counts_as_no(tmp_path: Path) -> None:
    _populate(tmp_path)
    before = _snapshot(tmp_path)

    result = asyncio.run(ResolveExportDirectory(DialogsDouble(confirm_response=None))(str(tmp_path)))

    assert result.is_cancelled
    assert _snapshot(tmp_path) == before


def test_confirmed_clears_everything_but_keeps_directory(tmp_path: Path) -> None:
    _populate(tmp_path)

    result = asyncio.run(ResolveExportDirectory(DialogsDouble(confirm_response=0))(str(tmp_path)))

    assert result.is_succeeded
    assert tmp_path.is_dir()
    assert list(tmp_path.iterdir()) == []


def test_missing_directory_fails_validation(tmp_path: Path) -> None:
    file_path = tmp_path / "file.txt"
    file_path.write_text("x", encoding="utf-8")
    dialogs = DialogsDouble(confirm_response=0)

    for target in (tmp_path / "nope", file_path):
        result = asyncio.run(ResolveExportDirectory(dialogs)(str(target)))
        assert result.is_failed
        assert result.error.code == "VALIDATION"
        assert result.reason == "Directory does not exist"
    assert dialogs.confirmations == []


def test_directory_helpers(tmp_path: Path) -> None:
    assert directory_has_entries(str(tmp_path)) is False
    (tmp_path / ".hidden").write_text("x", encoding="utf-8")
    assert directory_has_entries(str(tmp_path)) is True

    clear_directory(str(tmp_path))

    assert directory_has_entries(str(tmp_path)) is False
