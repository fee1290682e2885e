from __future__ import annotations

import dataclasses

import pytest

from assetdesk.domain.configuration import LibraryConfiguration
from assetdesk.domain.errors import NotLoaded, ValidationError
from assetdesk.domain.project import Project, ProjectEntry, ProjectState
from assetdesk.domain.results import CommandResult


def _project(name: str = "/a.bundle") -> Project:
    return Project(
        source_paths=(name,),
        entries=(ProjectEntry(source=name, relative_path="a.bundle", size=10),),
    )


def test_state_starts_empty() -> None:
    state = ProjectState()

    assert state.is_loaded is False
    with pytest.raises(NotLoaded) as excinfo:
        state.current()
    assert excinfo.value.message == "No files loaded"


def test_replace_and_clear() -> None:
    state = ProjectState()
    first, second = _project("/a"), _project("/b")

    state.replace(first)
    state.replace(second)
    assert state.current() is second

    state.clear()
    state.clear()
    assert state.is_loaded is False


def test_replace_rejects_none() -> None:
    with pytest.raises(ValueError):
        ProjectState().replace(None)  # type: ignore[arg-type]


def test_project_totals() -> None:
    project = _project()

    assert project.file_count == 1
    assert project.total_bytes == 10


def test_command_result_states() -> None:
    cancelled = CommandResult.cancelled()
    failed = CommandResult.failed(ValidationError("bad"))
    succeeded = CommandResult.succeeded("/out")

    assert (cancelled.is_cancelled, cancelled.is_failed, cancelled.is_succeeded) == (True, False, False)
    assert failed.is_failed and failed.reason == "bad"
    assert succeeded.is_succeeded and succeeded.value == "/out"
    assert cancelled.reason == ""


def test_configuration_is_frozen_and_validated() -> None:
    config = LibraryConfiguration.from_dict({"skip_hidden_files": "no", "temp_dir": " "})

    assert config.skip_hidden_files is False
    assert config.temp_dir == ""
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.temp_dir = "/tmp"  # type: ignore[misc]
    with pytest.raises(ValueError, match="Unsupported settings keys"):
        LibraryConfiguration.from_dict({"results_dir": "."})
    with pytest.raises(ValueError):
        LibraryConfiguration.from_dict({"default_language": ""})
    with pytest.raises(ValueError):
        LibraryConfiguration.from_dict({"preserve_structure": None})
    with pytest.raises(ValueError):
        LibraryConfiguration.from_dict(["skip_hidden_files"])  # type: ignore[arg-type]
