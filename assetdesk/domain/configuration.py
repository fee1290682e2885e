"""Immutable export settings shared by the controller and its engine binding."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class LibraryConfiguration:
    """Typed engine settings, created once per process."""

    skip_hidden_files: bool = True
    preserve_structure: bool = True
    temp_dir: str = ""
    default_log_name: str = "AssetDesk.log"
    default_language: str = "en"

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "LibraryConfiguration":
        """Build a configuration from persisted flat keys.

        Raises:
            ValueError: On unknown keys or values of the wrong type.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed = {f.name for f in fields(cls)}
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        values: Dict[str, Any] = {}
        for key, raw in payload.items():
            if key in {"skip_hidden_files", "preserve_structure"}:
                values[key] = _coerce_bool(raw)
            elif key == "temp_dir":
                values[key] = _coerce_str(key, raw, allow_empty=True)
            else:
                values[key] = _coerce_str(key, raw)
        return cls(**values)

    def to_dict(self) -> dict:
        return asdict(self)


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    raise ValueError(f"Expected a boolean, got {type(value).__name__}.")


def _coerce_str(name: str, value: Any, *, allow_empty: bool = False) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string.")
    text = value.strip()
    if not text and not allow_empty:
        raise ValueError(f"{name} must not be empty.")
    return text


__all__ = ["LibraryConfiguration"]
