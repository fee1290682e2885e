from __future__ import annotations
import json
import logging
import os
from typing import Dict, Mapping, Optional

from assetdesk.domain.configuration import LibraryConfiguration
from assetdesk.domain.ports import SettingsStoragePort

SETTINGS_FILENAME = "settings.json"

# environment variable -> configuration key
_ENV_OVERRIDES = {
    "ASSETDESK_TEMP_DIR": "temp_dir",
    "ASSETDESK_LANGUAGE": "default_language",
}


class StorageLocal(SettingsStoragePort):
    """Local filesystem storage for the startup settings (JSON)."""

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    @property
    def settings_path(self) -> str:
        return os.path.join(self.root, SETTINGS_FILENAME)

    def load_user_settings(self) -> Optional[Dict]:
        path = self.settings_path
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def save_user_settings(self, payload: Dict) -> None:
        os.makedirs(self.root, exist_ok=True)
        with open(self.settings_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)


def load_configuration(
    storage: SettingsStoragePort,
    environ: Optional[Mapping[str, str]] = None,
) -> LibraryConfiguration:
    """Merge defaults, persisted settings and env overrides into one config.

    Unreadable or invalid persisted settings are logged and ignored; env
    overrides still apply.
    """
    log = logging.getLogger(__name__)
    env = os.environ if environ is None else environ
    payload: Dict = {}
    try:
        stored = storage.load_user_settings()
    except (OSError, ValueError) as exc:
        log.warning("Could not read settings: %s", exc)
        stored = None
    if stored is not None:
        try:
            payload.update(LibraryConfiguration.from_dict(stored).to_dict())
        except ValueError as exc:
            log.warning("Ignoring invalid settings: %s", exc)

    for var, key in _ENV_OVERRIDES.items():
        value = (env.get(var) or "").strip()
        if value:
            payload[key] = value
    return LibraryConfiguration.from_dict(payload)
