from __future__ import annotations
import json
import logging
import os
from typing import Dict, Optional

DEFAULT_LOCALE_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "locales")
FALLBACK_LANGUAGE = "en"


class JsonLocalization:
    """Locale store backed by ``<code>.json`` files.

    File layout: ``{"language_name": "English", "strings": {"key": "text"}}``.
    """

    def __init__(self, locale_dir: str = DEFAULT_LOCALE_DIR, language: str = FALLBACK_LANGUAGE) -> None:
        self._log = logging.getLogger(__name__)
        self.locale_dir = locale_dir
        self.current_language = FALLBACK_LANGUAGE
        self._strings: Dict[str, str] = {}
        self._fallback: Dict[str, str] = {}
        if os.path.exists(self._path(FALLBACK_LANGUAGE)):
            self._fallback = self._read(FALLBACK_LANGUAGE).get("strings") or {}
        self._strings = dict(self._fallback)
        if language and language != FALLBACK_LANGUAGE:
            try:
                self.load_language(language)
            except KeyError:
                self._log.warning("Unknown locale %s, staying on %s", language, FALLBACK_LANGUAGE)

    def _path(self, code: str) -> str:
        return os.path.join(self.locale_dir, f"{code}.json")

    def _read(self, code: str) -> Dict:
        with open(self._path(code), "r", encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise ValueError(f"Locale file {code}.json must contain an object.")
        return payload

    def language_names(self) -> Dict[str, str]:
        names: Dict[str, str] = {}
        if not os.path.isdir(self.locale_dir):
            return names
        for filename in sorted(os.listdir(self.locale_dir)):
            code, ext = os.path.splitext(filename)
            if ext != ".json":
                continue
            try:
                names[code] = str(self._read(code).get("language_name") or code)
            except (OSError, ValueError) as exc:
                self._log.warning("Skipping locale %s: %s", filename, exc)
        return names

    def load_language(self, code: str) -> None:
        if not os.path.exists(self._path(code)):
            raise KeyError(code)
        strings = self._read(code).get("strings") or {}
        self._strings = {**self._fallback, **{str(k): str(v) for k, v in strings.items()}}
        self.current_language = code

    def text(self, key: str, default: str = "") -> str:
        value: Optional[str] = self._strings.get(key)
        return value if value else (default or key)
