from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.ports import LocalizationPort


@dataclass
class ChangeLanguage:
    localization: LocalizationPort

    def __call__(self, code: str) -> str:
        """Activate locale ``code``; load failures propagate unchanged."""
        logging.getLogger(__name__).info("Loading locale %s.json", code)
        self.localization.load_language(code)
        return code
