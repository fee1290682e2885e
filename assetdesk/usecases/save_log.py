from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..domain.ports import LogSourcePort, UseCaseError


@dataclass
class SaveLog:
    log_source: LogSourcePort

    def __call__(self, path: str) -> Path:
        """Write the accumulated log to ``path``, replacing any existing file."""
        target = Path(path).expanduser()
        if target.is_dir():
            raise UseCaseError("SAVE_LOG_FAILED", f"Log path is a directory: {target}")
        try:
            target.write_text(self.log_source.text(), encoding="utf-8")
        except OSError as e:
            raise UseCaseError("SAVE_LOG_FAILED", str(e))
        return target
