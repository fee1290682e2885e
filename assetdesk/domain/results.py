"""Tri-state command outcome."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional

from .ports import UseCaseError

CommandStatus = Literal["cancelled", "failed", "succeeded"]


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command: cancelled, failed with a reason, or succeeded.

    Cancellation has its own status so it never travels through the error
    channel and is never logged as a failure.
    """

    status: CommandStatus
    value: Any = None
    error: Optional[UseCaseError] = None

    @classmethod
    def cancelled(cls) -> "CommandResult":
        return cls(status="cancelled")

    @classmethod
    def failed(cls, error: UseCaseError) -> "CommandResult":
        return cls(status="failed", error=error)

    @classmethod
    def succeeded(cls, value: Any = None) -> "CommandResult":
        return cls(status="succeeded", value=value)

    @property
    def is_cancelled(self) -> bool:
        return self.status == "cancelled"

    @property
    def is_failed(self) -> bool:
        return self.status == "failed"

    @property
    def is_succeeded(self) -> bool:
        return self.status == "succeeded"

    @property
    def reason(self) -> str:
        return self.error.message if self.error is not None else ""


__all__ = ["CommandResult", "CommandStatus"]
