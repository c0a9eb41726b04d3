"""Result values returned by the individual save-path resolution stages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FailureReason(str, Enum):
    """Expected reasons a resolution stage can come back empty-handed."""

    KEY_NOT_FOUND = "key_not_found"
    UNSUPPORTED_PLATFORM = "unsupported_platform"
    EMPTY_INPUT = "empty_input"


@dataclass(frozen=True, slots=True)
class Outcome:
    """Either a value or the reason no value could be produced."""

    value: str | None = None
    reason: FailureReason | None = None
    message: str = ""

    @classmethod
    def success(cls, value: str) -> Outcome:
        return cls(value=value)

    @classmethod
    def failure(cls, reason: FailureReason, message: str = "") -> Outcome:
        return cls(reason=reason, message=message or reason.value)

    @property
    def ok(self) -> bool:
        return self.reason is None

    def unwrap(self) -> str:
        """Return the value, raising ``ValueError`` for a failed outcome."""
        if self.reason is not None or self.value is None:
            raise ValueError(self.message or "Outcome carries no value.")
        return self.value
