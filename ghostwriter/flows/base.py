"""
Flow Results

Common result type returned by every flow. Flows never raise to their caller;
the outcome is reported here and, for the user, as a toast.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

OutputT = TypeVar('OutputT')


class FlowStatus(Enum):
    """Outcome of one flow invocation."""
    COMPLETED = "completed"
    REJECTED = "rejected"   # local validation failed, nothing was sent
    FAILED = "failed"       # remote or transport failure
    SKIPPED = "skipped"     # suppressed at the source (control disabled)


@dataclass
class FlowResult(Generic[OutputT]):
    """Result from a flow invocation."""
    status: FlowStatus
    value: Optional[OutputT] = None
    error: Optional[Exception] = None

    @property
    def success(self) -> bool:
        return self.status == FlowStatus.COMPLETED

    @classmethod
    def completed(cls, value: OutputT = None) -> "FlowResult[OutputT]":
        return cls(FlowStatus.COMPLETED, value=value)

    @classmethod
    def rejected(cls, error: Exception) -> "FlowResult[OutputT]":
        return cls(FlowStatus.REJECTED, error=error)

    @classmethod
    def failed(cls, error: Exception, value: OutputT = None) -> "FlowResult[OutputT]":
        return cls(FlowStatus.FAILED, value=value, error=error)

    @classmethod
    def skipped(cls) -> "FlowResult[OutputT]":
        return cls(FlowStatus.SKIPPED)
