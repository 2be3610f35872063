"""
Failure taxonomy for seed and probe runs.

Two kinds of failure abort a run:
- TRANSPORT: the request never produced a usable envelope (connection error,
  timeout, body that is not a JSON object).
- API: the server answered with success=false (validation, conflict, auth).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class FailureKind(str, Enum):
    """Where a step failed."""
    TRANSPORT = "transport"
    API = "api"


@dataclass
class StepFailure:
    """Structured description of the step that stopped a run."""
    kind: FailureKind
    step: str
    message: str
    status_code: Optional[int] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "step": self.step,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
        }


class SeedAbortedError(Exception):
    """Raised when a seed run stops on its first failed step."""

    def __init__(self, failure: StepFailure):
        self.failure = failure
        super().__init__(f"{failure.step} failed: {failure.message}")
