"""Core data models shared across the clinic-check harness.

This module contains data structures that are used by multiple components
of the harness (runner, orchestrator, reporter, CLI).
"""

from dataclasses import dataclass
from enum import Enum

from clinic_check.core.error_classification import FailureKind


class Role(str, Enum):
    """Actor categories of the clinic application, in check order."""

    ADMIN = "admin"
    PRACTITIONER = "practitioner"
    PATIENT = "patient"


class CaseStatus(str, Enum):
    """Outcome of a single executed case."""

    PASSED = "PASSED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class Credential:
    """Email/password pair used by the credential login of one role."""

    role: Role
    email: str
    password: str

    def as_payload(self) -> dict[str, str]:
        return {"email": self.email, "password": self.password}


@dataclass(frozen=True)
class CaseResult:
    """Result of one executed case. Never mutated after creation."""

    description: str
    status: CaseStatus
    error: str | None = None
    kind: FailureKind | None = None
    phase: str | None = None
    duration: float | None = None

    @property
    def passed(self) -> bool:
        return self.status == CaseStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status == CaseStatus.FAILED
