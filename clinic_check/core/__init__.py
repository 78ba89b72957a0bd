"""Core components shared across the clinic-check harness."""

from clinic_check.core.error_classification import FailureKind, classify_failure
from clinic_check.core.errors import (
    ClinicCheckError,
    HttpError,
    MissingTokenError,
    ResponseAssertionError,
    TransportError,
)
from clinic_check.core.models import CaseResult, CaseStatus, Credential, Role
from clinic_check.core.types import RunSummary, SummaryBanner

__all__ = [
    # Errors
    "ClinicCheckError",
    "TransportError",
    "HttpError",
    "ResponseAssertionError",
    "MissingTokenError",
    "FailureKind",
    "classify_failure",
    # Models
    "Role",
    "Credential",
    "CaseStatus",
    "CaseResult",
    "RunSummary",
    "SummaryBanner",
]
