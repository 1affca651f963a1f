# sitegen/core/errors.py
"""
Error taxonomy for the generation pipeline.

Every error carries a `kind` tag; callers branch on the tag rather than on
transport details such as HTTP status codes.

    ValidationError        client input, never retried, surfaced verbatim
    BackendFailure         anything the generation backend did wrong
      RateLimited            429 / quota exhausted
      AuthenticationFailed   missing or rejected credential
      AccessDenied           403 / account or billing state
      EmptyGeneration        backend answered without text
      BackendError           everything else (timeouts included)
    SanitizationError      output unusable after cleaning
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    RATE_LIMITED = "rate_limited"
    AUTHENTICATION_FAILED = "authentication_failed"
    ACCESS_DENIED = "access_denied"
    EMPTY_GENERATION = "empty_generation"
    BACKEND_ERROR = "backend_error"
    SANITIZATION = "sanitization"


class GenerationError(Exception):
    kind: ErrorKind = ErrorKind.BACKEND_ERROR


class ValidationError(GenerationError):
    kind = ErrorKind.VALIDATION


class BackendFailure(GenerationError):
    """Base class for errors raised by the backend adapter."""


class RateLimited(BackendFailure):
    kind = ErrorKind.RATE_LIMITED


class AuthenticationFailed(BackendFailure):
    kind = ErrorKind.AUTHENTICATION_FAILED


class AccessDenied(BackendFailure):
    kind = ErrorKind.ACCESS_DENIED


class EmptyGeneration(BackendFailure):
    kind = ErrorKind.EMPTY_GENERATION


class BackendError(BackendFailure):
    kind = ErrorKind.BACKEND_ERROR

    def __init__(self, detail: str, timeout: bool = False, status: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        self.timeout = timeout
        self.status = status


class SanitizationError(GenerationError):
    kind = ErrorKind.SANITIZATION


# kinds that point at operator configuration rather than load
OPERATOR_KINDS = frozenset({ErrorKind.AUTHENTICATION_FAILED, ErrorKind.ACCESS_DENIED})

_FALLBACK_SUFFIX = " Showing a template preview instead."

_NOTICES = {
    ErrorKind.RATE_LIMITED: "Generation backend is rate limited or out of quota.",
    ErrorKind.AUTHENTICATION_FAILED: "Generation backend credentials are missing or invalid.",
    ErrorKind.ACCESS_DENIED: "Generation backend denied access (check account status and billing).",
    ErrorKind.EMPTY_GENERATION: "Generation backend returned no code.",
    ErrorKind.BACKEND_ERROR: "Generation backend unavailable (connection or server issue).",
    ErrorKind.SANITIZATION: "Generated code was unusable after cleaning.",
}


def is_fallback_eligible(exc: BaseException) -> bool:
    return isinstance(exc, (BackendFailure, SanitizationError))


def fallback_notice(exc: GenerationError) -> str:
    if isinstance(exc, BackendError) and exc.timeout:
        return "Generation backend timed out." + _FALLBACK_SUFFIX
    return _NOTICES.get(exc.kind, _NOTICES[ErrorKind.BACKEND_ERROR]) + _FALLBACK_SUFFIX
