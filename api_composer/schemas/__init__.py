"""
Pydantic schemas package.

Exports all schemas for request composition and outcomes.
"""

from .compose import (
    HttpMethod,
    HTTP_METHODS,
    RETRIEVAL_METHODS,
    RequestInput,
    RequestDescriptor,
    FormDefaults,
    ComposerConfig,
)

from .outcome import (
    ValidationErrorOutcome,
    SuccessOutcome,
    TransportErrorOutcome,
    Outcome,
)

__all__ = [
    # Compose schemas
    "HttpMethod",
    "HTTP_METHODS",
    "RETRIEVAL_METHODS",
    "RequestInput",
    "RequestDescriptor",
    "FormDefaults",
    "ComposerConfig",
    # Outcome schemas
    "ValidationErrorOutcome",
    "SuccessOutcome",
    "TransportErrorOutcome",
    "Outcome",
]
