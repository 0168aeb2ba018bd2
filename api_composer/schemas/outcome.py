"""
Pydantic schemas for submission outcomes.

An outcome is the only value the UI consumes after a submission. It is a
tagged union discriminated by ``kind``.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ValidationErrorOutcome(BaseModel):
    """The request was rejected before anything was sent."""
    kind: Literal["validation-error"] = "validation-error"
    message: str

    model_config = ConfigDict(frozen=True)


class SuccessOutcome(BaseModel):
    """The server replied with a 2xx status."""
    kind: Literal["success"] = "success"
    display_text: str

    model_config = ConfigDict(frozen=True)


class TransportErrorOutcome(BaseModel):
    """The request failed on the network or with a non-2xx status."""
    kind: Literal["transport-error"] = "transport-error"
    display_text: str

    model_config = ConfigDict(frozen=True)


Outcome = Annotated[
    Union[ValidationErrorOutcome, SuccessOutcome, TransportErrorOutcome],
    Field(discriminator="kind"),
]
