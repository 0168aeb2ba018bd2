"""
Outcome normalizer service.

Maps the result of one submission to a single Outcome whose text can be
rendered as-is.
"""

import json
from typing import Any

from ..exceptions import ValidationError
from ..schemas.outcome import SuccessOutcome, TransportErrorOutcome, ValidationErrorOutcome


INDENT = 2

# Integral floats below this print without exponent in JavaScript
MAX_PLAIN_INTEGRAL = 1e21


def _plain_numbers(value: Any) -> Any:
    # 1.0 renders as 1, the way JSON.stringify prints numbers
    if isinstance(value, float) and value.is_integer() and abs(value) < MAX_PLAIN_INTEGRAL:
        return int(value)
    if isinstance(value, dict):
        return {key: _plain_numbers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_plain_numbers(item) for item in value]
    return value


def format_payload(payload: Any) -> str:
    """
    Serialize a JSON-compatible payload for display.

    Uses two-space indentation and keeps the payload's own key order, so the
    same payload always yields the same text. Integral floats are printed
    without a fractional part.
    """
    return json.dumps(_plain_numbers(payload), indent=INDENT, ensure_ascii=False)


def success_outcome(payload: Any) -> SuccessOutcome:
    return SuccessOutcome(display_text=format_payload(payload))


def transport_error_outcome(
    message: str,
    payload: Any = None,
    has_payload: bool = False
) -> TransportErrorOutcome:
    """
    Build the outcome for a failed request.

    The text is the failure message, followed by a newline and the formatted
    response payload when the server sent one.

    Args:
        message: Short description of the failure
        payload: Decoded response body, if any
        has_payload: Whether a response body was received at all

    Returns:
        TransportErrorOutcome with the finished display text
    """
    display_text = message
    if has_payload:
        display_text += "\n" + format_payload(payload)
    return TransportErrorOutcome(display_text=display_text)


def validation_outcome(error: ValidationError) -> ValidationErrorOutcome:
    return ValidationErrorOutcome(message=error.detail)
