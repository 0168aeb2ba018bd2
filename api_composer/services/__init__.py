# Services package

from .request_builder import build_request, parse_body, authorization_value
from .outcome_normalizer import format_payload, success_outcome, transport_error_outcome, validation_outcome
from .http_transport import send_request, decode_payload, TransportResponse
from .display import DisplayRegion
from .composer import preview, submit, submit_to_region

__all__ = [
    "build_request",
    "parse_body",
    "authorization_value",
    "format_payload",
    "success_outcome",
    "transport_error_outcome",
    "validation_outcome",
    "send_request",
    "decode_payload",
    "TransportResponse",
    "DisplayRegion",
    "preview",
    "submit",
    "submit_to_region",
]
