"""
Pydantic schemas for composing outbound requests.

Defines the raw form input, the validated request descriptor, and the
form configuration exposed to the UI.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


# HTTP methods offered by the composer
HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]

HTTP_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "PATCH")

# Methods without body semantics; any typed body is ignored for these
RETRIEVAL_METHODS: frozenset[str] = frozenset({"GET"})


class RequestInput(BaseModel):
    """Raw field values as submitted by the UI. Nothing here is trusted."""
    method: HttpMethod
    path_suffix: str = ""
    raw_body: str = ""
    auth_enabled: bool = False
    auth_token: str = ""

    model_config = ConfigDict(frozen=True)


class RequestDescriptor(BaseModel):
    """
    A validated, ready-to-send request.

    ``body`` is only set for methods with body semantics. An unset body
    (see ``has_body``) is different from a JSON ``null`` body.
    """
    method: HttpMethod
    url: str
    headers: dict[str, str]
    body: Any = None
    include_credentials: bool = True

    model_config = ConfigDict(frozen=True)

    @property
    def has_body(self) -> bool:
        return "body" in self.model_fields_set


class FormDefaults(BaseModel):
    """Initial values for the request form."""
    method: HttpMethod
    path_suffix: str
    raw_body: str


class ComposerConfig(BaseModel):
    """Read-only composer configuration for rendering the form."""
    base_url: str
    methods: list[str]
    retrieval_methods: list[str]
    auth_supported: bool
    defaults: FormDefaults
