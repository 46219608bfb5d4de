"""Graph API Model Classes

Pydantic models for requests, paging metadata and server error structures.
"""

from enum import Enum
from typing import Dict, Any, Optional, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class HttpComponent(str, Enum):
    """Which part of the HTTP response a request surfaces."""
    BODY = "body"
    HEADERS = "headers"


class GraphRequest(BaseModel):
    """A single normalized request to the graph server."""
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    path: str = Field("", description="Object id or id/connection path, empty for multi-id lookups")
    verb: Literal["GET", "POST", "DELETE"] = Field("GET", description="HTTP verb")
    params: Dict[str, Any] = Field(default_factory=dict, description="Encoded request parameters")
    http_component: HttpComponent = Field(HttpComponent.BODY, description="Response component to surface")

    @field_validator("path", mode="before")
    @classmethod
    def _strip_path(cls, value: Any) -> str:
        return str(value or "").strip("/")

    @field_validator("verb", mode="before")
    @classmethod
    def _upper_verb(cls, value: Any) -> str:
        return str(value).upper()


class GraphErrorDetails(BaseModel):
    """Error structure found under the "error" key of a response body."""
    model_config = ConfigDict(extra="allow")

    type: str = Field("Unknown", description="Error category")
    message: str = Field("", description="Human readable error message")
    code: Optional[Union[int, str]] = Field(None, description="Provider specific error code")
    error_subcode: Optional[Union[int, str]] = Field(None, description="Provider specific error subcode")

    # non-string values are kept as their text form
    @field_validator("type", "message", mode="before")
    @classmethod
    def _text(cls, value: Any, info: ValidationInfo) -> str:
        if value is None:
            return "Unknown" if info.field_name == "type" else ""
        return value if isinstance(value, str) else str(value)

    @field_validator("code", "error_subcode", mode="before")
    @classmethod
    def _code(cls, value: Any) -> Optional[Union[int, str]]:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return str(value)


class Paging(BaseModel):
    """Paging block of a connection or search result."""
    model_config = ConfigDict(extra="allow", frozen=True)

    next: Optional[str] = Field(None, description="Cursor URL of the next page")
    previous: Optional[str] = Field(None, description="Cursor URL of the previous page")

    def cursor_url(self, direction: str) -> Optional[str]:
        """Return the cursor URL for "next" or "previous"."""
        if direction == "next":
            return self.next
        if direction == "previous":
            return self.previous
        raise ValueError(f"Unknown paging direction: {direction}")

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
