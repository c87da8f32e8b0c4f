"""Wire payload shapes for LogDNA views."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChannelRequest(BaseModel):
    """Alert channel attached to a view (email, PagerDuty or webhook).

    Unset fields are omitted from the wire payload.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    emails: list[str] | None = None
    immediate: str | None = None
    integration: str | None = None
    key: str | None = None
    body_template: dict[str, Any] | None = Field(default=None, alias="bodyTemplate")
    method: str | None = None
    operator: str | None = None
    terminal: str | None = None
    trigger_interval: str | None = Field(default=None, alias="triggerinterval")
    trigger_limit: int | None = Field(default=None, alias="triggerlimit")
    url: str | None = None
    headers: dict[str, str] | None = None


class ViewRequest(BaseModel):
    """Create/update body for a view."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str | None = None
    query: str | None = None
    apps: list[str] | None = None
    levels: list[str] | None = None
    hosts: list[str] | None = None
    category: list[str] | None = None
    tags: list[str] | None = None
    channels: list[ChannelRequest] | None = None


class ViewResponse(BaseModel):
    """Decoded view response.

    ``viewID`` is always present on the wire; the error fields only when
    the API reports a problem.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    view_id: str = Field(default="", alias="viewID")
    error: str | None = None
    code: str | None = None
    status: str | None = None


def decode_view_response(raw: bytes) -> ViewResponse:
    """Validate raw response bytes as a ViewResponse.

    Raises:
        pydantic.ValidationError: If the bytes are not a valid view payload.
    """
    return ViewResponse.model_validate_json(raw)
