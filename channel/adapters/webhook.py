"""HTTP push connector."""

from __future__ import annotations

from pydantic import Field, HttpUrl

from .base import AdapterOptions, ConnectorAdapter, Manifest


class WebhookOptions(AdapterOptions):
    endpoint: HttpUrl = Field(..., title="Endpoint URL")
    secret: str = Field("", max_length=256, title="Signing secret")
    timeout_s: float = Field(10.0, gt=0, le=120, title="Timeout (s)")
    verify_tls: bool = Field(True, title="Verify TLS certificates")


class WebhookAdapter(ConnectorAdapter):
    manifest = Manifest(
        name="webhook",
        label="Webhook",
        description="Pushes content changes to an HTTP endpoint.",
    )
    options_schema = WebhookOptions
