"""RSS/Atom feed export connector."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, HttpUrl

from .base import AdapterOptions, ConnectorAdapter, Manifest


class FeedOptions(AdapterOptions):
    url: HttpUrl = Field(..., title="Feed URL")
    title: str = Field("", max_length=120, title="Feed title")
    format: Literal["rss", "atom"] = Field("rss", title="Format")
    item_limit: int = Field(20, ge=1, le=500, title="Items per feed")


class FeedAdapter(ConnectorAdapter):
    manifest = Manifest(
        name="feed",
        label="RSS/Atom feed",
        description="Publishes channel content as a syndication feed.",
    )
    options_schema = FeedOptions
