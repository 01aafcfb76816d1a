"""Shared bases for Gitness DTOs and request options."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def as_utc(value: datetime) -> datetime:
    """Pin a naive datetime to UTC. Aware values pass through untouched."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ApiModel(BaseModel):
    """Shared config: every field is optional and unknown fields from the API are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RequestOptions(BaseModel):
    """Base for request bodies and query options.

    Serialized with ``exclude_none`` so unset fields never reach the wire.
    Naive datetimes are read as UTC, so every timestamp goes out as RFC3339
    with an offset.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    @field_validator("*", mode="after")
    @classmethod
    def _naive_datetimes_are_utc(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return as_utc(value)
        return value


class ListOptions(RequestOptions):
    page: int | None = None
    # Gitness pages with ``limit``, not ``per_page``.
    limit: int | None = None
    sort: str | None = None
    order: str | None = None
    query: str | None = None
