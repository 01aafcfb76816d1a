from datetime import datetime
from typing import Any

from gitness.schemas.common import ApiModel, RequestOptions


class Check(ApiModel):
    """A status check reported against a commit."""

    id: int | None = None
    created: datetime | None = None
    updated: datetime | None = None
    repo_id: int | None = None
    commit_sha: str | None = None
    identifier: str | None = None
    status: str | None = None
    started: datetime | None = None
    ended: datetime | None = None
    link: str | None = None
    summary: str | None = None
    payload: dict[str, Any] | None = None
    uid: str | None = None


class CreateCheckOptions(RequestOptions):
    identifier: str | None = None
    status: str | None = None
    started: datetime | None = None
    ended: datetime | None = None
    link: str | None = None
    summary: str | None = None
    payload: dict[str, Any] | None = None


class UpdateCheckOptions(RequestOptions):
    status: str | None = None
    started: datetime | None = None
    ended: datetime | None = None
    link: str | None = None
    summary: str | None = None
    payload: dict[str, Any] | None = None


class ListChecksOptions(RequestOptions):
    latest: bool | None = None
