"""Pipelines, their executions, triggers and step logs.

Unlike most resources, pipeline timestamps are epoch milliseconds and are
kept as plain integers.
"""

from enum import StrEnum

from gitness.schemas.common import ApiModel, ListOptions, RequestOptions


class TriggerAction(StrEnum):
    BRANCH_CREATED = "branch_created"
    BRANCH_UPDATED = "branch_updated"
    TAG_CREATED = "tag_created"
    TAG_UPDATED = "tag_updated"
    PULLREQ_CREATED = "pullreq_created"
    PULLREQ_REOPENED = "pullreq_reopened"
    PULLREQ_BRANCH_UPDATED = "pullreq_branch_updated"
    PULLREQ_CLOSED = "pullreq_closed"
    PULLREQ_MERGED = "pullreq_merged"


class TriggerEvent(StrEnum):
    CRON = "cron"
    MANUAL = "manual"
    PUSH = "push"
    PULL_REQUEST = "pull_request"
    TAG = "tag"


class TriggerType(StrEnum):
    HOOK = "@hook"
    CRON = "@cron"


class Pipeline(ApiModel):
    id: int | None = None
    identifier: str | None = None
    description: str | None = None
    disabled: bool | None = None
    config_path: str | None = None
    default_branch: str | None = None
    repo_id: int | None = None
    seq: int | None = None
    created_by: int | None = None
    created: int | None = None
    updated: int | None = None
    version: int | None = None


class PipelineExecution(ApiModel):
    number: int | None = None
    pipeline_id: int | None = None
    status: str | None = None
    event: str | None = None
    action: str | None = None
    ref: str | None = None
    source: str | None = None
    target: str | None = None
    before: str | None = None
    after: str | None = None
    author_login: str | None = None
    author_name: str | None = None
    author_email: str | None = None
    author_avatar: str | None = None
    message: str | None = None
    error: str | None = None
    started: int | None = None
    finished: int | None = None
    created: int | None = None
    updated: int | None = None
    params: dict[str, str] | None = None


class PipelineTrigger(ApiModel):
    id: int | None = None
    identifier: str | None = None
    trigger_type: str | None = None
    description: str | None = None
    disabled: bool | None = None
    secret: str | None = None
    actions: list[str] | None = None
    created: int | None = None
    updated: int | None = None
    version: int | None = None
    pipeline_id: int | None = None
    repo_id: int | None = None
    created_by: int | None = None


class LogLine(ApiModel):
    pos: int | None = None
    out: str | None = None
    time: int | None = None


class CreatePipelineOptions(RequestOptions):
    identifier: str | None = None
    description: str | None = None
    disabled: bool | None = None
    config_path: str | None = None
    default_branch: str | None = None


class UpdatePipelineOptions(RequestOptions):
    identifier: str | None = None
    description: str | None = None
    disabled: bool | None = None
    config_path: str | None = None


class ListPipelineExecutionsOptions(ListOptions):
    status: str | None = None


class CreatePipelineTriggerOptions(RequestOptions):
    identifier: str | None = None
    trigger_type: TriggerType | None = None
    description: str | None = None
    disabled: bool | None = None
    secret: str | None = None
    actions: list[TriggerAction] | None = None


class UpdatePipelineTriggerOptions(RequestOptions):
    description: str | None = None
    disabled: bool | None = None
    secret: str | None = None
    actions: list[TriggerAction] | None = None
