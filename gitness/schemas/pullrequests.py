from datetime import datetime
from enum import StrEnum
from typing import Any

from gitness.schemas.common import ApiModel, ListOptions, RequestOptions
from gitness.schemas.principals import PrincipalInfo


class PullReqReviewDecision(StrEnum):
    APPROVED = "approved"
    REQUESTED_CHANGES = "changereq"
    PENDING = "pending"


class PullRequestStats(ApiModel):
    commits: int | None = None
    files_changed: int | None = None
    additions: int | None = None
    deletions: int | None = None
    conversations: int | None = None
    unresolved_count: int | None = None


class Label(ApiModel):
    id: int | None = None
    key: str | None = None
    value: str | None = None
    color: str | None = None
    scope: str | None = None


class Reviewer(ApiModel):
    principal: PrincipalInfo | None = None
    type: str | None = None
    review_decision: str | None = None
    sha: str | None = None
    created: datetime | None = None
    updated: datetime | None = None


class PullRequest(ApiModel):
    id: int | None = None
    number: int | None = None
    created_by: int | None = None
    created: datetime | None = None
    updated: datetime | None = None
    edited: datetime | None = None
    state: str | None = None
    is_draft: bool | None = None
    title: str | None = None
    description: str | None = None
    source_repo_id: int | None = None
    source_branch: str | None = None
    target_repo_id: int | None = None
    target_branch: str | None = None
    merge_method: str | None = None
    merge_check_status: str | None = None
    merge_sha: str | None = None
    merged_by: int | None = None
    merged: datetime | None = None
    stats: PullRequestStats | None = None
    author: PrincipalInfo | None = None
    merger: PrincipalInfo | None = None
    labels: list[Label] | None = None
    reviewers: list[Reviewer] | None = None


class PullReqActivitySuggestionsMetadata(ApiModel):
    check_sums: list[str] | None = None
    applied_check_sum: str | None = None
    applied_commit_sha: str | None = None


class PullReqActivityMentionsMetadata(ApiModel):
    ids: list[int] | None = None


class PullReqActivityMetadata(ApiModel):
    suggestions: PullReqActivitySuggestionsMetadata | None = None
    mentions: PullReqActivityMentionsMetadata | None = None


class PullRequestActivity(ApiModel):
    """A comment, review or system event on a pull request."""

    id: int | None = None
    type: str | None = None
    kind: str | None = None
    text: str | None = None
    # Shape depends on ``kind`` (code comment position, state change, ...).
    payload: Any = None
    reply_to: int | None = None
    order: int | None = None
    sub_order: int | None = None
    created: datetime | None = None
    updated: datetime | None = None
    edited: datetime | None = None
    author: PrincipalInfo | None = None
    metadata: PullReqActivityMetadata | None = None


class UserReviewDecision(ApiModel):
    user_id: int | None = None
    user_info: PrincipalInfo | None = None
    decision: str | None = None
    created: datetime | None = None


class UserGroupReviewer(ApiModel):
    id: int | None = None
    user_group_id: int | None = None
    added_by: PrincipalInfo | None = None
    created: datetime | None = None
    updated: datetime | None = None
    decision: str | None = None
    user_decisions: list[UserReviewDecision] | None = None


class CombinedReviewers(ApiModel):
    reviewers: list[Reviewer] | None = None
    usergroup_reviewers: list[UserGroupReviewer] | None = None


class CreatePullRequestOptions(RequestOptions):
    title: str | None = None
    description: str | None = None
    source_branch: str | None = None
    target_branch: str | None = None
    is_draft: bool | None = None


class UpdatePullRequestOptions(RequestOptions):
    title: str | None = None
    description: str | None = None


class StatePullRequestOptions(RequestOptions):
    state: str | None = None


class ListPullRequestsOptions(ListOptions):
    state: str | None = None
    source_branch: str | None = None
    target_branch: str | None = None
    created_by: int | None = None


class MergePullRequestOptions(RequestOptions):
    method: str | None = None
    commit_message: str | None = None
    source_sha: str | None = None
    bypass_rules: bool | None = None
    dry_run: bool | None = None
    dry_run_rules: bool | None = None


class CreatePullRequestCommentOptions(RequestOptions):
    text: str | None = None
    reply_to: int | None = None


class UserGroupReviewerAddRequest(RequestOptions):
    usergroup_id: int | None = None
