from datetime import datetime

from gitness.schemas.common import ApiModel, ListOptions, RequestOptions


class Repository(ApiModel):
    id: int | None = None
    parent_id: int | None = None
    identifier: str | None = None
    path: str | None = None
    description: str | None = None
    is_public: bool | None = None
    created_by: int | None = None
    created: datetime | None = None
    updated: datetime | None = None
    size: int | None = None
    size_updated: datetime | None = None
    git_url: str | None = None
    default_branch: str | None = None
    fork_id: int | None = None
    num_forks: int | None = None
    num_pulls: int | None = None
    num_closed_pulls: int | None = None
    num_open_pulls: int | None = None
    num_merged_pulls: int | None = None
    importing: bool | None = None


class Identity(ApiModel):
    name: str | None = None
    email: str | None = None


class Signature(ApiModel):
    """Author or committer of a commit."""

    identity: Identity | None = None
    when: datetime | None = None


class CommitSHA(ApiModel):
    """The abbreviated commit embedded in a branch."""

    sha: str | None = None
    message: str | None = None
    author: Signature | None = None
    committer: Signature | None = None


class Branch(ApiModel):
    name: str | None = None
    sha: str | None = None
    commit: CommitSHA | None = None


class Commit(ApiModel):
    sha: str | None = None
    message: str | None = None
    author: Signature | None = None
    committer: Signature | None = None
    added: list[str] | None = None
    removed: list[str] | None = None
    modified: list[str] | None = None


class FileContent(ApiModel):
    name: str | None = None
    path: str | None = None
    sha: str | None = None
    size: int | None = None
    type: str | None = None
    content: str | None = None


class TreeNode(ApiModel):
    name: str | None = None
    path: str | None = None
    type: str | None = None
    mode: str | None = None
    sha: str | None = None
    size: int | None = None


class CreateRepositoryOptions(RequestOptions):
    identifier: str | None = None
    description: str | None = None
    is_public: bool | None = None
    default_branch: str | None = None
    gitignore: str | None = None
    license: str | None = None
    readme: bool | None = None


class UpdateRepositoryOptions(RequestOptions):
    description: str | None = None
    is_public: bool | None = None
    default_branch: str | None = None


class ImportRepositoryOptions(RequestOptions):
    clone_url: str | None = None
    username: str | None = None
    password: str | None = None
    private_key: str | None = None
    passphrase: str | None = None
    provider: str | None = None
    provider_id: str | None = None


class DeleteRepositoryRequest(RequestOptions):
    delete_id: str | None = None


class ListRepositoriesOptions(ListOptions):
    recursive: bool | None = None


class CreateBranchOptions(RequestOptions):
    name: str | None = None
    target: str | None = None


class ListCommitsOptions(ListOptions):
    git_ref: str | None = None
    after: str | None = None
    since: datetime | None = None
    until: datetime | None = None
    path: str | None = None


class GetFileOptions(RequestOptions):
    git_ref: str | None = None
    include_commit: bool | None = None


class ListPathsOptions(RequestOptions):
    git_ref: str | None = None
    path: str | None = None
    include_commit: bool | None = None
