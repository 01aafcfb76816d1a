"""Pull requests, their activity stream and reviewers."""

from gitness.pagination import Page
from gitness.schemas.common import ListOptions
from gitness.schemas.pullrequests import (
    CombinedReviewers,
    CreatePullRequestCommentOptions,
    CreatePullRequestOptions,
    ListPullRequestsOptions,
    MergePullRequestOptions,
    PullRequest,
    PullRequestActivity,
    Reviewer,
    StatePullRequestOptions,
    UpdatePullRequestOptions,
    UserGroupReviewer,
    UserGroupReviewerAddRequest,
)
from gitness.services.base import BaseService, escape


class PullRequestsService(BaseService):
    @staticmethod
    def _path(repo_ref: str, number: int | None = None) -> str:
        path = f"repos/{escape(repo_ref)}/pullreq"
        if number is not None:
            path += f"/{escape(number)}"
        return path

    async def create_pull_request(self, repo_ref: str, options: CreatePullRequestOptions) -> PullRequest:
        return await self._post(self._path(repo_ref), PullRequest, options)

    async def list_pull_requests(
        self, repo_ref: str, options: ListPullRequestsOptions | None = None
    ) -> Page[PullRequest]:
        """List pull requests of a repository.

        Args:
            repo_ref: Repository path, e.g. ``space/repo``.
            options: Paging plus ``state``, branch and author filters.

        Returns:
            One page of pull requests with the paging headers attached.
        """
        return await self._list(self._path(repo_ref), PullRequest, params=options)

    async def get_pull_request(self, repo_ref: str, number: int) -> PullRequest:
        return await self._get(self._path(repo_ref, number), PullRequest)

    async def update_pull_request(
        self, repo_ref: str, number: int, options: UpdatePullRequestOptions
    ) -> PullRequest:
        return await self._patch(self._path(repo_ref, number), PullRequest, options)

    async def set_pull_request_state(
        self, repo_ref: str, number: int, options: StatePullRequestOptions
    ) -> PullRequest:
        return await self._post(f"{self._path(repo_ref, number)}/state", PullRequest, options)

    async def merge_pull_request(
        self, repo_ref: str, number: int, options: MergePullRequestOptions
    ) -> PullRequest:
        return await self._post(f"{self._path(repo_ref, number)}/merge", PullRequest, options)

    async def list_pull_request_activity(
        self, repo_ref: str, number: int, options: ListOptions | None = None
    ) -> Page[PullRequestActivity]:
        return await self._list(f"{self._path(repo_ref, number)}/activities", PullRequestActivity, params=options)

    async def create_pull_request_comment(
        self, repo_ref: str, number: int, options: CreatePullRequestCommentOptions
    ) -> PullRequestActivity:
        return await self._post(f"{self._path(repo_ref, number)}/comments", PullRequestActivity, options)

    # Reviewers

    async def add_pull_request_reviewer(self, repo_ref: str, number: int, reviewer_uid: str) -> None:
        await self._client.put(f"{self._path(repo_ref, number)}/reviewers/{escape(reviewer_uid)}")

    async def remove_pull_request_reviewer(self, repo_ref: str, number: int, reviewer_uid: str) -> None:
        await self._client.delete(f"{self._path(repo_ref, number)}/reviewers/{escape(reviewer_uid)}")

    async def list_pull_request_reviewers(self, repo_ref: str, number: int) -> list[Reviewer]:
        return await self._get_list(f"{self._path(repo_ref, number)}/reviewers", Reviewer)

    async def list_pull_request_combined_reviewers(self, repo_ref: str, number: int) -> CombinedReviewers:
        """Individual reviewers and user-group reviewers in one response."""
        return await self._get(f"{self._path(repo_ref, number)}/reviewers/combined", CombinedReviewers)

    async def add_pull_request_user_group_reviewer(
        self, repo_ref: str, number: int, user_group_id: int
    ) -> UserGroupReviewer:
        return await self._put(
            f"{self._path(repo_ref, number)}/reviewers/usergroups",
            UserGroupReviewer,
            UserGroupReviewerAddRequest(usergroup_id=user_group_id),
        )

    async def remove_pull_request_user_group_reviewer(self, repo_ref: str, number: int, user_group_id: int) -> None:
        await self._client.delete(f"{self._path(repo_ref, number)}/reviewers/usergroups/{escape(user_group_id)}")
