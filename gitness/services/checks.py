"""Commit status checks reported by external systems."""

from gitness.pagination import Page
from gitness.schemas.checks import Check, CreateCheckOptions, ListChecksOptions, UpdateCheckOptions
from gitness.services.base import BaseService, escape


class ChecksService(BaseService):
    @staticmethod
    def _path(repo_ref: str, commit_sha: str) -> str:
        return f"repos/{escape(repo_ref)}/commits/{escape(commit_sha)}/checks"

    async def create_check(self, repo_ref: str, commit_sha: str, options: CreateCheckOptions) -> Check:
        return await self._post(self._path(repo_ref, commit_sha), Check, options)

    async def update_check(
        self, repo_ref: str, commit_sha: str, check_id: str, options: UpdateCheckOptions
    ) -> Check:
        return await self._patch(f"{self._path(repo_ref, commit_sha)}/{escape(check_id)}", Check, options)

    async def list_checks(
        self, repo_ref: str, commit_sha: str, options: ListChecksOptions | None = None
    ) -> Page[Check]:
        return await self._list(self._path(repo_ref, commit_sha), Check, params=options)

    async def get_check(self, repo_ref: str, commit_sha: str, check_id: str) -> Check:
        return await self._get(f"{self._path(repo_ref, commit_sha)}/{escape(check_id)}", Check)
