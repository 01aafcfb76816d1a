"""Repositories and their git objects: branches, commits and file content."""

from gitness.pagination import Page
from gitness.schemas.common import ListOptions
from gitness.schemas.repositories import (
    Branch,
    Commit,
    CreateBranchOptions,
    CreateRepositoryOptions,
    DeleteRepositoryRequest,
    FileContent,
    GetFileOptions,
    ImportRepositoryOptions,
    ListCommitsOptions,
    ListPathsOptions,
    Repository,
    TreeNode,
    UpdateRepositoryOptions,
)
from gitness.services.base import BaseService, escape, escape_path


class RepositoriesService(BaseService):
    async def get_repository(self, repo_ref: str) -> Repository:
        return await self._get(f"repos/{escape(repo_ref)}", Repository)

    async def create_repository(self, space_ref: str, options: CreateRepositoryOptions) -> Repository:
        return await self._post(f"spaces/{escape(space_ref)}/repos", Repository, options)

    async def import_repository(self, space_ref: str, options: ImportRepositoryOptions) -> Repository:
        """Create a repository by cloning from an external provider.

        The import runs in the background; the returned repository has
        ``importing`` set until it finishes.
        """
        return await self._post(f"spaces/{escape(space_ref)}/repos/import", Repository, options)

    async def update_repository(self, repo_ref: str, options: UpdateRepositoryOptions) -> Repository:
        return await self._patch(f"repos/{escape(repo_ref)}", Repository, options)

    async def delete_repository(self, repo_ref: str, delete_id: str | None = None) -> None:
        body = DeleteRepositoryRequest(delete_id=delete_id) if delete_id is not None else None
        await self._client.delete(f"repos/{escape(repo_ref)}", body)

    # Branches

    async def list_branches(self, repo_ref: str, options: ListOptions | None = None) -> Page[Branch]:
        return await self._list(f"repos/{escape(repo_ref)}/branches", Branch, params=options)

    async def get_branch(self, repo_ref: str, branch_name: str) -> Branch:
        return await self._get(f"repos/{escape(repo_ref)}/branches/{escape(branch_name)}", Branch)

    async def create_branch(self, repo_ref: str, options: CreateBranchOptions) -> Branch:
        return await self._post(f"repos/{escape(repo_ref)}/branches", Branch, options)

    async def delete_branch(self, repo_ref: str, branch_name: str) -> None:
        await self._client.delete(f"repos/{escape(repo_ref)}/branches/{escape(branch_name)}")

    # Commits and content

    async def list_commits(self, repo_ref: str, options: ListCommitsOptions | None = None) -> Page[Commit]:
        return await self._list(f"repos/{escape(repo_ref)}/commits", Commit, params=options)

    async def get_commit(self, repo_ref: str, commit_sha: str) -> Commit:
        return await self._get(f"repos/{escape(repo_ref)}/commits/{escape(commit_sha)}", Commit)

    async def get_file_content(
        self, repo_ref: str, file_path: str, options: GetFileOptions | None = None
    ) -> FileContent:
        """Fetch one file (or directory entry) at a ref.

        Args:
            repo_ref: Repository path, e.g. ``space/repo``.
            file_path: Path inside the repository; ``/`` separators are kept.
            options: ``git_ref`` to read from and whether to include the last commit.
        """
        return await self._get(
            f"repos/{escape(repo_ref)}/content/{escape_path(file_path)}", FileContent, params=options
        )

    async def list_paths(self, repo_ref: str, options: ListPathsOptions | None = None) -> Page[TreeNode]:
        return await self._list(f"repos/{escape(repo_ref)}/paths", TreeNode, params=options)
