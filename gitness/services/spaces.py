from gitness.pagination import Page
from gitness.schemas.repositories import ListRepositoriesOptions, Repository
from gitness.schemas.spaces import CreateSpaceOptions, DeleteSpaceRequest, ListSpacesOptions, Space, UpdateSpaceOptions
from gitness.services.base import BaseService, escape


class SpacesService(BaseService):
    """Spaces nest: a space ref is its full path, e.g. ``org/team``."""

    async def get_space(self, space_ref: str) -> Space:
        return await self._get(f"spaces/{escape(space_ref)}", Space)

    async def list_spaces(self, options: ListSpacesOptions | None = None) -> Page[Space]:
        return await self._list("spaces", Space, params=options)

    async def create_space(self, options: CreateSpaceOptions) -> Space:
        return await self._post("spaces", Space, options)

    async def update_space(self, space_ref: str, options: UpdateSpaceOptions) -> Space:
        return await self._patch(f"spaces/{escape(space_ref)}", Space, options)

    async def delete_space(self, space_ref: str, delete_id: str | None = None) -> None:
        body = DeleteSpaceRequest(delete_id=delete_id) if delete_id is not None else None
        await self._client.delete(f"spaces/{escape(space_ref)}", body)

    async def list_repositories(
        self, space_ref: str, options: ListRepositoriesOptions | None = None
    ) -> Page[Repository]:
        """List repositories in a space; ``recursive`` includes child spaces."""
        return await self._list(f"spaces/{escape(space_ref)}/repos", Repository, params=options)
