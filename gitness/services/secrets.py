"""Pipeline secrets scoped to a repository, a space or the whole server."""

from gitness.pagination import Page
from gitness.schemas.common import ListOptions
from gitness.schemas.secrets import CreateSecretOptions, Secret
from gitness.services.base import BaseService, escape


class SecretsService(BaseService):
    async def list_repo_secrets(self, repo_ref: str, options: ListOptions | None = None) -> Page[Secret]:
        return await self._list(f"repos/{escape(repo_ref)}/secrets", Secret, params=options)

    async def create_repo_secret(self, repo_ref: str, options: CreateSecretOptions) -> Secret:
        return await self._post(f"repos/{escape(repo_ref)}/secrets", Secret, options)

    # Same endpoint as create_repo_secret.
    create_secret = create_repo_secret

    async def list_space_secrets(self, space_ref: str, options: ListOptions | None = None) -> Page[Secret]:
        return await self._list(f"spaces/{escape(space_ref)}/secrets", Secret, params=options)

    async def create_space_secret(self, space_ref: str, options: CreateSecretOptions) -> Secret:
        return await self._post(f"spaces/{escape(space_ref)}/secrets", Secret, options)

    async def list_global_secrets(self, options: ListOptions | None = None) -> Page[Secret]:
        return await self._list("secrets", Secret, params=options)

    async def create_global_secret(self, options: CreateSecretOptions) -> Secret:
        return await self._post("secrets", Secret, options)

    async def get_secret(self, secret_ref: str) -> Secret:
        return await self._get(f"secrets/{escape(secret_ref)}", Secret)

    async def update_secret(self, secret_ref: str, options: CreateSecretOptions) -> Secret:
        return await self._patch(f"secrets/{escape(secret_ref)}", Secret, options)

    async def delete_secret(self, secret_ref: str) -> None:
        await self._client.delete(f"secrets/{escape(secret_ref)}")
