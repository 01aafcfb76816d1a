from gitness.schemas.resources import GitIgnoreTemplate, LicenseTemplate
from gitness.services.base import BaseService


class ResourceService(BaseService):
    """Templates offered when creating a repository."""

    async def list_gitignore_templates(self) -> list[GitIgnoreTemplate]:
        return await self._get_list("resources/gitignore", GitIgnoreTemplate)

    async def list_license_templates(self) -> list[LicenseTemplate]:
        return await self._get_list("resources/license", LicenseTemplate)
