from gitness.schemas.plugins import Plugin
from gitness.services.base import BaseService


class PluginsService(BaseService):
    async def list_plugins(self) -> list[Plugin]:
        return await self._get_list("plugins", Plugin)
