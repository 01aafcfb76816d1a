from gitness.schemas.system import SystemConfig
from gitness.services.base import BaseService


class SystemService(BaseService):
    async def get_system_config(self) -> SystemConfig:
        """Fetch the server's feature flags (signup, SSH, LDAP, UI switches)."""
        return await self._get("system/config", SystemConfig)
