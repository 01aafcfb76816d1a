from gitness.pagination import Page
from gitness.schemas.principals import ListPrincipalsOptions, Principal
from gitness.services.base import BaseService, escape


class PrincipalsService(BaseService):
    async def list_principals(self, options: ListPrincipalsOptions | None = None) -> Page[Principal]:
        return await self._list("principals", Principal, params=options)

    async def get_principal(self, principal_id: int) -> Principal:
        return await self._get(f"principals/{escape(principal_id)}", Principal)
