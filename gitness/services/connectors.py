from gitness.pagination import Page
from gitness.schemas.common import ListOptions
from gitness.schemas.connectors import Connector, CreateConnectorOptions, UpdateConnectorOptions
from gitness.services.base import BaseService, escape


class ConnectorsService(BaseService):
    """Connections to external providers, addressed by ``space/identifier`` refs."""

    async def list_connectors(self, options: ListOptions | None = None) -> Page[Connector]:
        return await self._list("connectors", Connector, params=options)

    async def get_connector(self, connector_ref: str) -> Connector:
        return await self._get(f"connectors/{escape(connector_ref)}", Connector)

    async def create_connector(self, options: CreateConnectorOptions) -> Connector:
        return await self._post("connectors", Connector, options)

    async def update_connector(self, connector_ref: str, options: UpdateConnectorOptions) -> Connector:
        return await self._patch(f"connectors/{escape(connector_ref)}", Connector, options)

    async def delete_connector(self, connector_ref: str) -> None:
        await self._client.delete(f"connectors/{escape(connector_ref)}")
