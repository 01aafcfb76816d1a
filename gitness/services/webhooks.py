from gitness.pagination import Page
from gitness.schemas.common import ListOptions
from gitness.schemas.webhooks import CreateWebhookOptions, Webhook
from gitness.services.base import BaseService, escape


class WebhooksService(BaseService):
    async def create_webhook(self, repo_ref: str, options: CreateWebhookOptions) -> Webhook:
        return await self._post(f"repos/{escape(repo_ref)}/webhooks", Webhook, options)

    async def list_webhooks(self, repo_ref: str, options: ListOptions | None = None) -> Page[Webhook]:
        return await self._list(f"repos/{escape(repo_ref)}/webhooks", Webhook, params=options)
