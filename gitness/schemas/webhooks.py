from datetime import datetime

from gitness.schemas.common import ApiModel, RequestOptions


class Webhook(ApiModel):
    id: int | None = None
    identifier: str | None = None
    description: str | None = None
    url: str | None = None
    secret: str | None = None
    triggers: list[str] | None = None
    enabled: bool | None = None
    insecure: bool | None = None
    created: datetime | None = None
    updated: datetime | None = None


class CreateWebhookOptions(RequestOptions):
    identifier: str | None = None
    description: str | None = None
    url: str | None = None
    secret: str | None = None
    triggers: list[str] | None = None
    enabled: bool | None = None
    insecure: bool | None = None
