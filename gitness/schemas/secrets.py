from datetime import datetime

from gitness.schemas.common import ApiModel, RequestOptions


class Secret(ApiModel):
    """Secret metadata. The server never returns the secret value."""

    id: int | None = None
    identifier: str | None = None
    description: str | None = None
    created: datetime | None = None
    updated: datetime | None = None


class CreateSecretOptions(RequestOptions):
    identifier: str | None = None
    description: str | None = None
    data: str | None = None
