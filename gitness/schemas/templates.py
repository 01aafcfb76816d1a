from datetime import datetime

from gitness.schemas.common import ApiModel, RequestOptions


class Template(ApiModel):
    identifier: str | None = None
    description: str | None = None
    data: str | None = None
    type: str | None = None
    space_id: int | None = None
    created: datetime | None = None
    updated: datetime | None = None


class CreateTemplateOptions(RequestOptions):
    identifier: str | None = None
    description: str | None = None
    data: str | None = None
    type: str | None = None


class UpdateTemplateOptions(RequestOptions):
    description: str | None = None
    data: str | None = None
