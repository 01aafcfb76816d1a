from datetime import datetime

from gitness.schemas.common import ApiModel, ListOptions, RequestOptions


class Space(ApiModel):
    id: int | None = None
    parent_id: int | None = None
    identifier: str | None = None
    path: str | None = None
    description: str | None = None
    is_public: bool | None = None
    created_by: int | None = None
    created: datetime | None = None
    updated: datetime | None = None


class CreateSpaceOptions(RequestOptions):
    identifier: str | None = None
    parent_ref: str | None = None
    description: str | None = None
    is_public: bool | None = None


class UpdateSpaceOptions(RequestOptions):
    description: str | None = None
    is_public: bool | None = None


class ListSpacesOptions(ListOptions):
    recursive: bool | None = None


class DeleteSpaceRequest(RequestOptions):
    delete_id: str | None = None
