from datetime import datetime

from gitness.schemas.common import ApiModel, ListOptions, RequestOptions


class User(ApiModel):
    uid: str | None = None
    email: str | None = None
    display_name: str | None = None
    admin: bool | None = None
    blocked: bool | None = None
    created: datetime | None = None
    updated: datetime | None = None


class PublicKey(ApiModel):
    identifier: str | None = None
    type: str | None = None
    content: str | None = None
    fingerprint: str | None = None
    usage: str | None = None
    created: datetime | None = None


class PersonalAccessToken(ApiModel):
    identifier: str | None = None
    name: str | None = None
    expires_at: datetime | None = None
    issued_at: datetime | None = None
    last_used_at: datetime | None = None


class UserMembership(ApiModel):
    space_id: int | None = None
    space_path: str | None = None
    role: str | None = None
    added_by: int | None = None
    added: datetime | None = None


class UserFavorite(ApiModel):
    resource_id: int | None = None
    resource_type: str | None = None
    resource_path: str | None = None
    added: datetime | None = None


class CreatePublicKeyOptions(RequestOptions):
    identifier: str | None = None
    content: str | None = None
    usage: str | None = None


class CreateTokenOptions(RequestOptions):
    identifier: str | None = None
    # Token lifetime in nanoseconds, as the server expects it.
    lifetime: int | None = None


class ListPublicKeysOptions(ListOptions):
    usage: str | None = None


class ListTokensOptions(ListOptions):
    pass
