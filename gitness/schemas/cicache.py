from datetime import datetime

from gitness.schemas.common import ApiModel, ListOptions, RequestOptions


class CiCacheEntry(ApiModel):
    key: str | None = None
    size: int | None = None
    created: datetime | None = None
    accessed: datetime | None = None
    version: int | None = None


class GetCiCacheOptions(RequestOptions):
    version: int | None = None


class ListCiCacheOptions(ListOptions):
    key_prefix: str | None = None
