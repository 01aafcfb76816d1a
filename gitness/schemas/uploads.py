from datetime import datetime

from gitness.schemas.common import ApiModel, RequestOptions


class Upload(ApiModel):
    reference: str | None = None
    file_name: str | None = None
    file_size: int | None = None
    checksum: str | None = None
    created: datetime | None = None


class CreateUploadRequest(RequestOptions):
    file_name: str | None = None
    file_size: int | None = None
