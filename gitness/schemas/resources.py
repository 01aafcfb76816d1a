from gitness.schemas.common import ApiModel


class GitIgnoreTemplate(ApiModel):
    name: str | None = None
    content: str | None = None


class LicenseTemplate(ApiModel):
    key: str | None = None
    name: str | None = None
    spdx_id: str | None = None
    description: str | None = None
    content: str | None = None
