from gitness.schemas.common import ApiModel


class Plugin(ApiModel):
    id: str | None = None
    identifier: str | None = None
    name: str | None = None
    description: str | None = None
    type: str | None = None
    version: str | None = None
    logo: str | None = None
    enabled: bool | None = None
    # YAML template used to render the plugin step.
    spec: str | None = None
