from enum import StrEnum

from gitness.schemas.common import ApiModel, RequestOptions


class ConnectorType(StrEnum):
    GITHUB = "github"


class ConnectorStatus(StrEnum):
    OK = "ok"
    ERROR = "error"
    PENDING = "pending"


class ConnectorAuthType(StrEnum):
    BEARER = "bearer"


class ConnectorAuth(ApiModel):
    auth_type: str | None = None
    token: str | None = None


class GithubConnectorData(ApiModel):
    api_url: str | None = None
    insecure: bool | None = None
    auth: ConnectorAuth | None = None


class Connector(ApiModel):
    # Timestamps on connectors are epoch milliseconds.
    created: int | None = None
    created_by: int | None = None
    description: str | None = None
    github: GithubConnectorData | None = None
    identifier: str | None = None
    last_test_attempt: int | None = None
    last_test_error_msg: str | None = None
    last_test_status: str | None = None
    space_id: int | None = None
    type: str | None = None
    updated: int | None = None


class CreateConnectorOptions(RequestOptions):
    description: str | None = None
    github: GithubConnectorData | None = None
    identifier: str | None = None
    space_ref: str | None = None
    type: ConnectorType | None = None


class UpdateConnectorOptions(RequestOptions):
    description: str | None = None
    github: GithubConnectorData | None = None
