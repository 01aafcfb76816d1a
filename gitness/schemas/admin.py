"""Admin-only payloads: user management, LDAP and the audit trail."""

from datetime import datetime

from pydantic import Field

from gitness.schemas.common import ApiModel, ListOptions, RequestOptions


class AuditLog(ApiModel):
    id: int | None = None
    created: datetime | None = None
    action: str | None = None
    resource_type: str | None = None
    resource_identifier: str | None = None
    principal_uid: str | None = None
    principal_display_name: str | None = None
    data: str | None = None


class ListAuditLogsOptions(ListOptions):
    user_uid: str | None = None
    action: str | None = None
    resource_type: str | None = None
    resource_identifier: str | None = None
    # ``from`` is a keyword; the alias keeps the query parameter name.
    from_: datetime | None = Field(default=None, alias="from")
    to: datetime | None = None


class ListUsersOptions(ListOptions):
    admin: bool | None = None
    blocked: bool | None = None


class CreateUserRequest(RequestOptions):
    uid: str | None = None
    email: str | None = None
    display_name: str | None = None
    password: str | None = None
    admin: bool | None = None


class UpdateUserRequest(RequestOptions):
    email: str | None = None
    display_name: str | None = None


class LDAPUser(ApiModel):
    uid: str | None = None
    email: str | None = None
    display_name: str | None = None


class SearchLDAPUsersOptions(ListOptions):
    pass


class SyncLDAPUsersRequest(RequestOptions):
    user_uids: list[str] | None = None


class SyncLDAPUsersResponse(ApiModel):
    synchronized: int | None = None
    failed: int | None = None
