"""Admin endpoints: user management, LDAP sync and the audit trail."""

from gitness.pagination import Page
from gitness.schemas.admin import (
    AuditLog,
    CreateUserRequest,
    LDAPUser,
    ListAuditLogsOptions,
    ListUsersOptions,
    SearchLDAPUsersOptions,
    SyncLDAPUsersRequest,
    SyncLDAPUsersResponse,
    UpdateUserRequest,
)
from gitness.schemas.users import User
from gitness.services.base import BaseService, escape


class AdminService(BaseService):
    """Requires a token belonging to an administrator."""

    async def list_users(self, options: ListUsersOptions | None = None) -> Page[User]:
        return await self._list("admin/users", User, params=options)

    async def get_user(self, user_uid: str) -> User:
        return await self._get(f"admin/users/{escape(user_uid)}", User)

    async def create_user(self, user: CreateUserRequest) -> User:
        return await self._post("admin/users", User, user)

    async def update_user(self, user_uid: str, user: UpdateUserRequest) -> User:
        return await self._patch(f"admin/users/{escape(user_uid)}", User, user)

    async def delete_user(self, user_uid: str) -> None:
        await self._client.delete(f"admin/users/{escape(user_uid)}")

    async def update_user_admin_status(self, user_uid: str, admin: bool) -> User:
        return await self._patch(f"admin/users/{escape(user_uid)}/admin", User, {"admin": admin})

    async def update_user_blocked_status(self, user_uid: str, blocked: bool) -> User:
        return await self._patch(f"admin/users/{escape(user_uid)}/blocked", User, {"blocked": blocked})

    async def search_ldap_users(self, options: SearchLDAPUsersOptions | None = None) -> Page[LDAPUser]:
        return await self._list("admin/ldap/users", LDAPUser, params=options)

    async def sync_ldap_users(self, request: SyncLDAPUsersRequest) -> SyncLDAPUsersResponse:
        """Import or refresh the given LDAP accounts.

        Returns:
            Counts of synchronized and failed accounts.
        """
        return await self._post("admin/ldap/users/sync", SyncLDAPUsersResponse, request)


class AuditService(BaseService):
    async def list_audit_logs(self, options: ListAuditLogsOptions | None = None) -> Page[AuditLog]:
        """List audit entries, newest first.

        Args:
            options: Filters by acting user, action, resource and a
                ``from``/``to`` time window. ``None`` lists everything.
        """
        return await self._list("admin/audit", AuditLog, params=options)

    async def get_audit_log(self, audit_id: int) -> AuditLog:
        return await self._get(f"admin/audit/{escape(audit_id)}", AuditLog)

    async def cleanup_audit_logs(self) -> None:
        await self._client.post("admin/audit/cleanup")
