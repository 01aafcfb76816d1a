"""Walk admin users page by page, then let ``paginate`` do it.

Run with GITNESS_TOKEN (an admin token) and optionally GITNESS_BASE_URL set.
"""

import asyncio
import sys

import structlog

from gitness import Client, ErrorResponse, configure_logging, paginate
from gitness.config.config import Settings
from gitness.schemas.admin import ListUsersOptions
from gitness.schemas.spaces import ListSpacesOptions

logger = structlog.get_logger(__name__)


async def main() -> int:
    settings = Settings()
    if not settings.token:
        logger.error("missing_token", hint="set GITNESS_TOKEN")
        return 1

    async with Client.from_settings(settings) as client:
        page_number = 1
        while page_number <= 2:
            try:
                page = await client.admin.list_users(ListUsersOptions(page=page_number, limit=2))
            except ErrorResponse as exc:
                logger.warning("list_users_failed", page=page_number, status_code=exc.status_code, error=exc.message)
                break
            logger.info(
                "users_page",
                page=page.page,
                per_page=page.per_page,
                total=page.total,
                total_pages=page.total_pages,
                users=[user.uid for user in page],
            )
            if page.next_page is None:
                break
            page_number = page.next_page

        admins = await client.admin.list_users(ListUsersOptions(admin=True, limit=5))
        logger.info("admin_users", count=len(admins), users=[user.display_name for user in admins])

        uids = [user.uid async for user in paginate(client.admin.list_users, options=ListUsersOptions(limit=50))]
        logger.info("all_users", count=len(uids))

        async for space in paginate(client.spaces.list_spaces, options=ListSpacesOptions(limit=20)):
            logger.info("space", path=space.path)
    return 0


if __name__ == "__main__":
    configure_logging(json_output=False)
    sys.exit(asyncio.run(main()))
