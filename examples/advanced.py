"""Tour of the repository-centric services.

Usage: python examples/advanced.py <space>/<repo>
"""

import asyncio
import sys
from datetime import datetime, timedelta, timezone

import structlog

from gitness import Client, ErrorResponse, ListOptions, configure_logging
from gitness.config.config import Settings
from gitness.schemas.pullrequests import CreatePullRequestOptions, ListPullRequestsOptions
from gitness.schemas.repositories import ListCommitsOptions
from gitness.schemas.spaces import ListSpacesOptions

logger = structlog.get_logger(__name__)


async def main(repo_ref: str) -> int:
    settings = Settings()
    space_ref = repo_ref.split("/", 1)[0]
    async with Client.from_settings(settings) as client:
        try:
            repo = await client.repositories.get_repository(repo_ref)
        except ErrorResponse as exc:
            logger.error("repository_unavailable", repo=repo_ref, status_code=exc.status_code, error=exc.message)
            return 1
        logger.info("repository", path=repo.path, default_branch=repo.default_branch, open_pulls=repo.num_open_pulls)

        branches = await client.repositories.list_branches(repo_ref)
        logger.info("branches", names=[branch.name for branch in branches])

        open_prs = await client.pull_requests.list_pull_requests(
            repo_ref, ListPullRequestsOptions(state="open", limit=10)
        )
        for pr in open_prs:
            logger.info("pull_request", number=pr.number, title=pr.title, source=pr.source_branch)

        feature = next((b.name for b in branches if b.name and b.name != repo.default_branch), None)
        if feature and not open_prs.items:
            pr = await client.pull_requests.create_pull_request(
                repo_ref,
                CreatePullRequestOptions(
                    title=f"Merge {feature}",
                    source_branch=feature,
                    target_branch=repo.default_branch,
                ),
            )
            logger.info("pull_request_created", number=pr.number)

        since = datetime.now(timezone.utc) - timedelta(days=7)
        commits = await client.repositories.list_commits(repo_ref, ListCommitsOptions(since=since, limit=5))
        for commit in commits:
            logger.info("commit", sha=(commit.sha or "")[:8], message=(commit.message or "").splitlines()[:1])

        pipelines = await client.pipelines.list_pipelines(repo_ref, ListOptions(limit=5))
        logger.info("pipelines", identifiers=[p.identifier for p in pipelines])

        secrets = await client.secrets.list_space_secrets(space_ref)
        logger.info("space_secrets", identifiers=[s.identifier for s in secrets])

        webhooks = await client.webhooks.list_webhooks(repo_ref)
        logger.info("webhooks", urls=[w.url for w in webhooks])

        spaces = await client.spaces.list_spaces(ListSpacesOptions(recursive=True, limit=10))
        logger.info("spaces", paths=[s.path for s in spaces])

        user = await client.users.get_current_user()
        logger.info("current_user", uid=user.uid, admin=user.admin)

        templates = await client.templates.list_templates(space_ref)
        logger.info("templates", identifiers=[t.identifier for t in templates])
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit(__doc__)
    configure_logging(json_output=False)
    sys.exit(asyncio.run(main(sys.argv[1])))
