"""Exercise the auxiliary services: auth, principals, plugins, resources,
system config, uploads, keys, tokens, pipeline triggers, secrets and
connectors.

Usage: python examples/extended_services.py <space>/<repo> <pipeline>
"""

import asyncio
import sys

import structlog

from gitness import Client, ErrorResponse, ListOptions, configure_logging
from gitness.config.config import Settings
from gitness.schemas.connectors import (
    ConnectorAuth,
    ConnectorAuthType,
    ConnectorType,
    CreateConnectorOptions,
    GithubConnectorData,
)
from gitness.schemas.pipelines import (
    CreatePipelineTriggerOptions,
    ListPipelineExecutionsOptions,
    TriggerAction,
    TriggerType,
)
from gitness.schemas.principals import ListPrincipalsOptions
from gitness.schemas.users import ListPublicKeysOptions, ListTokensOptions

logger = structlog.get_logger(__name__)


async def main(repo_ref: str, pipeline: str) -> int:
    settings = Settings()
    space_ref = repo_ref.split("/", 1)[0]
    async with Client.from_settings(settings) as client:
        principals = await client.principals.list_principals(ListPrincipalsOptions(type="user", limit=10))
        logger.info("principals", total=principals.total, uids=[p.uid for p in principals])

        plugins = await client.plugins.list_plugins()
        logger.info("plugins", identifiers=[p.identifier for p in plugins])

        gitignores = await client.resource.list_gitignore_templates()
        licenses = await client.resource.list_license_templates()
        logger.info("resource_templates", gitignore=len(gitignores), license=len(licenses))

        config = await client.system.get_system_config()
        logger.info("system_config", signup=config.user_signup_allowed, ssh=config.ssh_enabled)

        upload = await client.upload.create_upload(repo_ref, "notes.txt", 1024)
        logger.info("upload_created", reference=upload.reference)

        keys = await client.users.list_user_keys(ListPublicKeysOptions(usage="auth"))
        tokens = await client.users.list_user_tokens(ListTokensOptions(limit=10))
        logger.info("credentials", keys=len(keys), tokens=len(tokens))

        executions = await client.pipelines.list_pipeline_executions(
            repo_ref, pipeline, ListPipelineExecutionsOptions(status="success", limit=5)
        )
        logger.info("executions", numbers=[e.number for e in executions])

        triggers = await client.pipelines.list_pipeline_triggers(repo_ref, pipeline)
        logger.info("triggers", identifiers=[t.identifier for t in triggers])

        try:
            trigger = await client.pipelines.create_pipeline_trigger(
                repo_ref,
                pipeline,
                CreatePipelineTriggerOptions(
                    identifier="on-pull-request",
                    trigger_type=TriggerType.HOOK,
                    actions=[TriggerAction.PULLREQ_CREATED, TriggerAction.PULLREQ_BRANCH_UPDATED],
                ),
            )
            logger.info("trigger_created", identifier=trigger.identifier)
        except ErrorResponse as exc:
            logger.warning("trigger_create_failed", status_code=exc.status_code, error=exc.message)

        repo_secrets = await client.secrets.list_repo_secrets(repo_ref, ListOptions(limit=10))
        global_secrets = await client.secrets.list_global_secrets(ListOptions(limit=10))
        logger.info("secrets", repo=len(repo_secrets), global_=len(global_secrets))

        try:
            await client.connectors.create_connector(
                CreateConnectorOptions(
                    identifier="github",
                    space_ref=space_ref,
                    type=ConnectorType.GITHUB,
                    github=GithubConnectorData(
                        api_url="https://api.github.com",
                        auth=ConnectorAuth(auth_type=ConnectorAuthType.BEARER, token="<github-token>"),
                    ),
                )
            )
        except ErrorResponse as exc:
            logger.warning("connector_create_failed", status_code=exc.status_code, error=exc.message)

        connectors = await client.connectors.list_connectors(ListOptions(limit=10))
        for connector in connectors:
            logger.info("connector", identifier=connector.identifier, status=connector.last_test_status)
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 3:
        sys.exit(__doc__)
    configure_logging(json_output=False)
    sys.exit(asyncio.run(main(sys.argv[1], sys.argv[2])))
