"""Pipelines, their executions, triggers and step logs."""

from gitness.pagination import Page
from gitness.schemas.common import ListOptions
from gitness.schemas.pipelines import (
    CreatePipelineOptions,
    CreatePipelineTriggerOptions,
    ListPipelineExecutionsOptions,
    LogLine,
    Pipeline,
    PipelineExecution,
    PipelineTrigger,
    UpdatePipelineOptions,
    UpdatePipelineTriggerOptions,
)
from gitness.services.base import BaseService, escape


class PipelinesService(BaseService):
    @staticmethod
    def _path(repo_ref: str, pipeline_identifier: str | None = None) -> str:
        path = f"repos/{escape(repo_ref)}/pipelines"
        if pipeline_identifier is not None:
            path += f"/{escape(pipeline_identifier)}"
        return path

    def _execution_path(self, repo_ref: str, pipeline_identifier: str, execution_number: int) -> str:
        return f"{self._path(repo_ref, pipeline_identifier)}/executions/{escape(execution_number)}"

    def _trigger_path(self, repo_ref: str, pipeline_identifier: str, trigger_identifier: str) -> str:
        return f"{self._path(repo_ref, pipeline_identifier)}/triggers/{escape(trigger_identifier)}"

    async def list_pipelines(self, repo_ref: str, options: ListOptions | None = None) -> Page[Pipeline]:
        return await self._list(self._path(repo_ref), Pipeline, params=options)

    async def create_pipeline(self, repo_ref: str, options: CreatePipelineOptions) -> Pipeline:
        return await self._post(self._path(repo_ref), Pipeline, options)

    async def get_pipeline(self, repo_ref: str, pipeline_identifier: str) -> Pipeline:
        return await self._get(self._path(repo_ref, pipeline_identifier), Pipeline)

    async def update_pipeline(
        self, repo_ref: str, pipeline_identifier: str, options: UpdatePipelineOptions
    ) -> Pipeline:
        return await self._patch(self._path(repo_ref, pipeline_identifier), Pipeline, options)

    async def delete_pipeline(self, repo_ref: str, pipeline_identifier: str) -> None:
        await self._client.delete(self._path(repo_ref, pipeline_identifier))

    # Executions

    async def list_pipeline_executions(
        self,
        repo_ref: str,
        pipeline_identifier: str,
        options: ListPipelineExecutionsOptions | None = None,
    ) -> Page[PipelineExecution]:
        return await self._list(
            f"{self._path(repo_ref, pipeline_identifier)}/executions", PipelineExecution, params=options
        )

    async def create_execution(
        self, repo_ref: str, pipeline_identifier: str, branch: str | None = None
    ) -> PipelineExecution:
        """Start a run of the pipeline.

        Args:
            repo_ref: Repository path, e.g. ``space/repo``.
            pipeline_identifier: Pipeline identifier within the repository.
            branch: Branch to run against; the pipeline's default branch when ``None``.
        """
        return await self._post(
            f"{self._path(repo_ref, pipeline_identifier)}/executions",
            PipelineExecution,
            params={"branch": branch},
        )

    async def get_pipeline_execution(
        self, repo_ref: str, pipeline_identifier: str, execution_number: int
    ) -> PipelineExecution:
        return await self._get(self._execution_path(repo_ref, pipeline_identifier, execution_number), PipelineExecution)

    async def delete_execution(self, repo_ref: str, pipeline_identifier: str, execution_number: int) -> None:
        await self._client.delete(self._execution_path(repo_ref, pipeline_identifier, execution_number))

    async def cancel_pipeline_execution(
        self, repo_ref: str, pipeline_identifier: str, execution_number: int
    ) -> None:
        await self._client.post(f"{self._execution_path(repo_ref, pipeline_identifier, execution_number)}/cancel")

    async def retry_pipeline_execution(
        self, repo_ref: str, pipeline_identifier: str, execution_number: int
    ) -> PipelineExecution:
        return await self._post(
            f"{self._execution_path(repo_ref, pipeline_identifier, execution_number)}/retry", PipelineExecution
        )

    async def view_execution_logs(
        self,
        repo_ref: str,
        pipeline_identifier: str,
        execution_number: int,
        stage_number: int,
        step_number: int,
    ) -> list[LogLine]:
        path = self._execution_path(repo_ref, pipeline_identifier, execution_number)
        return await self._get_list(f"{path}/logs/{escape(stage_number)}/{escape(step_number)}", LogLine)

    # Triggers

    async def list_pipeline_triggers(
        self, repo_ref: str, pipeline_identifier: str, options: ListOptions | None = None
    ) -> Page[PipelineTrigger]:
        return await self._list(
            f"{self._path(repo_ref, pipeline_identifier)}/triggers", PipelineTrigger, params=options
        )

    async def create_pipeline_trigger(
        self, repo_ref: str, pipeline_identifier: str, options: CreatePipelineTriggerOptions
    ) -> PipelineTrigger:
        return await self._post(f"{self._path(repo_ref, pipeline_identifier)}/triggers", PipelineTrigger, options)

    async def get_pipeline_trigger(
        self, repo_ref: str, pipeline_identifier: str, trigger_identifier: str
    ) -> PipelineTrigger:
        return await self._get(self._trigger_path(repo_ref, pipeline_identifier, trigger_identifier), PipelineTrigger)

    async def update_pipeline_trigger(
        self,
        repo_ref: str,
        pipeline_identifier: str,
        trigger_identifier: str,
        options: UpdatePipelineTriggerOptions,
    ) -> PipelineTrigger:
        return await self._patch(
            self._trigger_path(repo_ref, pipeline_identifier, trigger_identifier), PipelineTrigger, options
        )

    async def delete_pipeline_trigger(
        self, repo_ref: str, pipeline_identifier: str, trigger_identifier: str
    ) -> None:
        await self._client.delete(self._trigger_path(repo_ref, pipeline_identifier, trigger_identifier))
