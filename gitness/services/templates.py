from gitness.pagination import Page
from gitness.schemas.common import ListOptions
from gitness.schemas.templates import CreateTemplateOptions, Template, UpdateTemplateOptions
from gitness.services.base import BaseService, escape


class TemplatesService(BaseService):
    """Pipeline templates stored in a space."""

    async def create_template(self, space_ref: str, options: CreateTemplateOptions) -> Template:
        return await self._post(f"spaces/{escape(space_ref)}/templates", Template, options)

    async def list_templates(self, space_ref: str, options: ListOptions | None = None) -> Page[Template]:
        return await self._list(f"spaces/{escape(space_ref)}/templates", Template, params=options)

    async def get_template(self, space_ref: str, template_identifier: str) -> Template:
        return await self._get(f"spaces/{escape(space_ref)}/templates/{escape(template_identifier)}", Template)

    async def update_template(
        self, space_ref: str, template_identifier: str, options: UpdateTemplateOptions
    ) -> Template:
        return await self._patch(
            f"spaces/{escape(space_ref)}/templates/{escape(template_identifier)}", Template, options
        )

    async def delete_template(self, space_ref: str, template_identifier: str) -> None:
        await self._client.delete(f"spaces/{escape(space_ref)}/templates/{escape(template_identifier)}")
