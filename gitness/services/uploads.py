from gitness.schemas.uploads import CreateUploadRequest, Upload
from gitness.services.base import BaseService, escape


class UploadService(BaseService):
    """Attachment metadata for a repository (images pasted into descriptions)."""

    async def create_upload(self, repo_ref: str, file_name: str, file_size: int) -> Upload:
        request = CreateUploadRequest(file_name=file_name, file_size=file_size)
        return await self._post(f"repos/{escape(repo_ref)}/uploads", Upload, request)

    async def get_upload(self, repo_ref: str, file_ref: str) -> Upload:
        return await self._get(f"repos/{escape(repo_ref)}/uploads/{escape(file_ref)}", Upload)
