from gitness.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from gitness.schemas.principals import Principal
from gitness.services.base import BaseService


class AuthService(BaseService):
    async def login(self, request: LoginRequest) -> LoginResponse:
        """Exchange a login identifier and password for an access token.

        The returned token is not installed on this client; build a new
        ``Client`` with it to act as that user.
        """
        return await self._post("login", LoginResponse, request)

    async def logout(self) -> None:
        await self._client.post("logout")

    async def register(self, request: RegisterRequest) -> Principal:
        return await self._post("register", Principal, request)
