"""The authenticated user's profile, keys, tokens, memberships and favorites."""

from gitness.pagination import Page
from gitness.schemas.users import (
    CreatePublicKeyOptions,
    CreateTokenOptions,
    ListPublicKeysOptions,
    ListTokensOptions,
    PersonalAccessToken,
    PublicKey,
    User,
    UserFavorite,
    UserMembership,
)
from gitness.services.base import BaseService, escape


class UsersService(BaseService):
    async def get_current_user(self) -> User:
        return await self._get("user", User)

    async def get_user(self, user_uid: str) -> User:
        return await self._get(f"users/{escape(user_uid)}", User)

    # SSH keys

    async def list_user_keys(self, options: ListPublicKeysOptions | None = None) -> Page[PublicKey]:
        return await self._list("user/keys", PublicKey, params=options)

    async def create_user_key(self, options: CreatePublicKeyOptions) -> PublicKey:
        return await self._post("user/keys", PublicKey, options)

    async def get_user_key(self, key_identifier: str) -> PublicKey:
        return await self._get(f"user/keys/{escape(key_identifier)}", PublicKey)

    async def delete_user_key(self, key_identifier: str) -> None:
        await self._client.delete(f"user/keys/{escape(key_identifier)}")

    # Personal access tokens

    async def list_user_tokens(self, options: ListTokensOptions | None = None) -> Page[PersonalAccessToken]:
        return await self._list("user/tokens", PersonalAccessToken, params=options)

    async def create_user_token(self, options: CreateTokenOptions) -> PersonalAccessToken:
        return await self._post("user/tokens", PersonalAccessToken, options)

    async def delete_user_token(self, token_identifier: str) -> None:
        await self._client.delete(f"user/tokens/{escape(token_identifier)}")

    # Memberships and favorites

    async def list_user_memberships(self) -> list[UserMembership]:
        return await self._get_list("user/memberships", UserMembership)

    async def list_user_favorites(self) -> list[UserFavorite]:
        return await self._get_list("user/favorite", UserFavorite)

    async def add_user_favorite(self, resource_id: int) -> UserFavorite:
        return await self._post(f"user/favorite/{escape(resource_id)}", UserFavorite)

    async def remove_user_favorite(self, resource_id: int) -> None:
        await self._client.delete(f"user/favorite/{escape(resource_id)}")
