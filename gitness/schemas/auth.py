from gitness.schemas.common import ApiModel, RequestOptions
from gitness.schemas.principals import Principal


class LoginRequest(RequestOptions):
    login_identifier: str | None = None
    password: str | None = None


class LoginResponse(ApiModel):
    access_token: str | None = None
    principal: Principal | None = None


class RegisterRequest(RequestOptions):
    uid: str | None = None
    email: str | None = None
    password: str | None = None
    display_name: str | None = None
