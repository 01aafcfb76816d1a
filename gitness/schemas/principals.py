from datetime import datetime

from gitness.schemas.common import ApiModel, ListOptions


class Principal(ApiModel):
    """A user or service account."""

    id: int | None = None
    type: str | None = None
    uid: str | None = None
    display_name: str | None = None
    email: str | None = None
    created: datetime | None = None
    updated: datetime | None = None


class PrincipalInfo(ApiModel):
    """The short principal form embedded in pull requests, reviews and activities."""

    id: int | None = None
    uid: str | None = None
    display_name: str | None = None
    email: str | None = None
    type: str | None = None


class ListPrincipalsOptions(ListOptions):
    type: str | None = None
