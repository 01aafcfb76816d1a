"""Async client for the Gitness REST API."""

from gitness.client import Client, ErrorResponse, GitnessClientError, Response
from gitness.config.config import Settings
from gitness.log import configure_logging
from gitness.pagination import Page, paginate
from gitness.schemas.common import ListOptions

__all__ = [
    "Client",
    "ErrorResponse",
    "GitnessClientError",
    "ListOptions",
    "Page",
    "Response",
    "Settings",
    "configure_logging",
    "paginate",
]
