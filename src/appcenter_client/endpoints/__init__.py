"""Endpoint clients for the App Center API."""

from appcenter_client.endpoints.account import AccountClient
from appcenter_client.endpoints.apps import AppsClient
from appcenter_client.endpoints.codepush import CodePushClient

__all__ = [
    "AccountClient",
    "AppsClient",
    "CodePushClient",
]
