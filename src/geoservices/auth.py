"""Authentication capabilities consumed by the transport.

Token acquisition is not handled here: an authentication object only has to
hand back a token for the URL being requested.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .settings import GeoservicesSettings, get_settings

ARCGIS_ONLINE_PORTAL = "https://www.arcgis.com/sharing/rest"


@runtime_checkable
class Authentication(Protocol):
    portal: str

    def get_token(self, url: str) -> str: ...


@dataclass(frozen=True)
class ApiKey:
    """Static API key; the same token is sent to every URL."""

    key: str
    portal: str = ARCGIS_ONLINE_PORTAL

    def get_token(self, url: str) -> str:
        return self.key


def default_authentication(settings: GeoservicesSettings | None = None) -> ApiKey | None:
    settings = settings or get_settings()
    if not settings.api_key:
        return None
    return ApiKey(settings.api_key)
