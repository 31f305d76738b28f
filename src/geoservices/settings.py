"""Request layer configuration."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(ENV_FILE, override=False)

WORLD_ROUTING_BASE = "https://route.arcgis.com/arcgis/rest/services/World"


class GeoservicesSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GEOSERVICES_", env_file=str(ENV_FILE), extra="ignore")

    request_timeout_s: float = 30.0
    user_agent: str = "geoservices-rest/0.1.0"
    referer: str | None = None

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ARCGIS_API_KEY", "GEOSERVICES_API_KEY"),
    )

    service_area_url: str = f"{WORLD_ROUTING_BASE}/ServiceAreas/NAServer/ServiceArea_World"
    closest_facility_url: str = f"{WORLD_ROUTING_BASE}/ClosestFacility/NAServer/ClosestFacility_World"
    route_url: str = f"{WORLD_ROUTING_BASE}/Route/NAServer/Route_World"

    log_level: str = "INFO"
    log_json: bool = True


@lru_cache(maxsize=1)
def get_settings() -> GeoservicesSettings:
    return GeoservicesSettings()
