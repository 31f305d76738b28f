"""HTTP transport for geoservices REST endpoints.

Encodes parameters, attaches ``f=json`` and the token, issues a single
request and turns error envelopes into exceptions. No retries.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any, Literal

import httpx

from . import ServiceError, TransportError
from .auth import Authentication
from .encode import build_query_string, encode_params
from .logging import get_logger
from .settings import GeoservicesSettings, get_settings

logger = get_logger("transport")

HttpMethod = Literal["GET", "POST"]

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def prepare_params(
    url: str,
    params: Mapping[str, Any],
    authentication: Authentication | None = None,
) -> dict[str, str]:
    prepared = {"f": "json"}
    prepared.update(encode_params(params))
    if authentication is not None:
        prepared["token"] = authentication.get_token(url)
    return prepared


def _headers(settings: GeoservicesSettings) -> dict[str, str]:
    headers = {"User-Agent": settings.user_agent}
    if settings.referer:
        headers["Referer"] = settings.referer
    return headers


def _raise_for_error(data: Any) -> None:
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        error = data["error"]
        raise ServiceError(
            str(error.get("code", "UNKNOWN")),
            error.get("message") or "Service error",
            {"details": error.get("details") or []},
        )


def _issue(
    client: httpx.Client,
    url: str,
    method: HttpMethod,
    prepared: dict[str, str],
    files: Mapping[str, Any] | None,
    headers: dict[str, str],
) -> httpx.Response:
    if method == "GET":
        return client.get(f"{url}?{build_query_string(prepared)}", headers=headers)
    if files:
        return client.post(url, data=prepared, files=dict(files), headers=headers)
    return client.post(
        url,
        content=build_query_string(prepared).encode("utf-8"),
        headers={**headers, "Content-Type": FORM_CONTENT_TYPE},
    )


def send(
    url: str,
    method: HttpMethod,
    params: Mapping[str, Any],
    authentication: Authentication | None = None,
    *,
    files: Mapping[str, Any] | None = None,
    client: httpx.Client | None = None,
    settings: GeoservicesSettings | None = None,
) -> Any:
    """Send one request and return the decoded JSON payload.

    ``files`` values are handed to httpx as-is for a multipart body. When
    ``client`` is supplied the caller owns its lifetime.
    """
    settings = settings or get_settings()
    prepared = prepare_params(url, params, authentication)
    headers = _headers(settings)
    start = time.time()

    try:
        if client is not None:
            resp = _issue(client, url, method, prepared, files, headers)
        else:
            with httpx.Client(timeout=settings.request_timeout_s) as owned:
                resp = _issue(owned, url, method, prepared, files, headers)
    except httpx.RequestError as exc:
        latency_ms = int((time.time() - start) * 1000)
        logger.info(
            "rest_request_failed",
            extra={"extra": {"url": url, "method": method, "latency_ms": latency_ms, "error": str(exc)}},
        )
        raise TransportError("NETWORK_ERROR", str(exc), {"url": url}) from exc

    latency_ms = int((time.time() - start) * 1000)
    logger.info(
        "rest_request",
        extra={
            "extra": {
                "url": url,
                "method": method,
                "status_code": resp.status_code,
                "latency_ms": latency_ms,
            }
        },
    )

    try:
        data = resp.json()
    except ValueError as exc:
        if resp.status_code >= 400:
            raise TransportError(
                "HTTP_ERROR", f"Service responded with HTTP {resp.status_code}", {"url": url}
            ) from exc
        raise TransportError("BAD_RESPONSE", str(exc), {"url": url}) from exc

    _raise_for_error(data)
    if resp.status_code >= 400:
        raise TransportError("HTTP_ERROR", f"Service responded with HTTP {resp.status_code}", {"url": url})
    return data
