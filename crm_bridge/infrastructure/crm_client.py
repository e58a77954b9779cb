"""CRM Client: wraps httpx.AsyncClient with static Basic auth and error normalization.

Invariants:
    - One outbound HTTP call per request(); no retry, no caching
    - 2xx: parsed body returned unmodified (empty body -> {"success": True})
    - Non-2xx: CrmAPIError carrying the body's "message" field, else the transport text
    - Timeouts and connection failures: CrmAPIError carrying the transport text
    - timeout_seconds bounds the whole call, not just each connect/read/write phase
    - 404 on an entity in DEGRADE_ON_NOT_FOUND: fixed explanatory payload, not an error
    - Authorization header computed once at construction from the credentials

Design Decisions:
    - Wrapper over raw client: isolates error mapping from handlers (ADR: single responsibility)
    - 404 degradation checked after the generic error is built, keyed on the entity
      passed by the caller (ADR: policy exception stays explicit and entity-scoped)
    - Injectable transport: tests swap in httpx.MockTransport, no network needed
"""

import asyncio
import base64
import logging
import time
from typing import Any

import httpx

from crm_bridge.core.domain_types import DEGRADE_ON_NOT_FOUND, ENTITY_PATHS, Entity
from crm_bridge.core.errors import CrmAPIError
from crm_bridge.core.unavailable_endpoints import build_unavailable_payload

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
    return f"Basic {token}"


def _extract_message(error: httpx.HTTPStatusError) -> str:
    """Body "message" field when the CRM sent one, else httpx's own text."""
    try:
        body = error.response.json()
    except ValueError:
        return str(error)
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return str(error)


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return {"success": True}
    try:
        return response.json()
    except ValueError:
        return response.text


class CrmClient:
    """Authenticated client for the CRM REST API."""

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            headers={
                "Authorization": basic_auth_header(username, password),
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            transport=transport,
        )
        self._timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings, transport=None) -> "CrmClient":
        return cls(
            settings.crm_base_url,
            settings.crm_username,
            settings.crm_password,
            timeout_seconds=settings.crm_timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "CrmClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        method: str,
        entity: Entity,
        suffix: str = "",
        *,
        params: dict | None = None,
        json: dict | None = None,
    ) -> Any:
        """Issue one call to ENTITY_PATHS[entity] + suffix and normalize the outcome."""
        path = ENTITY_PATHS[entity] + suffix
        query = {k: v for k, v in (params or {}).items() if v is not None}
        started = time.perf_counter()
        try:
            async with asyncio.timeout(self._timeout_seconds):
                response = await self._http.request(
                    method, path, params=query or None, json=json,
                )
            self._log_response(method, path, response.status_code, started)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error = CrmAPIError(
                _extract_message(e), "http_status",
                status_code=e.response.status_code,
            )
            if error.status_code == 404 and entity in DEGRADE_ON_NOT_FOUND:
                logger.info(
                    f"{entity.value} endpoint unavailable, returning fallback payload",
                    extra={"method": method, "path": path, "status_code": 404},
                )
                return build_unavailable_payload()
            raise error from e
        except httpx.TimeoutException as e:
            logger.warning(
                f"CRM request timed out: {e}",
                extra={"method": method, "path": path},
            )
            raise CrmAPIError(str(e) or "Request timed out", "timeout") from e
        except TimeoutError as e:
            logger.warning(
                f"CRM request exceeded {self._timeout_seconds}s",
                extra={"method": method, "path": path},
            )
            raise CrmAPIError(
                f"Request timed out after {self._timeout_seconds}s", "timeout",
            ) from e
        except httpx.HTTPError as e:
            logger.warning(
                f"CRM request failed: {e}",
                extra={"method": method, "path": path},
            )
            raise CrmAPIError(str(e) or type(e).__name__, "connection") from e
        return _parse_body(response)

    async def get(self, entity: Entity, suffix: str = "", params: dict | None = None) -> Any:
        return await self.request("GET", entity, suffix, params=params)

    async def post(self, entity: Entity, suffix: str = "", body: dict | None = None) -> Any:
        return await self.request("POST", entity, suffix, json=body or {})

    async def put(self, entity: Entity, suffix: str = "", body: dict | None = None) -> Any:
        return await self.request("PUT", entity, suffix, json=body or {})

    async def delete(self, entity: Entity, suffix: str = "") -> Any:
        return await self.request("DELETE", entity, suffix)

    def _log_response(
        self, method: str, path: str, status_code: int, started: float,
    ) -> None:
        logger.info(
            "CRM request",
            extra={
                "method": method,
                "path": path,
                "status_code": status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
