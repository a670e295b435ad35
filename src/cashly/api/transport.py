"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

HTTP transport for the Cashly REST API.
"""

from __future__ import annotations

import asyncio
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable, Mapping
from typing import Any

from ..coordination.keys import clean_params
from .errors import CashlyAPIError, CashlyProtocolError
from .settings import CashlyAPISettings

logger = logging.getLogger("cashly.api")


def path_segment(value: str) -> str:
    """Quote one id for use as a single URL path segment."""
    return urllib.parse.quote(str(value), safe="")


SendFn = Callable[[str, str, bytes | None, dict[str, str]], tuple[int, bytes]]


class CashlyTransport:
    """
    JSON transport that unwraps the ``{"success", "data", "error"}`` envelope.

    Blocking ``urllib`` I/O runs in a worker thread. Tests and embedders can
    pass ``send`` to replace the network hop; it receives
    ``(method, url, payload, headers)`` and returns ``(status, body)``.
    """

    def __init__(
        self,
        settings: CashlyAPISettings | None = None,
        *,
        send: SendFn | None = None,
    ) -> None:
        self.settings = settings or CashlyAPISettings()
        self._send = send or self.http_send

    def url(self, path: str, params: Mapping[str, Any] | None = None) -> str:
        base = self.settings.base_url.rstrip("/")
        url = f"{base}/api/{path.lstrip('/')}"
        query = {
            key: (str(value).lower() if isinstance(value, bool) else value)
            for key, value in clean_params(params).items()
        }
        if query:
            url = f"{url}?{urllib.parse.urlencode(query)}"
        return url

    def headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.settings.token:
            headers["Authorization"] = f"Bearer {self.settings.token}"
        return headers

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, body: Mapping[str, Any]) -> Any:
        return await self.request("POST", path, body=body)

    async def put(self, path: str, body: Mapping[str, Any]) -> Any:
        return await self.request("PUT", path, body=body)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the envelope's ``data`` member."""
        status, raw = await self._exchange(method, path, params=params, body=body)
        try:
            decoded = json.loads(raw.decode("utf-8"))
        except Exception as e:  # noqa: BLE001
            if status >= 400:
                raise CashlyAPIError(
                    f"{method} {path} failed with status {status}", status=status
                ) from e
            raise CashlyProtocolError(
                f"Invalid JSON response for {method} {path}", status=status
            ) from e

        if not isinstance(decoded, dict) or "success" not in decoded:
            raise CashlyProtocolError(
                f"Invalid response envelope for {method} {path}", status=status
            )

        if status >= 400 or not decoded.get("success"):
            err = decoded.get("error") if isinstance(decoded.get("error"), dict) else {}
            message = err.get("message") if isinstance(err.get("message"), str) else ""
            raise CashlyAPIError(
                message or f"{method} {path} failed with status {status}",
                status=status,
                code=err.get("code"),
            )
        return decoded.get("data")

    async def request_bytes(
        self,
        method: str,
        path: str,
        *,
        body: Mapping[str, Any] | None = None,
    ) -> bytes:
        """Send one request whose successful response is a file download."""
        status, raw = await self._exchange(method, path, body=body)
        if status < 400:
            return raw

        message = ""
        try:
            decoded = json.loads(raw.decode("utf-8"))
            err = decoded.get("error") if isinstance(decoded, dict) else None
            if isinstance(err, dict) and isinstance(err.get("message"), str):
                message = err["message"]
        except ValueError:
            message = ""
        raise CashlyAPIError(
            message or f"{method} {path} failed with status {status}",
            status=status,
        )

    async def _exchange(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> tuple[int, bytes]:
        url = self.url(path, params)
        payload = None if body is None else json.dumps(dict(body)).encode("utf-8")
        logger.debug("%s %s", method, url)
        return await asyncio.to_thread(self._send, method, url, payload, self.headers())

    def http_send(
        self,
        method: str,
        url: str,
        payload: bytes | None,
        headers: dict[str, str],
    ) -> tuple[int, bytes]:
        req = urllib.request.Request(url, data=payload, method=method, headers=headers)
        try:
            with urllib.request.urlopen(req, timeout=self.settings.timeout_s) as resp:  # noqa: S310
                return resp.status, resp.read()
        except urllib.error.HTTPError as e:
            try:
                body = e.read()
            except Exception:  # noqa: BLE001
                body = b""
            return e.code, body
        except urllib.error.URLError as e:
            raise CashlyAPIError(f"Network error calling {url}: {e.reason}") from e
