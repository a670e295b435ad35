from __future__ import annotations

import asyncio
import json

import pytest

from cashly.api import CashlyAPIError, CashlyAPISettings, CashlyProtocolError, CashlyTransport


def run_async(coro):
    return asyncio.run(coro)


class _FakeSend:
    def __init__(self, status: int, body: bytes) -> None:
        self.status = status
        self.body = body
        self.calls: list[tuple[str, str, bytes | None, dict[str, str]]] = []

    def __call__(self, method, url, payload, headers):
        self.calls.append((method, url, payload, headers))
        return self.status, self.body


def _envelope(**row) -> bytes:
    return json.dumps(row).encode("utf-8")


def test_get_unwraps_envelope_and_builds_query():
    send = _FakeSend(200, _envelope(success=True, data={"ok": 1}))
    transport = CashlyTransport(
        CashlyAPISettings(base_url="http://api.test/", token="tok"), send=send
    )

    out = run_async(
        transport.get("transactions", {"wallet_id": "7", "type": None, "category_id": ""})
    )

    assert out == {"ok": 1}
    method, url, payload, headers = send.calls[0]
    assert method == "GET"
    assert url == "http://api.test/api/transactions?wallet_id=7"
    assert payload is None
    assert headers["Authorization"] == "Bearer tok"


def test_post_serializes_json_body_without_token():
    send = _FakeSend(201, _envelope(success=True, data={"id": "b1"}))
    transport = CashlyTransport(send=send)

    run_async(transport.post("budgets", {"wallet_id": "w1", "limit": 100}))

    method, url, payload, headers = send.calls[0]
    assert method == "POST"
    assert url == "http://localhost:3001/api/budgets"
    assert json.loads(payload) == {"wallet_id": "w1", "limit": 100}
    assert "Authorization" not in headers


def test_error_envelope_raises_api_error():
    send = _FakeSend(
        404,
        _envelope(success=False, error={"code": "NOT_FOUND", "message": "Budget not found"}),
    )
    transport = CashlyTransport(send=send)

    with pytest.raises(CashlyAPIError, match="Budget not found") as info:
        run_async(transport.get("budgets/missing"))

    assert info.value.status == 404
    assert info.value.code == "NOT_FOUND"


def test_unsuccessful_envelope_with_ok_status_raises():
    send = _FakeSend(200, _envelope(success=False))
    transport = CashlyTransport(send=send)

    with pytest.raises(CashlyAPIError, match="failed with status 200"):
        run_async(transport.get("wallets"))


def test_non_json_body_raises_protocol_error():
    transport = CashlyTransport(send=_FakeSend(200, b"<html>"))

    with pytest.raises(CashlyProtocolError, match="Invalid JSON"):
        run_async(transport.get("wallets"))


def test_non_json_error_body_raises_status_error():
    transport = CashlyTransport(send=_FakeSend(502, b"Bad Gateway"))

    with pytest.raises(CashlyAPIError) as info:
        run_async(transport.get("wallets"))

    assert not isinstance(info.value, CashlyProtocolError)
    assert info.value.status == 502


def test_missing_envelope_raises_protocol_error():
    transport = CashlyTransport(send=_FakeSend(200, b"[1, 2]"))

    with pytest.raises(CashlyProtocolError, match="envelope"):
        run_async(transport.get("wallets"))


def test_request_bytes_returns_raw_download_and_reports_errors():
    ok = CashlyTransport(send=_FakeSend(200, b"id,title\n1,Rent\n"))
    assert run_async(ok.request_bytes("POST", "dashboard/export/transactions", body={})) == (
        b"id,title\n1,Rent\n"
    )

    failing = CashlyTransport(
        send=_FakeSend(400, _envelope(success=False, error={"message": "Bad format"}))
    )
    with pytest.raises(CashlyAPIError, match="Bad format"):
        run_async(failing.request_bytes("POST", "dashboard/export/transactions", body={}))


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("CASHLY_API_URL", "https://cashly.example")
    monkeypatch.setenv("CASHLY_API_TOKEN", "secret")
    monkeypatch.setenv("CASHLY_API_TIMEOUT_S", "5")

    settings = CashlyAPISettings.from_env()

    assert settings.base_url == "https://cashly.example"
    assert settings.token == "secret"
    assert settings.timeout_s == 5.0
