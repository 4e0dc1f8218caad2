"""Tests for the ngl-relay command line"""
import json
import logging
import re
from unittest.mock import patch

import httpx
from click.testing import CliRunner

from ngl_relay.cli import cli


def test_device_id_command():
    runner = CliRunner()
    result = runner.invoke(cli, ["device-id"])

    assert result.exit_code == 0
    assert re.fullmatch(r"[a-z0-9]{8}-[a-z0-9]{4}-[a-z0-9]{4}-[a-z0-9]{4}-[a-z0-9]{12}", result.output.strip())


def test_send_success(make_handler):
    handler = make_handler(lambda request: httpx.Response(200, text="ok"))
    runner = CliRunner()

    with patch("ngl_relay.cli.RelayHandler", return_value=handler):
        result = runner.invoke(cli, ["send", "--url", "https://ngl.link/alice", "--message", "hi"])

    assert result.exit_code == 0
    assert '"username": "alice"' in result.output
    assert "Delivered to alice" in result.output


def test_send_failure_exits_nonzero(make_handler):
    handler = make_handler(lambda request: httpx.Response(404, text="not found"))
    runner = CliRunner()

    with patch("ngl_relay.cli.RelayHandler", return_value=handler):
        result = runner.invoke(cli, ["send", "--url", "ghost", "--message", "hi"])

    assert result.exit_code == 1
    body = json.loads(result.output[:result.output.index("}") + 1])
    assert body == {
        "status": "error",
        "message": "Gagal mengirim pesan ke NGL",
        "details": "not found",
    }


def test_send_requires_options():
    runner = CliRunner()
    result = runner.invoke(cli, ["send", "--url", "alice"])

    assert result.exit_code == 2
    assert "--message" in result.output


def test_serve_uses_settings(monkeypatch):
    monkeypatch.setenv("RELAY_PORT", "9123")
    runner = CliRunner()

    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(cli, ["serve", "--host", "127.0.0.1"])

    assert result.exit_code == 0
    mock_run.assert_called_once()
    args, kwargs = mock_run.call_args
    assert args[0] == "ngl_relay.app:app"
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9123


def test_serve_logs_settings(monkeypatch, caplog):
    monkeypatch.setenv("RELAY_LOCALE", "en")
    runner = CliRunner()

    with patch("uvicorn.run"), caplog.at_level(logging.INFO, logger="ngl_relay.cli"):
        result = runner.invoke(cli, ["serve"])

    assert result.exit_code == 0
    assert "Relay settings:" in caplog.text
    assert "'locale': 'en'" in caplog.text
