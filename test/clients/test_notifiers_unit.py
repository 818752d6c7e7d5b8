"""Unit tests for notifiers."""

import subprocess
from unittest.mock import MagicMock, patch

import httpx
import pytest
import requests

from ralph_loop.clients.base import BaseNotifier, NullNotifier
from ralph_loop.clients.gateway import GatewayNotifier
from ralph_loop.clients.telegram import TelegramNotifier
from ralph_loop.clients.webhook import WebhookNotifier
from ralph_loop.exceptions import NotificationError


class ExplodingNotifier(BaseNotifier):
    name = "exploding"

    def deliver(self, message):
        raise RuntimeError("gateway on fire")


class TestBaseNotifier:
    def test_send_swallows_delivery_errors(self, caplog):
        ExplodingNotifier().send("ERROR: boom")

        assert "Notification via exploding failed: gateway on fire" in caplog.text

    def test_null_notifier_drops_messages(self):
        NullNotifier().send("DONE: ok")


class TestGatewayNotifier:
    @patch("ralph_loop.clients.gateway.subprocess.run")
    @patch("ralph_loop.clients.gateway.command_exists")
    def test_wakes_gateway(self, mock_exists, mock_run):
        mock_exists.return_value = True
        mock_run.return_value = subprocess.CompletedProcess([], 0, "", "")

        GatewayNotifier().deliver("DONE: Ralph loop finished successfully.")

        mock_run.assert_called_once_with(
            [
                "openclaw",
                "gateway",
                "wake",
                "--text",
                "DONE: Ralph loop finished successfully.",
                "--mode",
                "now",
            ],
            capture_output=True,
            text=True,
        )

    @patch("ralph_loop.clients.gateway.subprocess.run")
    @patch("ralph_loop.clients.gateway.command_exists")
    def test_skipped_when_cli_missing(self, mock_exists, mock_run):
        mock_exists.return_value = False

        GatewayNotifier().deliver("DONE: ok")

        mock_run.assert_not_called()

    @patch("ralph_loop.clients.gateway.subprocess.run")
    @patch("ralph_loop.clients.gateway.command_exists")
    def test_non_zero_exit_raises_on_deliver(self, mock_exists, mock_run):
        mock_exists.return_value = True
        mock_run.return_value = subprocess.CompletedProcess([], 2, "", "gateway down\n")

        with pytest.raises(NotificationError, match="exited with code 2: gateway down"):
            GatewayNotifier().deliver("ERROR: x")

    @patch("ralph_loop.clients.gateway.subprocess.run")
    @patch("ralph_loop.clients.gateway.command_exists")
    def test_send_never_raises(self, mock_exists, mock_run):
        mock_exists.return_value = True
        mock_run.side_effect = OSError("permission denied")

        GatewayNotifier().send("ERROR: x")


class TestWebhookNotifier:
    @patch("ralph_loop.clients.webhook.httpx.post")
    def test_posts_json_payload(self, mock_post):
        mock_post.return_value = MagicMock(status_code=200)

        WebhookNotifier("http://gateway.local/wake", timeout=3.0).deliver("PROGRESS: half")

        mock_post.assert_called_once_with(
            "http://gateway.local/wake",
            json={"text": "PROGRESS: half", "mode": "now"},
            timeout=3.0,
        )
        mock_post.return_value.raise_for_status.assert_called_once()

    @patch("ralph_loop.clients.webhook.httpx.post")
    def test_connection_error_raises_notification_error(self, mock_post):
        mock_post.side_effect = httpx.ConnectError("refused")

        with pytest.raises(NotificationError, match="Webhook delivery to http://x/wake failed"):
            WebhookNotifier("http://x/wake").deliver("ERROR: x")

    @patch("ralph_loop.clients.webhook.httpx.post")
    def test_send_swallows_http_status_error(self, mock_post):
        request = httpx.Request("POST", "http://x/wake")
        mock_post.return_value = httpx.Response(500, request=request)

        WebhookNotifier("http://x/wake").send("ERROR: x")


class TestTelegramNotifier:
    @patch("ralph_loop.clients.telegram.requests.post")
    def test_sends_message(self, mock_post):
        mock_post.return_value = MagicMock(text='{"ok":true}')
        mock_post.return_value.json.return_value = {"ok": True}

        TelegramNotifier("123:abc", "42", timeout=5.0).deliver("DONE: shipped")

        mock_post.assert_called_once_with(
            "https://api.telegram.org/bot123:abc/sendMessage",
            data={"chat_id": "42", "text": "DONE: shipped", "parse_mode": "Markdown"},
            timeout=5.0,
        )

    @patch("ralph_loop.clients.telegram.requests.post")
    def test_api_error_raises(self, mock_post):
        mock_post.return_value = MagicMock(text='{"ok":false,"description":"chat not found"}')
        mock_post.return_value.json.return_value = {"ok": False, "description": "chat not found"}

        with pytest.raises(NotificationError, match="chat not found"):
            TelegramNotifier("123:abc", "42").deliver("DONE: shipped")

    @patch("ralph_loop.clients.telegram.requests.post")
    def test_non_json_response_raises(self, mock_post):
        mock_post.return_value = MagicMock(text="<html>Bad Gateway</html>")
        mock_post.return_value.json.side_effect = ValueError("no json")

        with pytest.raises(NotificationError, match="Bad Gateway"):
            TelegramNotifier("123:abc", "42").deliver("DONE: shipped")

    @patch("ralph_loop.clients.telegram.requests.post")
    def test_network_error_does_not_leak_token(self, mock_post):
        mock_post.side_effect = requests.exceptions.ConnectionError(
            "https://api.telegram.org/botSECRET/sendMessage unreachable"
        )

        with pytest.raises(NotificationError) as exc_info:
            TelegramNotifier("SECRET", "42").deliver("DONE: shipped")

        assert "SECRET" not in str(exc_info.value)

    @patch("ralph_loop.clients.telegram.requests.post")
    def test_missing_token(self, mock_post, tmp_path):
        notifier = TelegramNotifier(None, "42", env_file=tmp_path / ".ralph.env")

        with pytest.raises(NotificationError, match="RALPH_TELEGRAM_BOT_TOKEN not set"):
            notifier.deliver("DONE: shipped")
        mock_post.assert_not_called()

    def test_missing_chat_id(self, tmp_path):
        notifier = TelegramNotifier("123:abc", None, env_file=tmp_path / ".ralph.env")

        with pytest.raises(NotificationError, match="RALPH_TELEGRAM_CHAT_ID not set"):
            notifier.deliver("DONE: shipped")


class TestTelegramFromEnv:
    def test_reads_environment(self, tmp_path):
        environ = {"RALPH_TELEGRAM_BOT_TOKEN": "tok", "RALPH_TELEGRAM_CHAT_ID": "7"}

        notifier = TelegramNotifier.from_env(tmp_path / "missing.env", environ=environ)

        assert notifier.bot_token == "tok"
        assert notifier.chat_id == "7"

    def test_falls_back_to_env_file(self, tmp_path):
        env_file = tmp_path / ".ralph.env"
        env_file.write_text(
            'RALPH_TELEGRAM_BOT_TOKEN="file-token"\nRALPH_TELEGRAM_CHAT_ID=99\n',
            encoding="utf-8",
        )

        notifier = TelegramNotifier.from_env(env_file, environ={})

        assert notifier.bot_token == "file-token"
        assert notifier.chat_id == "99"

    def test_env_file_ignored_when_token_set(self, tmp_path):
        env_file = tmp_path / ".ralph.env"
        env_file.write_text("RALPH_TELEGRAM_CHAT_ID=99\n", encoding="utf-8")

        notifier = TelegramNotifier.from_env(env_file, environ={"RALPH_TELEGRAM_BOT_TOKEN": "tok"})

        assert notifier.bot_token == "tok"
        assert notifier.chat_id is None

    def test_missing_env_file(self, tmp_path):
        notifier = TelegramNotifier.from_env(tmp_path / "nope.env", environ={})

        assert notifier.bot_token is None
        assert notifier.chat_id is None
