"""Tests for bot.py wiring."""

import json

import discord
import pytest

import bot
from conftest import make_config, make_message, make_raw


@pytest.fixture
def real_client():
    return discord.Client(intents=discord.Intents.default())


class TestCreateBot:

    def test_warns_about_unbound_commands(self, real_client, capsys):
        bot.create_bot(make_config(), real_client)
        out = capsys.readouterr().out
        assert "Command 'foo' is configured but has no handler." in out
        assert "'ping'" not in out

    def test_registers_events(self, real_client):
        bot.create_bot(make_config(), real_client)
        for event in ("on_message", "on_ready", "on_connect", "on_disconnect", "on_resumed"):
            assert hasattr(real_client, event)

    @pytest.mark.asyncio
    async def test_on_message_runs_bundled_handler(self, real_client):
        bot.create_bot(make_config(), real_client)
        message = make_message("!ping")

        await real_client.on_message(message)

        message.channel.send.assert_awaited_once_with("Pong!")


class TestMain:

    def test_bad_config_is_fatal(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(make_raw(sign="")), encoding="utf-8")
        monkeypatch.setattr(bot, "CONFIG_PATH", path)

        with pytest.raises(SystemExit) as info:
            bot.main()

        assert info.value.code == 1
        assert "'sign' and/or 'debug'" in capsys.readouterr().out

    def test_unreadable_config_is_fatal(self, tmp_path, monkeypatch, capsys):
        """A config.json that is not UTF-8 exits through fatal(), not a traceback."""
        path = tmp_path / "config.json"
        path.write_bytes(b'{"sign": "\xff"}')
        monkeypatch.setattr(bot, "CONFIG_PATH", path)

        with pytest.raises(SystemExit) as info:
            bot.main()

        assert info.value.code == 1
        out = capsys.readouterr().out
        assert "Failed to start." in out
        assert "[FATAL] Error: Failed to read" in out

    def test_failing_subprocess_is_fatal(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(make_raw(subprocesses=["does_not_exist"])), encoding="utf-8")
        monkeypatch.setattr(bot, "CONFIG_PATH", path)
        monkeypatch.setattr(bot, "DISCORD_TOKEN", "token")

        with pytest.raises(SystemExit):
            bot.main()

        assert "Failed to start subprocess 'does_not_exist'" in capsys.readouterr().out
