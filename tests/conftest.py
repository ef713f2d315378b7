"""Shared fixtures and fakes for Discord objects."""

import copy
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from config import BotConfig

BOT_ID = 1000
USER_ID = 42
MASTER_ID = 7

RAW_CONFIG = {
    "sign": "!",
    "debug": False,
    "masters": [str(MASTER_ID)],
    "commands": [
        {"command": "ping", "description": "Pong.", "aliases": ["pong"], "args": [[]]},
        {"command": "foo", "description": "Foo.", "args": [["a"], ["a", "b"]]},
        {"command": "say", "description": "Say.", "aliases": ["echo"], "args": []},
        {"command": "help", "description": "Help.", "aliases": ["h"], "args": [[], ["command"]]},
    ],
    "subprocesses": [],
    "reacts": {"wave": ":wave:", "both": "react-wins"},
    "gifs": {"dance": "https://example.com/dance.gif", "both": "https://example.com/both.gif"},
}


def make_raw(**overrides) -> dict:
    raw = copy.deepcopy(RAW_CONFIG)
    raw.update(overrides)
    return raw


def make_config(**overrides) -> BotConfig:
    return BotConfig.from_dict(make_raw(**overrides))


def make_channel(*, direct: bool = False, channel_id: int = 555, name: str = "general"):
    channel = MagicMock(spec=discord.DMChannel if direct else discord.TextChannel)
    channel.id = channel_id
    channel.name = name
    channel.send = AsyncMock()
    return channel


def make_message(
    text: str,
    *,
    direct: bool = False,
    author_id: int = USER_ID,
    msg_type=discord.MessageType.default,
    channel=None,
):
    message = MagicMock(spec=discord.Message)
    message.content = text
    message.type = msg_type
    message.channel = channel or make_channel(direct=direct)
    message.author = MagicMock()
    message.author.id = author_id
    message.author.name = "tester"
    message.created_at = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    message.delete = AsyncMock()
    return message


def make_client(user_id: int = BOT_ID):
    client = MagicMock(spec=discord.Client)
    client.user = MagicMock()
    client.user.id = user_id
    return client


@pytest.fixture
def config() -> BotConfig:
    return make_config()


@pytest.fixture
def client():
    return make_client()
