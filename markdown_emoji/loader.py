# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

import asyncio
from importlib import resources
from typing import Any, Optional

import aiohttp
import orjson
from loguru import logger
from yarl import URL

from markdown_emoji import exceptions
from markdown_emoji.keychain import Keychain
from markdown_emoji.normalize import normalize_aliases, normalize_emoji_data

EMOJI_ASSET = "emoji-unicodes.json"
ALIASES_ASSET = "emoji-aliases.json"

LOAD_ERRORS = (
    exceptions.AssetError,
    aiohttp.ClientError,
    asyncio.TimeoutError,
    OSError,
    ValueError,
)


def read_bundled_asset(name: str) -> Any:
    """Read and parse a json asset shipped in the package data directory"""
    resource = resources.files("markdown_emoji") / "data" / name
    if not resource.is_file():
        raise exceptions.AssetNotFound(name)
    return orjson.loads(resource.read_bytes())


async def fetch_asset(name: str, base_url: Optional[str] = None) -> Any:
    """Fetch a json asset relative to the configured asset base url"""
    base_url = base_url or Keychain().EMOJI_ASSET_BASE_URL
    if not base_url:
        raise exceptions.AssetNotFound(name)

    url = URL(base_url).join(URL(name))
    async with aiohttp.ClientSession() as session:
        async with session.get(url) as response:
            if not 200 <= response.status < 300:
                raise exceptions.AssetFetchError(response.status, str(url))
            return orjson.loads(await response.read())


async def load_asset(name: str, base_url: Optional[str] = None) -> Any:
    """Bundled file first, then the network. Never raises, returns {} if neither works"""
    try:
        return read_bundled_asset(name)
    except LOAD_ERRORS as e:
        logger.debug(f"Could not read bundled {name}: {e}")

    try:
        return await fetch_asset(name, base_url)
    except LOAD_ERRORS as e:
        logger.warning(f"Could not load {name}, falling back to empty data: {e}")

    return {}


async def load_default_emoji_data(base_url: Optional[str] = None) -> Any:
    return await load_asset(EMOJI_ASSET, base_url)


async def load_default_aliases_data(base_url: Optional[str] = None) -> Any:
    return await load_asset(ALIASES_ASSET, base_url)


async def load_default_emoji_map(base_url: Optional[str] = None) -> dict[str, str]:
    return normalize_emoji_data(await load_default_emoji_data(base_url))


async def load_default_alias_map(base_url: Optional[str] = None) -> dict[str, str]:
    return normalize_aliases(await load_default_aliases_data(base_url))
