# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

import sys
from pathlib import Path

import uvloop
from bs4 import BeautifulSoup
from dotenv import load_dotenv
from loguru import logger

# dotenv has to be loaded before the keychain reads the environment
load_dotenv()

from markdown_emoji import (  # noqa: E402
    apply_emoji_shortcodes,
    load_default_alias_map,
    load_default_emoji_map,
)
from markdown_emoji.keychain import Keychain  # noqa: E402
from markdown_emoji.log import setup_logging  # noqa: E402

USAGE = "usage: python main.py INPUT.html [OUTPUT.html]"


async def render(source: Path, target: Path | None):
    keychain = Keychain()
    emoji_map = await load_default_emoji_map(keychain.EMOJI_ASSET_BASE_URL)
    aliases = await load_default_alias_map(keychain.EMOJI_ASSET_BASE_URL)
    logger.info(f"Loaded {len(emoji_map)} emoji keys and {len(aliases)} alias keys")

    soup = BeautifulSoup(source.read_text(encoding="utf-8"), "lxml")
    apply_emoji_shortcodes(
        soup,
        emoji_map=emoji_map,
        aliases=aliases,
        skip_selectors=keychain.skip_selectors,
    )

    if target is None:
        sys.stdout.write(str(soup))
    else:
        target.write_text(str(soup), encoding="utf-8")
        logger.info(f"Wrote {target}")


def main():
    setup_logging("DEBUG" if "--debug" in sys.argv else "INFO")
    args = [arg for arg in sys.argv[1:] if arg != "--debug"]
    if not args or len(args) > 2:
        logger.error(USAGE)
        sys.exit(2)

    source = Path(args[0])
    target = Path(args[1]) if len(args) == 2 else None
    uvloop.run(render(source, target))


if __name__ == "__main__":
    main()
