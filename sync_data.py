# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

from markdown_emoji.keychain import Keychain  # noqa: E402
from markdown_emoji.log import setup_logging  # noqa: E402
from markdown_emoji.sync import sync_assets  # noqa: E402


def main():
    setup_logging()
    if len(sys.argv) > 1:
        workspace_root = Path(sys.argv[1])
    else:
        workspace_root = Path(Keychain().EMOJI_WORKSPACE_ROOT or Path.cwd())

    try:
        sync_assets(workspace_root)
    except Exception:
        logger.exception("Syncing emoji data failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
