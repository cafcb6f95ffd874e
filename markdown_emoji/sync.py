# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

import shutil
from pathlib import Path

from loguru import logger

from markdown_emoji.loader import ALIASES_ASSET, EMOJI_ASSET

DATA_DIR = Path(__file__).resolve().parent / "data"
ASSETS = (EMOJI_ASSET, ALIASES_ASSET)


def display_path(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def sync_assets(workspace_root: Path, data_dir: Path = DATA_DIR) -> list[Path]:
    """Copy the shared emoji assets from <workspace_root>/assets into the data directory"""
    workspace_root = Path(workspace_root).resolve()
    data_dir = Path(data_dir).resolve()
    data_dir.mkdir(parents=True, exist_ok=True)

    synced = []
    for name in ASSETS:
        src = workspace_root / "assets" / name
        dest = data_dir / name
        if not src.is_file():
            logger.warning(f"Skip missing {src}")
            continue

        shutil.copyfile(src, dest)
        logger.info(
            f"Synced {display_path(src, workspace_root)} -> {display_path(dest, workspace_root)}"
        )
        synced.append(dest)

    return synced
