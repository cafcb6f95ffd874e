# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

import os

from loguru import logger


class Keychain:
    def __init__(self):
        self.EMOJI_ASSET_BASE_URL: str = ""
        self.EMOJI_WORKSPACE_ROOT: str = ""
        self.EMOJI_SKIP_SELECTORS: str = ""

        for name in self.__dict__:
            value = os.environ.get(name)
            if not value:
                logger.debug(f'No value set for env variable "{name}"')
                value = ""

            setattr(self, name, value)

    @property
    def skip_selectors(self) -> list[str]:
        return [s.strip() for s in self.EMOJI_SKIP_SELECTORS.split(",") if s.strip()]
