# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

from markdown_emoji.applier import (
    SHORTCODE_PATTERN,
    SKIP_TAGS,
    apply_emoji_shortcodes,
    emojify_html,
)
from markdown_emoji.loader import (
    load_default_alias_map,
    load_default_aliases_data,
    load_default_emoji_data,
    load_default_emoji_map,
)
from markdown_emoji.normalize import ensure_colon, normalize_aliases, normalize_emoji_data

__all__ = [
    "SHORTCODE_PATTERN",
    "SKIP_TAGS",
    "apply_emoji_shortcodes",
    "emojify_html",
    "ensure_colon",
    "load_default_alias_map",
    "load_default_aliases_data",
    "load_default_emoji_data",
    "load_default_emoji_map",
    "normalize_aliases",
    "normalize_emoji_data",
]
