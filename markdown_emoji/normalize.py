# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

"""
Flatten the supported emoji and alias source formats into lookup tables.

Emoji data can be given as
    {":smile:": {"unicode": "1f604", "unicode_alt": "1f604"}, ...}
    {"smile": "😄", ...}
    [{"shortcode": "smile", "emoji": "😄"}, ...]

Aliases can be given as
    {":a:": ":b:", ...}
    [{"alias": ":a:", "to": ":b:"}, ...]
"""

from typing import Any

from loguru import logger


def ensure_colon(shortcode: str) -> str:
    if not shortcode:
        return shortcode
    if len(shortcode) > 1 and shortcode[0] == ":" and shortcode[-1] == ":":
        return shortcode
    return f":{shortcode.strip(':')}:"


def unicode_seq_to_char(sequence: str) -> str:
    """Decode a hyphen separated code point sequence such as "1f1fa-1f1f8" """
    return "".join(chr(int(codepoint, 16)) for codepoint in sequence.split("-"))


def add_mapping(mapping: dict[str, str], key: str, value: str):
    with_colon = ensure_colon(key)
    mapping[with_colon] = value
    mapping[with_colon[1:-1]] = value


def add_alias_mapping(mapping: dict[str, str], alias: str, target: str):
    alias_key = ensure_colon(alias)
    target_key = ensure_colon(target)
    mapping[alias_key] = target_key
    mapping[alias_key[1:-1]] = target_key


def _looks_like_codepoints(data: dict) -> bool:
    values = list(data.values())
    return bool(values) and isinstance(values[0], dict) and (
        "unicode" in values[0] or "unicode_alt" in values[0]
    )


def normalize_emoji_data(data: Any) -> dict[str, str]:
    """Normalize any supported emoji source into {":name:": "😄", "name": "😄"}"""
    out: dict[str, str] = {}
    if not data:
        return out

    if isinstance(data, (list, tuple)):
        for item in data:
            if not isinstance(item, dict):
                continue
            shortcode = item.get("shortcode")
            emoji = item.get("emoji")
            if isinstance(shortcode, str) and isinstance(emoji, str):
                add_mapping(out, shortcode, emoji)
        return out

    if not isinstance(data, dict):
        logger.debug(f"Ignoring emoji data of type {type(data).__name__}")
        return out

    if _looks_like_codepoints(data):
        for key, value in data.items():
            if not isinstance(key, str) or not isinstance(value, dict):
                continue
            raw = value.get("unicode_alt") or value.get("unicode")
            if not isinstance(raw, str):
                continue
            try:
                add_mapping(out, key, unicode_seq_to_char(raw))
            except (ValueError, OverflowError):
                logger.debug(f'Skipping "{key}", cannot decode code points "{raw}"')
        return out

    for key, value in data.items():
        if isinstance(key, str) and isinstance(value, str):
            add_mapping(out, key, value)

    return out


def normalize_aliases(data: Any) -> dict[str, str]:
    """Normalize alias sources into {":alias:": ":canonical:", "alias": ":canonical:"}"""
    out: dict[str, str] = {}
    if not data:
        return out

    if isinstance(data, (list, tuple)):
        for item in data:
            if not isinstance(item, dict):
                continue
            alias = item.get("alias")
            target = item.get("to")
            if isinstance(alias, str) and isinstance(target, str):
                add_alias_mapping(out, alias, target)
        return out

    if isinstance(data, dict):
        for alias, target in data.items():
            if isinstance(alias, str) and isinstance(target, str):
                add_alias_mapping(out, alias, target)

    return out
