# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

"""
Markdown emoji shortcodes → unicode, as a post-processor over rendered HTML.

Text inside code, pre, kbd, script and style is never touched. MathJax output
(MJX-* elements) and .math-block are skipped by default.
"""

import re
from typing import Callable, Optional

import soupsieve
from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag
from loguru import logger

from markdown_emoji.normalize import ensure_colon
from markdown_emoji.walker import iter_text_nodes

SKIP_TAGS = frozenset({"CODE", "PRE", "KBD", "SCRIPT", "STYLE"})
MATH_CLASS = "math-block"
MATH_TAG_PREFIX = "MJX-"

SHORTCODE_PATTERN = re.compile(r":[+\-\w]+:", re.IGNORECASE | re.ASCII)

SELECTOR_ERRORS = (soupsieve.SelectorSyntaxError, NotImplementedError)


def compile_skip_selectors(selectors) -> Optional[soupsieve.SoupSieve]:
    """
    Combine the selectors into a single OR-ed matcher, None if nothing can match.

    Blank and non-string entries are dropped before joining, so ["", ".x"] still
    skips .x. A selector soupsieve rejects (bad syntax, pseudo-elements, at-rules)
    disables selector skipping for the whole call.
    """
    if not isinstance(selectors, (list, tuple)):
        return None

    selectors = [s for s in selectors if isinstance(s, str) and s.strip()]
    if not selectors:
        return None

    try:
        return soupsieve.compile(",".join(selectors))
    except SELECTOR_ERRORS as e:
        logger.debug(f"Invalid skip selector, ignoring all of {selectors}: {e}")
        return None


def class_list(tag: Tag) -> list[str]:
    classes = tag.get("class") or []
    if isinstance(classes, str):
        return classes.split()
    return [c for c in classes if isinstance(c, str)]


def make_skip_rule(
    skip_math: bool = True, skip_selectors=None
) -> Callable[[Tag], bool]:
    matcher = compile_skip_selectors(skip_selectors)

    def matches_selector(tag: Tag) -> bool:
        if matcher is None:
            return False
        try:
            return matcher.match(tag)
        except SELECTOR_ERRORS:
            return False

    def should_skip(tag: Tag) -> bool:
        name = (tag.name or "").upper()
        if name in SKIP_TAGS:
            return True
        if skip_math and (MATH_CLASS in class_list(tag) or name.startswith(MATH_TAG_PREFIX)):
            return True
        return matches_selector(tag)

    return should_skip


def _lookup(mapping: dict, *keys: str) -> Optional[str]:
    for key in keys:
        value = mapping.get(key)
        if value and isinstance(value, str):
            return value
    return None


def resolve_shortcode(
    shortcode: str, emoji_map: dict[str, str], aliases: dict[str, str]
) -> str:
    key = ensure_colon(shortcode)
    canonical = _lookup(aliases, key, key[1:-1]) or shortcode
    canonical_key = ensure_colon(canonical)
    return (
        _lookup(emoji_map, canonical_key, canonical_key[1:-1], shortcode, shortcode[1:-1])
        or shortcode
    )


def apply_emoji_shortcodes(
    root: Optional[PageElement],
    emoji_map: Optional[dict[str, str]] = None,
    aliases: Optional[dict[str, str]] = None,
    skip_math: bool = True,
    skip_selectors: Optional[list[str]] = None,
):
    """
    Replace :shortcode: occurrences in the text nodes under root, in place.

    :param root: tag (or whole soup) whose descendant text nodes will be scanned
    :param emoji_map: shortcode to emoji, keys with or without colons
    :param aliases: alias to canonical shortcode, resolved one hop only
    :param skip_math: skip MathJax output and .math-block
    :param skip_selectors: extra css selectors, matching elements are skipped
    """
    if not root or not emoji_map or not isinstance(emoji_map, dict):
        return

    if not isinstance(aliases, dict):
        aliases = {}
    should_skip = make_skip_rule(skip_math, skip_selectors)

    # collect first, replacing nodes while walking would disturb the traversal
    nodes = [
        node for node in iter_text_nodes(root, should_skip) if SHORTCODE_PATTERN.search(node)
    ]

    for node in nodes:
        text = SHORTCODE_PATTERN.sub(
            lambda m: resolve_shortcode(m.group(0), emoji_map, aliases), node
        )
        if text != node:
            node.replace_with(type(node)(text))


def emojify_html(
    markup: str,
    emoji_map: dict[str, str],
    aliases: Optional[dict[str, str]] = None,
    skip_math: bool = True,
    skip_selectors: Optional[list[str]] = None,
    features: str = "html.parser",
) -> str:
    """Parse the markup, apply shortcodes over all of it and serialize it back"""
    soup = BeautifulSoup(markup, features)
    apply_emoji_shortcodes(
        soup,
        emoji_map=emoji_map,
        aliases=aliases,
        skip_math=skip_math,
        skip_selectors=skip_selectors,
    )
    return str(soup)
