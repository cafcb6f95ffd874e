# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0

from typing import Callable, Iterator

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

# template contents are an inert fragment in a browser dom, never walked
INERT_TAGS = frozenset({"template"})


def is_text_node(node: PageElement) -> bool:
    # comments, cdata, doctypes and processing instructions are all PreformattedStrings
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_inert(tag: Tag) -> bool:
    return (tag.name or "").lower() in INERT_TAGS


def element_ancestors(node: PageElement) -> Iterator[Tag]:
    """Yield the node itself if it is an element, then every enclosing element"""
    current = node if isinstance(node, Tag) else node.parent
    while current is not None and not isinstance(current, BeautifulSoup):
        yield current
        current = current.parent


def iter_text_nodes(
    root: PageElement, reject: Callable[[Tag], bool]
) -> Iterator[NavigableString]:
    """
    Yield the text nodes under root in document order.

    Template contents and elements for which `reject` returns True are not descended
    into. If root or any of its enclosing elements is rejected nothing is yielded at all.
    """
    if not isinstance(root, Tag):
        return

    if any(is_inert(tag) or reject(tag) for tag in element_ancestors(root)):
        return

    stack = [iter(root.contents)]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            continue

        if isinstance(node, Tag):
            if not is_inert(node) and not reject(node):
                stack.append(iter(node.contents))
        elif is_text_node(node):
            yield node
