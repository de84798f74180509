"""Read-only helpers over a BeautifulSoup document tree."""
from typing import Callable, Optional, Tuple
from bs4 import NavigableString, Tag
from bs4.element import PageElement, PreformattedString


def walk(tree: PageElement, visitor: Callable[[PageElement], None]) -> None:
    """Apply ``visitor`` to every node once, parent first, children in document order."""
    visitor(tree)
    if isinstance(tree, Tag):
        for node in tree.descendants:
            visitor(node)


def attr_value(value) -> str:
    # default tree builders split class and friends into lists
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return value


def find_attr(node: PageElement, predicate: Callable[[str, str], bool]) -> Optional[Tuple[str, str]]:
    if not isinstance(node, Tag):
        return None
    for key, value in node.attrs.items():
        value = attr_value(value)
        if predicate(key, value):
            return key, value
    return None


def get_attr(node: PageElement, key: str) -> Optional[str]:
    found = find_attr(node, lambda k, v: k == key)
    return found[1] if found else None


def attr_equals(node: PageElement, key: str, expected: str) -> bool:
    return find_attr(node, lambda k, v: k == key and v == expected) is not None


def is_element(node: Optional[PageElement], name: str) -> bool:
    return isinstance(node, Tag) and node.name == name


def is_text(node: Optional[PageElement]) -> bool:
    # comments, doctypes and CDATA are NavigableStrings too
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def first_child(node: Optional[PageElement]) -> Optional[PageElement]:
    if isinstance(node, Tag) and node.contents:
        return node.contents[0]
    return None
