# -*- coding: utf-8 -*-
from typing import Any, List, NamedTuple, Optional

from .link_target import LinkTarget


class CollectedTarget(NamedTuple):
    target: LinkTarget
    node: Optional[Any] = None


def collect_targets(root: Any) -> List[CollectedTarget]:
    """
    Collect checkable web links below a tree node, depth first, in child order.

    Nodes expose ``content`` and ``children``. Nodes holding a LinkTarget are
    leaves; any other node is treated as a category and walked recursively.
    Directory entries and non HTTP/HTTPS links are skipped.

    :param root: Root node of the caller's link tree.
    :return: List of (target, node) pairs.
    """
    collected = []
    _collect(root, collected)
    return collected


def _collect(node: Any, collected: List[CollectedTarget]) -> None:
    for child in getattr(node, "children", None) or []:
        content = getattr(child, "content", None)
        if isinstance(content, LinkTarget):
            if not content.is_directory and content.is_web_url:
                collected.append(CollectedTarget(content, child))
        elif content is not None:
            _collect(child, collected)
