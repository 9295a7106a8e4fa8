# -*- coding: utf-8 -*-
from dataclasses import dataclass, field
from typing import List, Union

from ..url_checker import LinkTarget


@dataclass
class Category:
    name: str


@dataclass(eq=False)
class TreeNode:
    """Node of a bookmark tree holding either a Category or a LinkTarget."""
    content: Union[Category, LinkTarget]
    children: List["TreeNode"] = field(default_factory=list)

    def add(self, content: Union[Category, LinkTarget]) -> "TreeNode":
        node = TreeNode(content)
        self.children.append(node)
        return node
