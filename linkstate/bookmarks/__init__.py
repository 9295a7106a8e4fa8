# -*- coding: utf-8 -*-
from .tree_node import TreeNode, Category
from .bookmark_file import load_bookmarks, save_bookmarks

__all__ = ["TreeNode", "Category", "load_bookmarks", "save_bookmarks"]
