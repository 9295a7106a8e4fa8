# -*- coding: utf-8 -*-
from .console import MyConsole
from .report import Report
from .url_checker import URLStateChecker, CheckerConfig, LinkTarget, CheckStatus
from .bookmarks import TreeNode, Category, load_bookmarks, save_bookmarks

__all__ = [
    "MyConsole", "Report", "URLStateChecker", "CheckerConfig", "LinkTarget", "CheckStatus",
    "TreeNode", "Category", "load_bookmarks", "save_bookmarks",
]
