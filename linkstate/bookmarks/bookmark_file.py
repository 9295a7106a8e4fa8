# -*- coding: utf-8 -*-
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Union

from ..url_checker import CheckStatus, LinkTarget
from .tree_node import Category, TreeNode


def load_bookmarks(path: Union[str, Path]) -> TreeNode:
    """
    Load a bookmark tree from a JSON file.

    Categories are objects with ``name`` and ``children``; links are objects
    with ``url`` and optional ``title``, ``is_directory`` and stored status fields.

    :param path: Path to the JSON file.
    :return: Root TreeNode.
    :raises FileNotFoundError: If the file does not exist.
    :raises json.JSONDecodeError: If the file is not valid JSON.
    """
    with open(path, "r", encoding="utf-8") as f:
        return _node_from_dict(json.load(f))


def save_bookmarks(root: TreeNode, path: Union[str, Path]) -> None:
    """
    Save a bookmark tree, including link statuses, to a JSON file.

    :param root: Root TreeNode.
    :param path: Path to the JSON file.
    """
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(_node_to_dict(root), f, indent=2, ensure_ascii=False)


def _node_from_dict(data: Dict[str, Any]) -> TreeNode:
    if "url" in data:
        last_checked = data.get("last_checked")
        return TreeNode(LinkTarget(
            url=data["url"],
            title=data.get("title", ""),
            is_directory=data.get("is_directory", False),
            status=CheckStatus(data.get("status", CheckStatus.UNKNOWN.value)),
            status_message=data.get("status_message", ""),
            last_checked=datetime.fromisoformat(last_checked) if last_checked else None,
            redirect_url=data.get("redirect_url"),
        ))

    return TreeNode(
        Category(name=data.get("name", "")),
        children=[_node_from_dict(child) for child in data.get("children", [])]
    )


def _node_to_dict(node: TreeNode) -> Dict[str, Any]:
    content = node.content
    if isinstance(content, LinkTarget):
        data = {"url": content.url, "title": content.title}
        if content.is_directory:
            data["is_directory"] = True
        if content.status is not CheckStatus.UNKNOWN:
            data["status"] = content.status.value
            data["status_message"] = content.status_message
        if content.last_checked:
            data["last_checked"] = content.last_checked.isoformat(timespec="seconds")
        if content.redirect_url:
            data["redirect_url"] = content.redirect_url
        return data

    return {"name": content.name, "children": [_node_to_dict(child) for child in node.children]}
