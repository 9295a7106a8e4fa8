import json
from datetime import datetime

from linkstate.bookmarks import Category, TreeNode, load_bookmarks, save_bookmarks
from linkstate.url_checker import CheckStatus, LinkTarget


def test_load_nested_tree(tmp_path):
    path = tmp_path / "bookmarks.json"
    path.write_text(json.dumps({
        "name": "Bookmarks",
        "children": [
            {"name": "Dev", "children": [{"url": "https://docs.test", "title": "docs"}]},
            {"url": "http://news.test", "title": "news", "status": "not_found",
             "status_message": "HTTP 404 Not Found", "last_checked": "2024-05-01T10:30:00"},
            {"url": "https://share.test", "is_directory": True},
        ],
    }))

    root = load_bookmarks(path)

    assert root.content.name == "Bookmarks"
    dev, news, share = root.children
    assert dev.content.name == "Dev"
    assert dev.children[0].content.url == "https://docs.test"
    assert news.content.status is CheckStatus.NOT_FOUND
    assert news.content.last_checked == datetime(2024, 5, 1, 10, 30)
    assert share.content.is_directory is True


def test_saved_statuses_survive_reload(tmp_path):
    root = TreeNode(Category("Bookmarks"))
    link = root.add(LinkTarget("http://old.test", title="old")).content
    link.status = CheckStatus.ACCESSIBLE
    link.status_message = "HTTP 200 OK (redirected 1x)"
    link.last_checked = datetime(2024, 5, 1, 10, 30)
    link.redirect_url = "http://new.test"
    root.add(LinkTarget("http://unchecked.test", title="unchecked"))

    path = tmp_path / "out" / "bookmarks.json"
    save_bookmarks(root, path)
    reloaded = load_bookmarks(path).children

    assert reloaded[0].content.redirect_url == "http://new.test"
    assert reloaded[0].content.status is CheckStatus.ACCESSIBLE
    assert reloaded[1].content.status is CheckStatus.UNKNOWN
    assert "status" not in json.loads(path.read_text())["children"][1]
