from linkstate.bookmarks import Category, TreeNode
from linkstate.url_checker import LinkTarget, collect_targets


def build_tree():
    root = TreeNode(Category("Root"))
    root.add(LinkTarget("http://first.test", title="first"))
    work = root.add(Category("Work"))
    work.add(LinkTarget("HTTPS://Second.test", title="second"))
    archive = work.add(Category("Archive"))
    archive.add(LinkTarget("https://third.test", title="third"))
    archive.add(LinkTarget("https://share.test", title="share", is_directory=True))
    work.add(LinkTarget("C:/Users/me/report.pdf", title="file"))
    root.add(LinkTarget("ftp://files.test", title="ftp"))
    root.add(LinkTarget("http://last.test", title="last"))
    return root


class TestCollectTargets:
    def test_depth_first_order(self):
        titles = [pair.target.title for pair in collect_targets(build_tree())]
        assert titles == ["first", "second", "third", "last"]

    def test_pairs_hold_the_owning_node(self):
        for target, node in collect_targets(build_tree()):
            assert node.content is target

    def test_empty_tree(self):
        assert collect_targets(TreeNode(Category("Empty"))) == []

    def test_plain_objects_are_walked(self):
        class Node:
            def __init__(self, content, children=()):
                self.content = content
                self.children = list(children)

        link = LinkTarget("http://plain.test")
        root = Node("root", [Node("folder", [Node(link)])])
        assert collect_targets(root)[0].target is link
