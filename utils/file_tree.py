"""
Tree view of changed file paths.

A flat list such as ['src/app/main.py', 'src/app/util.py', 'README.md'] is
turned into a directory tree, directory chains with a single subdirectory are
merged into one segment ('src/app'), and the result is drawn with box-drawing
connectors, gray directory names and a colored icon per file
(icons omitted here):

    ├──  README.md
    └──  src/app
         ├──  main.py
         └──  util.py
"""

from dataclasses import dataclass, field

from utils.colors import GRAY, WHITE, hex_to_color, paint
from utils.icons import icon_for_file

BRANCH = "├── "
LAST = "└── "
ROOT_INDENT = "    "
CHILD_INDENT = "    "


@dataclass
class TreeNode:
    is_file: bool = False
    children: dict = field(default_factory=dict)

    def sorted_children(self):
        return sorted(self.children.items())


def build_tree(paths):
    """Build a directory tree from '/'-separated file paths."""
    root = TreeNode()
    for path in paths:
        parts = path.split('/')
        current = root
        for i, part in enumerate(parts):
            is_last = i == len(parts) - 1
            child = current.children.get(part)
            if child is None:
                child = current.children[part] = TreeNode(is_file=is_last)
            elif not is_last:
                # a path nested under an earlier file turns that file into a directory
                child.is_file = False
            current = child
    return root


def _collapse_child(name, node):
    if node.is_file:
        return name, TreeNode(is_file=True)

    children = dict(_collapse_child(n, c) for n, c in node.children.items())
    node = TreeNode(is_file=False, children=children)
    while len(node.children) == 1:
        child_name, child = next(iter(node.children.items()))
        if child.is_file:
            break
        name = f"{name}/{child_name}"
        node = child
    return name, node


def collapse_chains(node):
    """
    Return a copy of the tree with single-subdirectory chains merged.

    Children are collapsed before their parent is examined, so 'a/b/c/f.txt'
    ends up as one 'a/b/c' directory holding 'f.txt'. A directory whose only
    child is a file is left alone. The root itself is never renamed.
    """
    if node.is_file:
        return TreeNode(is_file=True)
    children = dict(_collapse_child(name, child) for name, child in node.children.items())
    return TreeNode(is_file=False, children=children)


def _file_label(name, theme):
    glyph, hex_color = icon_for_file(name, theme)
    directory, slash, filename = name.rpartition('/')
    label = paint(f"{directory}{slash}", GRAY) if slash else ""
    label += paint(filename, WHITE)
    return f"{label} {paint(glyph, hex_to_color(hex_color))}"


def render_tree(node, theme='dark', prefix=""):
    """Render a tree as pre-colored lines, depth first in name order."""
    lines = []
    current_prefix = prefix or ROOT_INDENT
    children = node.sorted_children()

    for i, (name, child) in enumerate(children):
        is_last = i == len(children) - 1
        connector = paint(LAST if is_last else BRANCH, GRAY)

        if child.is_file:
            label = _file_label(name, theme)
        else:
            label = paint(name, GRAY)
        lines.append(f"{current_prefix}{connector} {label}")

        if child.children:
            extension = " " if is_last else paint("│", GRAY)
            lines.extend(render_tree(child, theme, f"{current_prefix}{extension}{CHILD_INDENT}"))

    return lines


def format_file_tree(files, theme='dark'):
    """Build, collapse and render a file list into one printable string."""
    if not files:
        return ""
    tree = collapse_chains(build_tree(files))
    return "\n".join(render_tree(tree, theme))
