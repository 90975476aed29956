"""Text output mode - the plain indented listing."""
from rich.console import Console

from dsstore.config import INDENT_WIDTH


def render_text(root, indent_width=INDENT_WIDTH):
    """
    Root name first, then every descendant indented indent_width spaces per level.
    Nodes with children get a trailing colon.
    """
    lines = [root.name]

    def walk(node, depth):
        suffix = ':' if node.children else ''
        lines.append(f"{' ' * (indent_width * depth)}{node.name}{suffix}")
        for child in node.children:
            walk(child, depth + 1)

    for child in root.children:
        walk(child, 1)

    return '\n'.join(lines)


class TextOutput:
    """Prints the decoded tree as indented text."""

    def __init__(self, root, console: Console, indent_width=INDENT_WIDTH):
        self.root = root
        self.console = console
        self.indent_width = indent_width

    def process(self):
        # names are file names, never rich markup
        self.console.out(render_text(self.root, self.indent_width), highlight=False)
