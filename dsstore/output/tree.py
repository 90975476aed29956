"""Tree output mode - renders the decoded records with rich's tree view."""
from rich.console import Console
from rich.text import Text
from rich.tree import Tree


def build_rich_tree(root):
    tree = Tree(Text(root.name, style="bold cyan"), guide_style="dim")

    def attach(branch, node):
        for child in node.children:
            attach(branch.add(Text(child.name)), child)

    attach(tree, root)
    return tree


class TreeOutput:
    """Handles tree view output."""

    def __init__(self, root, console: Console):
        self.root = root
        self.console = console

    def process(self):
        self.console.print(build_rich_tree(self.root))
        self.console.print(f"[green]✓[/green] {len(self.root.children)} records decoded")
