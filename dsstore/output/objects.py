"""JSON output mode - dumps the decoded tree as a single JSON document."""
import json

from rich.console import Console


class ObjectsOutput:
    """Handles JSON output processing."""

    def __init__(self, root, console: Console):
        self.root = root
        self.console = console

    def encode(self):
        return json.dumps(self.root.to_dict(), indent=None, ensure_ascii=False)

    def process(self):
        self.console.print_json(self.encode())
