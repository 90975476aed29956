import logging
from rich.logging import RichHandler
from rich.console import Console

import argparse
from enum import Enum

from dsstore.config import DSStoreFormat, INDENT_WIDTH
from dsstore.errors import DSStoreError
from dsstore.parser import parse


class DSStore(object):
    OutputMode = Enum('OutputMode', ['Text', 'Tree', 'JSON'])

    def __init__(self, storefile, console=None, store_format=None):
        self.console = console or setup_logging()
        self.format = store_format or DSStoreFormat()

        self.storefile = storefile
        self.buffer = storefile.read()

        logging.info(f'File: {getattr(storefile, "name", "<buffer>")}')
        logging.info(f'Size: {len(self.buffer)} bytes')

        self.root = parse(self.buffer, self.format)

        logging.info(f'Root directory: {self.root.name}')
        logging.info(f'Record count: {len(self.root.children)}')

    def outputText(self, indent_width=None):
        """Print the tree as indented text."""
        from dsstore.output.text import TextOutput
        handler = TextOutput(self.root, self.console, indent_width or self.format.indent_width)
        handler.process()

    def outputTree(self):
        """Print the tree with rich's tree view."""
        from dsstore.output.tree import TreeOutput
        handler = TreeOutput(self.root, self.console)
        handler.process()

    def outputObjects(self):
        """Print the tree as JSON."""
        from dsstore.output.objects import ObjectsOutput
        handler = ObjectsOutput(self.root, self.console)
        handler.process()


def setup_logging(level=logging.INFO):
    console = Console()
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
        markup=True
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler]
    )

    return console


def main():

    parser = argparse.ArgumentParser(add_help=True, description='Decode the record tree of a .DS_Store file', formatter_class=argparse.RawDescriptionHelpFormatter)

    parser.add_argument('store', type=argparse.FileType('rb'), help="Path to the .DS_Store file.")
    parser.add_argument('-m', '--mode', required=False, help="The output mode to use. Text prints the indented listing, Tree renders a tree view and JSON dumps the decoded records.", choices=DSStore.OutputMode.__members__, default='Text')
    parser.add_argument('-i', '--indent', required=False, type=int, help="Spaces per depth level in Text mode. Defaults to 4.", default=INDENT_WIDTH)
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging.")

    args = parser.parse_args()

    console = setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    store_format = DSStoreFormat(indent_width=args.indent)

    with args.store as storefile:
        try:
            store = DSStore(storefile, console, store_format)
        except DSStoreError as e:
            logging.error(f"{e}. Aborting.")
            return 1

    outputmode = DSStore.OutputMode[args.mode]
    if outputmode == DSStore.OutputMode.Text:
        store.outputText()
    if outputmode == DSStore.OutputMode.Tree:
        store.outputTree()
    if outputmode == DSStore.OutputMode.JSON:
        store.outputObjects()

    return 0

if __name__ == '__main__':
    raise SystemExit(main())
