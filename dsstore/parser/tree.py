"""
Directory page decoding and the top level parse() entry point.

A leaf page is laid out as

    [mode:4][count:4] then per record [name_length:4][UTF-16BE name][payload ...]

Record payloads are not length prefixed. The start of the next record is found
by scanning for the "vSrn" "long" terminator and stepping one block past it.
"""

import logging

from dsstore.config import DSStoreFormat
from dsstore.errors import OutOfRange, SignatureMismatch, UnsupportedPageMode
from dsstore.parser.blocks import confirm_signature, find_pattern, read_block
from dsstore.parser.index import IndexResolver


class Node(object):
    """A decoded name with its children in file order."""

    __slots__ = ('name', 'children')

    def __init__(self, name, children=()):
        self.name = name
        self.children = tuple(children)

    def to_dict(self):
        return {
            'name': self.name,
            'children': [child.to_dict() for child in self.children]
        }

    def __eq__(self, other):
        return isinstance(other, Node) and self.name == other.name and self.children == other.children

    def __repr__(self):
        return f'Node({self.name!r}, children={len(self.children)})'


class TreeBuilder(object):

    def __init__(self, buffer, store_format=None):
        self.buffer = buffer
        self.format = store_format or DSStoreFormat()

    def decode_page(self, offset):
        """
        Decode the records of one leaf page into childless Nodes.

        Only leaf pages are handled; an internal page (non-zero mode) is reported
        as UnsupportedPageMode. Records are decoded one level deep.
        """
        block_size = self.format.block_size

        mode = read_block(self.buffer, offset)
        if mode != 0:
            raise UnsupportedPageMode(f"Directory page at 0x{offset:x} is an internal page (mode 0x{mode:x}), only leaf pages are supported")

        record_count = read_block(self.buffer, offset + block_size)
        logging.debug(f'Leaf page at 0x{offset:x} holds {record_count} records')

        result = []
        for _ in range(record_count):
            record_size = read_block(self.buffer, offset + 2 * block_size)

            name_start = offset + 3 * block_size
            name_end = name_start + record_size * 2
            if name_end > len(self.buffer):
                raise OutOfRange(f"Record name at 0x{name_start:x} runs past the end of the buffer")

            # names are not guaranteed to be well formed, unpaired surrogates become U+FFFD
            name = bytes(self.buffer[name_start:name_end]).decode('utf-16-be', errors='replace')
            result.append(Node(name))

            terminator = find_pattern(self.buffer, self.format.record_terminator, offset)
            if terminator is None:
                logging.debug(f'No record terminator after 0x{offset:x}, stopping after {len(result)} records')
                return result

            offset = terminator + block_size

        return result

    def build(self, name, offset):
        return Node(name, self.decode_page(offset))


def parse(buffer, store_format=None):
    """
    Decode a whole .DS_Store buffer into its root Node.

    Raises a DSStoreError subclass on the first structural problem.
    """
    store_format = store_format or DSStoreFormat()

    if not confirm_signature(buffer, store_format):
        raise SignatureMismatch("Signature does not match a DS_Store file")

    resolver = IndexResolver(buffer, store_format)
    root_offset, allocation_index = resolver.locate_root()
    root_directory = resolver.locate_root_directory(root_offset, allocation_index)

    return TreeBuilder(buffer, store_format).build(root_directory.name, root_directory.offset)
