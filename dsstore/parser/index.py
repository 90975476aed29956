"""
Buddy-allocator index of a .DS_Store file.

The header points (twice) at the root block. That block holds the allocation
index, an array of packed addresses where the array position is the logical
block id, followed by a table of contents naming the store header block.
"""

import logging
from collections import namedtuple

from dsstore.config import BLOCK_SIZE, DSStoreFormat
from dsstore.errors import InconsistentHeader, InvalidEncoding, OutOfRange
from dsstore.parser.blocks import read_block, read_struct
from dsstore.parser.structure import dsstore_structure

RootDirectory = namedtuple('RootDirectory', ['name', 'offset'])


class AllocationEntry(object):
    """
    One packed allocation address.

    bits [31:5]  physical page index (offset in 32 byte units)
    bits  [4:0]  size class, the block spans 1 << size_class bytes
    """

    def __init__(self, value, block_size=BLOCK_SIZE):
        self.value = value
        self.block_size = block_size

    @property
    def page_index(self):
        return self.value >> 5

    @property
    def size_class(self):
        return self.value & 0x1F

    def physical_offset(self):
        # stored offsets do not count the 4 byte prefix in front of the header
        return (self.page_index << 5) + self.block_size

    def size(self):
        return 1 << self.size_class

    def __eq__(self, other):
        return isinstance(other, AllocationEntry) and self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f'AllocationEntry(offset=0x{self.physical_offset():x}, size=0x{self.size():x})'


def resolve(entry_index, block_size=BLOCK_SIZE):
    """Turn a packed allocation value into (physical offset, size). No buffer access."""
    entry = AllocationEntry(entry_index, block_size)
    return entry.physical_offset(), entry.size()


class IndexResolver(object):

    def __init__(self, buffer, store_format=None):
        self.buffer = buffer
        self.format = store_format or DSStoreFormat()
        self.allocation_index = []

    def locate_root(self):
        """
        Read both root offset fields, check they agree and load the allocation index.

        Returns (root_offset, allocation_index).
        """
        block_size = self.format.block_size

        root_offset = read_block(self.buffer, self.format.root_offset_location) + block_size
        root_offset_check = read_block(self.buffer, self.format.root_offset_check_location) + block_size

        if root_offset != root_offset_check:
            raise InconsistentHeader(f"Root block offsets do not match: 0x{root_offset:x} != 0x{root_offset_check:x}")

        entry_count = read_block(self.buffer, root_offset)
        logging.debug(f'Root block at 0x{root_offset:x} lists {entry_count} allocation entries')

        # the count is followed by one reserved block before the packed entries
        entries_offset = root_offset + 2 * block_size
        self.allocation_index = [
            read_block(self.buffer, entries_offset + block_size * idx)
            for idx in range(entry_count)
        ]

        return root_offset, self.allocation_index

    def lookup(self, logical_index, allocation_index=None):
        """Resolve a logical block id through the allocation index."""
        if allocation_index is None:
            allocation_index = self.allocation_index

        if logical_index >= len(allocation_index):
            raise OutOfRange(f"Block id {logical_index} is outside the allocation index ({len(allocation_index)} entries)")

        return resolve(allocation_index[logical_index], self.format.block_size)

    def locate_root_directory(self, root_offset, allocation_index):
        """
        Follow the table of contents to the first directory page.

        root block -> TOC entry -> store header block -> directory page
        """
        block_size = self.format.block_size

        content_offset = root_offset + ((block_size * self.format.index_padding) % root_offset) + 2 * block_size
        toc_entry = read_struct(self.buffer, content_offset + block_size, dsstore_structure.TocEntry)

        try:
            root_name = bytes(toc_entry.name).decode('utf-8')
        except UnicodeDecodeError:
            raise InvalidEncoding("Root node name contains illegal UTF-8 sequence")

        header_offset, _ = self.lookup(toc_entry.blockId, allocation_index)
        root_id = read_block(self.buffer, header_offset)
        page_offset, page_size = self.lookup(root_id, allocation_index)

        logging.debug(f'Root directory "{root_name}" page at 0x{page_offset:x} (0x{page_size:x} bytes)')
        return RootDirectory(root_name, page_offset)
