"""
Fixed layout constants of the .DS_Store container.

Every numeric literal of the on-disk format lives here. Components receive a
single DSStoreFormat instance instead of reaching for the literals directly.
"""

# 00 00 00 01 42 75 64 31 -> uint32 1 followed by ASCII "Bud1"
FILE_SIGNATURE = b'\x00\x00\x00\x01Bud1'

# 76 53 72 6E | 6C 6F 6E 67 | 00 00 00 01 -> "vSrn" record type, "long" data type, value 1
# Only ever searched for, never written.
RECORD_TERMINATOR = b'vSrnlong\x00\x00\x00\x01'

# Every numeric field is a big-endian uint32
BLOCK_SIZE = 0x04

# uint32 at 0x08 and its redundant copy at 0x10: root block offset minus one block
ROOT_OFFSET_LOCATION = 0x08
ROOT_OFFSET_CHECK_LOCATION = 0x10

# The allocation index is padded to 256 entries before the table of contents
INDEX_PADDING = 0x100

# Spaces per depth level in the text rendering
INDENT_WIDTH = 4


class DSStoreFormat(object):
    """Bundle of the format constants, built once and handed to every component."""

    def __init__(self, file_signature=FILE_SIGNATURE, record_terminator=RECORD_TERMINATOR,
                 block_size=BLOCK_SIZE, root_offset_location=ROOT_OFFSET_LOCATION,
                 root_offset_check_location=ROOT_OFFSET_CHECK_LOCATION,
                 index_padding=INDEX_PADDING, indent_width=INDENT_WIDTH):
        self.file_signature = bytes(file_signature)
        self.record_terminator = bytes(record_terminator)
        self.block_size = block_size
        self.root_offset_location = root_offset_location
        self.root_offset_check_location = root_offset_check_location
        self.index_padding = index_padding
        self.indent_width = indent_width

    def __repr__(self):
        return (f'DSStoreFormat(signature={self.file_signature!r}, '
                f'terminator={self.record_terminator!r}, block_size={self.block_size})')
