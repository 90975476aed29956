"""
Primitive readers shared by the index resolver and the tree builder.

Every numeric field of the format is a big-endian uint32 ("block"); the
readers here bounds-check before handing bytes to the cstruct types.
"""

import logging

from dsstore.config import BLOCK_SIZE
from dsstore.errors import OutOfRange
from dsstore.parser.structure import dsstore_structure


def confirm_signature(buffer, store_format):
    """
    Check that the buffer starts with the fixed file signature.

    Returns False (and logs why) on a short buffer or on the first mismatching byte.
    """
    signature = store_format.file_signature

    if len(buffer) < len(signature):
        logging.warning("Input file is shorter than the file signature")
        return False

    for idx, (expected, actual) in enumerate(zip(signature, buffer)):
        if expected != actual:
            logging.warning(f"Failure during signature check: Expected byte 0x{expected:x}, got 0x{actual:x} at offset {idx}")
            return False

    return True


def read_block(buffer, offset):
    """Decode the big-endian uint32 stored at offset."""
    if offset < 0 or offset + BLOCK_SIZE > len(buffer):
        raise OutOfRange(f"Failed to parse block at offset 0x{offset:x}. Offset out of range")

    return dsstore_structure.uint32(bytes(buffer[offset:offset + BLOCK_SIZE]))


def read_struct(buffer, offset, struct_type):
    size = len(struct_type)
    if offset < 0 or offset + size > len(buffer):
        raise OutOfRange(f"Failed to parse structure at offset 0x{offset:x}. Offset out of range")

    return struct_type(bytes(buffer[offset:offset + size]))


def find_pattern(buffer, pattern, cursor):
    """
    Sliding-window search for the first full occurrence of pattern at or after cursor.

    Records in a directory page carry no length of their own; the next record is
    found by scanning forward for the terminator pattern. Returns None when the
    rest of the buffer holds no complete occurrence.
    """
    position = buffer.find(pattern, max(cursor, 0))
    if position < 0:
        return None
    return position
