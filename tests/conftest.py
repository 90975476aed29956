"""
Hand-built .DS_Store buffers.

Layout produced by build_store():

0x0000  signature, root offset fields (0x08 / 0x10)
0x0800  root block: entry count, reserved block, 3 packed allocation entries
0x0C08  table of contents: count, then [len:1]["DSDB"][block id 1]
0x1004  store header block (logical id 1): root node id 2
0x2044  leaf directory page (logical id 2)
"""

import struct

import pytest

SIGNATURE = b"\x00\x00\x00\x01Bud1"
TERMINATOR = b"vSrnlong\x00\x00\x00\x01"

ROOT_OFFSET = 0x800
TOC_OFFSET = ROOT_OFFSET + 0x400 + 8
HEADER_BLOCK_ENTRY = 0x1005     # offset 0x1004, 32 bytes
PAGE_ENTRY = 0x204C             # offset 0x2044, 4096 bytes
PAGE_OFFSET = 0x2044
ALLOCATION_INDEX = [0x080B, HEADER_BLOCK_ENTRY, PAGE_ENTRY]


def put(buf, offset, value):
    buf[offset:offset + 4] = struct.pack(">I", value)


def encode_page(names, mode=0, count=None, truncate_last=False):
    page = bytearray(struct.pack(">II", mode, len(names) if count is None else count))
    for idx, name in enumerate(names):
        raw = name.encode("utf-16-be") if isinstance(name, str) else name
        page += struct.pack(">I", len(raw) // 2) + raw
        if truncate_last and idx == len(names) - 1:
            break
        page += TERMINATOR
    return page


def build_store(names=("Desktop",), mode=0, count=None, root_name=b"DSDB",
                root_offset_check=ROOT_OFFSET, truncate_last=False):
    buf = bytearray(PAGE_OFFSET)
    buf[0:8] = SIGNATURE
    put(buf, 0x08, ROOT_OFFSET - 4)
    put(buf, 0x0C, 0x800)
    put(buf, 0x10, root_offset_check - 4)

    put(buf, ROOT_OFFSET, len(ALLOCATION_INDEX))
    for idx, value in enumerate(ALLOCATION_INDEX):
        put(buf, ROOT_OFFSET + 8 + 4 * idx, value)

    put(buf, TOC_OFFSET, 1)
    buf[TOC_OFFSET + 4] = len(root_name)
    buf[TOC_OFFSET + 5:TOC_OFFSET + 9] = root_name
    put(buf, TOC_OFFSET + 9, 1)

    put(buf, 0x1004, 2)

    buf += encode_page(names, mode=mode, count=count, truncate_last=truncate_last)
    return bytes(buf)


@pytest.fixture
def store_bytes():
    return build_store


@pytest.fixture
def page_bytes():
    return encode_page
