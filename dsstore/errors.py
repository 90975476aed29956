"""Failures raised while decoding a .DS_Store buffer. All of them end the current parse."""


class DSStoreError(Exception):
    """Base class for every decoding failure."""


class SignatureMismatch(DSStoreError):
    pass


class OutOfRange(DSStoreError):
    """A block, structure or record read would run past the end of the buffer."""


class InconsistentHeader(DSStoreError):
    """The two redundant root offset fields of the header disagree."""


class InvalidEncoding(DSStoreError):
    pass


class UnsupportedPageMode(DSStoreError):
    """A directory page is an internal B-tree node rather than a leaf."""
