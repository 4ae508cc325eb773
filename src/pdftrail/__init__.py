import pdftrail.version
from _pdftrail.filters import (
    DEFAULT_REGISTRY,
    FilterDecodeError,
    FilterRegistry,
    UnknownFilterError,
    UnsupportedFilterError,
    decode_stream,
)
from _pdftrail.reading import find_xref_offset, read_start_xref
from _pdftrail.trailer import (
    AnchorInconsistencyError,
    AnchorNotFoundError,
    MissingOffsetError,
    PdfDocumentFormatError,
    StartXrefKeyword,
    UnexpectedTokenError,
)

__version__ = pdftrail.version.version

__all__ = [
    "AnchorInconsistencyError",
    "AnchorNotFoundError",
    "DEFAULT_REGISTRY",
    "FilterDecodeError",
    "FilterRegistry",
    "MissingOffsetError",
    "PdfDocumentFormatError",
    "StartXrefKeyword",
    "UnexpectedTokenError",
    "UnknownFilterError",
    "UnsupportedFilterError",
    "decode_stream",
    "find_xref_offset",
    "read_start_xref",
]
