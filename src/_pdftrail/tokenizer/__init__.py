"""
In this module, a tokenizer is a generator that takes a stream and generates
tokens. If an error occurs, the function winds back the stream to the position
to where it started generating and raises an Error.

Token combinator is any function which returns a tokenizer.

Pdf files are read from their end (see _pdftrail.trailer), so tokenization
has to be able to start at any byte offset. SeekableTokenScanner wraps the
tokenizers with that capability: seek to an offset, then read tokens one at
a time with move_next.

The tokenizers require a seekable byte stream with read, seek and tell, such
as InputBytes or io.BytesIO.
"""

from .scanner import SeekableTokenScanner
from .token_kind import TokenKind

__all__ = ["SeekableTokenScanner", "TokenKind"]
