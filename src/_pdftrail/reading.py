import pathlib
from contextlib import contextmanager

from _pdftrail.input_bytes import InputBytes
from _pdftrail.tokenizer import SeekableTokenScanner
from _pdftrail.trailer import END_OF_FILE_SEARCH_RANGE, locate_start_xref


def make_input_bytes(filelike):
    if isinstance(filelike, (bytes, bytearray, memoryview)):
        return InputBytes(filelike)
    if isinstance(filelike, InputBytes):
        return filelike
    return InputBytes.from_stream(filelike)


@contextmanager
def open_input_bytes(filelike):
    """
    :param filelike: Either a path (str or pathlib.Path), a binary file
        object, or the bytes of a file. Paths are opened and closed again.
    """
    if isinstance(filelike, (str, pathlib.Path)):
        with open(filelike, "rb") as file_stream:
            yield InputBytes.from_stream(file_stream)
    else:
        yield make_input_bytes(filelike)


def read_start_xref(filelike, lenient=False, search_range=END_OF_FILE_SEARCH_RANGE):
    """
    Locates the trailer of a pdf file, ie.

    >>> read_start_xref(b"%PDF-1.4 ... startxref\\n1234\\n%%EOF").offset
    1234

    :param filelike: Either a path, a binary file object, or bytes.
    :param lenient: Whether to accept the misspelled keyword 'startref'.
    :param search_range: Number of bytes at the end of the file searched
        first.
    """
    with open_input_bytes(filelike) as input_bytes:
        scanner = SeekableTokenScanner(input_bytes)
        return locate_start_xref(input_bytes, scanner, lenient, search_range)


def find_xref_offset(filelike, lenient=False, search_range=END_OF_FILE_SEARCH_RANGE):
    """
    Find the byte offset of the cross-reference structure of a pdf file,
    ie. offset = find_xref_offset("/my/file.pdf").

    :param filelike: Either a path, a binary file object, or bytes.
    :param lenient: Whether to accept the misspelled keyword 'startref'.
    :param search_range: Number of bytes at the end of the file searched
        first.
    :returns: The offset from the start of the file.
    :raises PdfDocumentFormatError: If no valid startxref is found.
    """
    return read_start_xref(filelike, lenient, search_range).offset
