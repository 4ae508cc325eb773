"""
The trailer of a pdf file tells a reader where the cross-reference
structure begins, so pdf files are read from their end. Conforming files
end with

    startxref
    byte-offset
    %%EOF

but files in the wild may have trailing garbage after %%EOF, no %%EOF at
all, or the startxref keyword placed much further back than the last few
lines. This module recovers the byte-offset regardless, by searching
backwards through exponentially growing windows at the end of the file.
"""

import logging
import warnings
from dataclasses import dataclass
from enum import Enum

from _pdftrail.tokenizer.errors import TokenizationError
from _pdftrail.tokenizer.token_kind import TokenKind

logger = logging.getLogger(__name__)

# The %%EOF may be further back in the file.
END_OF_FILE_SEARCH_RANGE = 2048


class PdfDocumentFormatError(Exception):
    """
    Raised when the contents of a pdf file do not have the expected format.
    """

    pass


class AnchorNotFoundError(PdfDocumentFormatError):
    """
    Raised when no startxref keyword is found anywhere in the file.
    """

    pass


class UnexpectedTokenError(PdfDocumentFormatError):
    """
    Raised when the startxref keyword is followed by something other than
    comments and a non-negative integer.
    """

    pass


class MissingOffsetError(PdfDocumentFormatError):
    """
    Raised when the file ends before a numeric token follows the startxref
    keyword.
    """

    pass


class AnchorInconsistencyError(RuntimeError):
    """
    Raised when the keyword found by the byte search is not the token read
    by the tokenizer at the same offset. This is a bug, not a malformed file.
    """

    pass


class StartXrefKeyword(Enum):
    """
    The spellings of the startxref keyword, in the order they are tried.
    """

    STARTXREF = "startxref"
    # Misspelling written by some non-conforming producers.
    STARTREF = "startref"

    @property
    def pattern(self):
        return self.value.encode("utf-8")

    @classmethod
    def candidates(cls, lenient=False):
        if lenient:
            return (cls.STARTXREF, cls.STARTREF)
        return (cls.STARTXREF,)


@dataclass(frozen=True)
class AnchorMatch:
    keyword: StartXrefKeyword
    position: int


@dataclass(frozen=True)
class StartXref:
    """
    The result of locating the trailer.

    :param keyword: The spelling of the keyword found.
    :param position: Offset of the first byte of the keyword.
    :param offset: The byte offset of the cross-reference structure.
    :param end: Offset just after the numeric token, ie. where the
        scanner was left.
    """

    keyword: StartXrefKeyword
    position: int
    offset: int
    end: int


def scan_for_pattern(input_bytes, start, pattern):
    """
    Scan from start to the end of input for pattern.

    This counts consecutive matching bytes and starts over from the first
    byte of the pattern on any mismatch, without reconsidering the
    mismatching byte. Patterns are matched correctly as long as they are
    not preceded by a proper prefix of themselves, e.g. b"sstartxref" has
    no match.

    :returns: List of the offsets of the first byte of each match, in
        increasing order.
    """
    matches = []
    index = 0
    input_bytes.seek(start)
    while input_bytes.move_next():
        if input_bytes.current_byte == pattern[index]:
            index += 1
        else:
            index = 0

        if index == len(pattern):
            matches.append(input_bytes.current_offset - len(pattern))
            index = 0
    return matches


def find_anchor(input_bytes, keyword, search_range=END_OF_FILE_SEARCH_RANGE):
    """
    Find the last occurrence of the keyword near the end of the file.

    The last search_range bytes are searched first, and the window is
    doubled until the keyword is found or the whole file has been searched.

    :param input_bytes: The InputBytes of the file.
    :param keyword: The StartXrefKeyword to search for.
    :param search_range: The size of the first window.
    :returns: The offset of the first byte of the last occurrence of the
        keyword, or None if it does not occur in the file.
    """
    if search_range <= 0:
        raise ValueError(f"search_range has to be positive, got {search_range}")

    file_length = input_bytes.length
    window = min(file_length, search_range)
    while True:
        start = max(0, file_length - window)
        logger.debug("Searching for %s from %d", keyword.value, start)
        matches = scan_for_pattern(input_bytes, start, keyword.pattern)
        if matches:
            return matches[-1]
        if start == 0:
            return None
        window *= 2


def find_start_xref(
    input_bytes, scanner, lenient=False, search_range=END_OF_FILE_SEARCH_RANGE
):
    """
    Find the startxref keyword, trying the known misspellings after the
    correct spelling when lenient.

    :param input_bytes: The InputBytes of the file.
    :param scanner: A SeekableTokenScanner over input_bytes.
    :param lenient: Whether to also look for misspelled keywords.
    :param search_range: The size of the first window searched, see
        find_anchor.
    :returns: AnchorMatch of the keyword. The scanner is left positioned
        just after the keyword token.
    """
    for keyword in StartXrefKeyword.candidates(lenient):
        position = find_anchor(input_bytes, keyword, search_range)
        if position is None:
            continue

        scanner.seek(position)
        token = scanner.try_read_token(TokenKind.OPERATOR)
        if token is None or token.get_value(input_bytes) != keyword.pattern:
            raise AnchorInconsistencyError(
                f"The {keyword.value} position we found was not correct. Found "
                f"{position} but it was occupied by token {scanner.current_token}."
            )

        if keyword is not StartXrefKeyword.STARTXREF:
            warnings.warn(
                f"Found misspelled keyword '{keyword.value}' at {position} "
                f"instead of '{StartXrefKeyword.STARTXREF.value}'."
            )
        logger.debug("Found %s at %d", keyword.value, position)
        return AnchorMatch(keyword, position)

    searched = " or ".join(k.value for k in StartXrefKeyword.candidates(lenient))
    raise AnchorNotFoundError(
        f"Could not find {searched} within the last {input_bytes.length} characters."
    )


def parse_offset(value, keyword):
    """
    :param value: The bytes of a numeric token, e.g. b"1234".
    :returns: The value as a byte offset.
    """
    message = (
        f"Expected a non-negative integer following '{keyword.value}', got {value!r}."
    )
    try:
        offset = int(value)
    except ValueError as err:
        raise UnexpectedTokenError(message) from err
    if offset < 0:
        raise UnexpectedTokenError(message)
    return offset


def read_cross_reference_offset(scanner, anchor):
    """
    Read the byte offset following the keyword, skipping comments.

    :param scanner: A SeekableTokenScanner positioned just after the
        keyword, see find_start_xref.
    :param anchor: The AnchorMatch of the keyword.
    :returns: StartXref for the keyword and offset.
    """
    try:
        while scanner.move_next():
            token = scanner.current_token
            if token.kind == TokenKind.NUMERIC:
                offset = parse_offset(scanner.current_value(), anchor.keyword)
                return StartXref(anchor.keyword, anchor.position, offset, token.end)

            if token.kind != TokenKind.COMMENT:
                raise UnexpectedTokenError(
                    f"Found an unexpected token following '{anchor.keyword.value}': "
                    f"{token.kind.name} {scanner.current_value()!r} at {token.start}."
                )
    except TokenizationError as err:
        raise UnexpectedTokenError(
            f"Could not read the token following '{anchor.keyword.value}': {err}"
        ) from err

    raise MissingOffsetError(
        f"Could not find the numeric value following '{anchor.keyword.value}'. "
        f"Searching from position {anchor.position}."
    )


def locate_start_xref(
    input_bytes, scanner, lenient=False, search_range=END_OF_FILE_SEARCH_RANGE
):
    """
    :returns: StartXref with the keyword position and the offset of the
        cross-reference structure.
    """
    anchor = find_start_xref(input_bytes, scanner, lenient, search_range)
    return read_cross_reference_offset(scanner, anchor)


def get_first_cross_reference_offset(
    input_bytes, scanner, lenient=False, search_range=END_OF_FILE_SEARCH_RANGE
):
    """
    :returns: The byte offset, from the start of the file, of the
        cross-reference structure named in the trailer.
    """
    return locate_start_xref(input_bytes, scanner, lenient, search_range).offset
