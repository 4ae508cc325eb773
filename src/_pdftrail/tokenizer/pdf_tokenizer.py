import re
from functools import cached_property

from _pdftrail.tokenizer.combinators import bind, one_of, repeated
from _pdftrail.tokenizer.common import (
    HEX_DIGITS,
    WHITESPACE,
    read_regular_run,
    tokenize_word,
)
from _pdftrail.tokenizer.errors import TokenizationError
from _pdftrail.tokenizer.token import Token
from _pdftrail.tokenizer.token_kind import TokenKind

NUMBER = re.compile(rb"[+-]?(\d+\.?\d*|\.\d+)")
END_OF_LINE = (b"\r", b"\n")


class PdfTokenizer:
    """
    Tokenizes the objects of a pdf file one token at a time.

    Every tokenize_* method is a tokenizer: calling it gives a generator
    which yields the token at the current position of the stream or, if the
    stream does not start with such a token, rewinds the stream and raises
    TokenizationError.

    >>> from _pdftrail.input_bytes import InputBytes
    >>> tokenizer = PdfTokenizer(InputBytes(b"startxref % c\\n 123"))
    >>> [t.kind.name for t in tokenizer]
    ['OPERATOR', 'COMMENT', 'NUMERIC']

    """

    def __init__(self, stream):
        """
        :param stream: A seekable byte stream, ie. InputBytes or io.BytesIO.
        """
        self.stream = stream

    def __iter__(self):
        while True:
            yield from self.tokenize_delimiter()
            start = self.stream.tell()
            if not self.stream.read(1):
                return
            self.stream.seek(start)
            yield from self.tokenize_token()

    @property
    def tokenize_delimiter(self):
        return repeated(self.tokenize_space)

    @cached_property
    def tokenize_token(self):
        """
        Tokenize any single pdf token, skipping leading whitespace.
        """
        return bind(
            self.tokenize_delimiter,
            one_of(
                self.tokenize_comment,
                self.tokenize_keyword[TokenKind.DICTIONARY_START],
                self.tokenize_keyword[TokenKind.DICTIONARY_END],
                self.tokenize_hex_string,
                self.tokenize_keyword[TokenKind.ARRAY_START],
                self.tokenize_keyword[TokenKind.ARRAY_END],
                tokenize_word(self.stream, b"{", TokenKind.OPERATOR),
                tokenize_word(self.stream, b"}", TokenKind.OPERATOR),
                self.tokenize_name,
                self.tokenize_string_literal,
                self.tokenize_numeric_value,
                self.tokenize_operator,
            ),
        )

    @cached_property
    def tokenize_keyword(self):
        return {
            kind: tokenize_word(self.stream, word, kind)
            for kind, word in TokenKind.delimiters().items()
        }

    def tokenize_space(self):
        start = self.stream.tell()
        read_char = self.stream.read(1)
        if not read_char or read_char[0] not in WHITESPACE:
            self.stream.seek(start)
            raise TokenizationError(f"Expected space at {start}, got {read_char}")

        while read_char and read_char[0] in WHITESPACE:
            first_non_space = self.stream.tell()
            read_char = self.stream.read(1)
        self.stream.seek(first_non_space)
        return iter([])

    def tokenize_comment(self):
        """
        Tokenize a comment, yields Token(TokenKind.COMMENT, 0, 6) for a
        stream containing "%%EOF\\n". The end of line marker is not part of
        the comment.
        """
        start = self.stream.tell()
        read_char = self.stream.read(1)
        if read_char != b"%":
            self.stream.seek(start)
            raise TokenizationError(f"Expected comment at {start}")
        end = self.stream.tell()
        read_char = self.stream.read(1)
        while read_char and read_char not in END_OF_LINE:
            end = self.stream.tell()
            read_char = self.stream.read(1)
        self.stream.seek(end)
        yield Token(TokenKind.COMMENT, start, end)

    def tokenize_name(self):
        """
        Tokenize a name, yields Token(TokenKind.NAME, 0, 5) for a stream
        containing "/Type".
        """
        start = self.stream.tell()
        if self.stream.read(1) != b"/":
            self.stream.seek(start)
            raise TokenizationError(f"Expected name at {start}")
        _, end = read_regular_run(self.stream)
        yield Token(TokenKind.NAME, start, end)

    def tokenize_string_literal(self):
        """
        Tokenize a literal string with balanced parentheses and backslash
        escapes, yields Token(TokenKind.STRING, 0, 7) for a stream
        containing "(a (b))".
        """
        start = self.stream.tell()
        if self.stream.read(1) != b"(":
            self.stream.seek(start)
            raise TokenizationError(f"Expected string at {start}")
        depth = 1
        while depth > 0:
            read_char = self.stream.read(1)
            if not read_char:
                self.stream.seek(start)
                raise TokenizationError(
                    "Reached end of stream while reading string literal"
                )
            if read_char == b"\\":
                self.stream.read(1)
            elif read_char == b"(":
                depth += 1
            elif read_char == b")":
                depth -= 1
        yield Token(TokenKind.STRING, start, self.stream.tell())

    def tokenize_hex_string(self):
        """
        Tokenize a hexadecimal string, yields Token(TokenKind.HEX_STRING, 0, 6)
        for a stream containing "<4E6F>".
        """
        start = self.stream.tell()
        if self.stream.read(1) != b"<":
            self.stream.seek(start)
            raise TokenizationError(f"Expected hex string at {start}")
        read_char = self.stream.read(1)
        while read_char != b">":
            if not read_char or (
                read_char[0] not in HEX_DIGITS and read_char[0] not in WHITESPACE
            ):
                self.stream.seek(start)
                raise TokenizationError(
                    f"Invalid hex string at {start}, got {read_char}"
                )
            read_char = self.stream.read(1)
        yield Token(TokenKind.HEX_STRING, start, self.stream.tell())

    def tokenize_numeric_value(self):
        """
        Tokenize an integer or real number, yields
        Token(TokenKind.NUMERIC, 0, 4) for a stream containing "-1.5".
        The entire run of regular characters has to be a number, so
        "12abc" is not a numeric value.
        """
        start, end = read_regular_run(self.stream)
        self.stream.seek(start)
        value = self.stream.read(end - start)
        if not NUMBER.fullmatch(value):
            self.stream.seek(start)
            raise TokenizationError(f"Expected numeric value at {start}")
        yield Token(TokenKind.NUMERIC, start, end)

    def tokenize_operator(self):
        """
        Tokenize a keyword or content stream operator, yields
        Token(TokenKind.OPERATOR, 0, 9) for a stream containing "startxref".
        """
        start, end = read_regular_run(self.stream)
        if end - start < 1:
            read_char = self.stream.read(1)
            self.stream.seek(start)
            raise TokenizationError(f"Expected operator at {start} got {read_char}")
        yield Token(TokenKind.OPERATOR, start, end)
