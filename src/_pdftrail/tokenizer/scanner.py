from _pdftrail.tokenizer.combinators import skip
from _pdftrail.tokenizer.pdf_tokenizer import PdfTokenizer


class SeekableTokenScanner:
    """
    Reads pdf tokens on demand from a byte source and can be moved to any
    absolute byte offset, after which tokenization restarts at that offset.

    The scanner shares its position with the byte source, so interleaving
    reads from the byte source and the scanner requires a seek in between.
    """

    def __init__(self, input_bytes):
        """
        :param input_bytes: The seekable byte source, see InputBytes.
        """
        self.stream = input_bytes
        self.tokenizer = PdfTokenizer(input_bytes)
        self.current_token = None

    @property
    def position(self):
        return self.stream.tell()

    def seek(self, position):
        self.stream.seek(position)
        self.current_token = None

    def move_next(self):
        """
        Read the next token into current_token.

        :returns: False if the end of input was reached before any token.
        :raises TokenizationError: If the bytes at the position do not form
            a token.
        """
        skip(self.tokenizer.tokenize_delimiter)
        start = self.stream.tell()
        at_end = not self.stream.read(1)
        self.stream.seek(start)
        if at_end:
            self.current_token = None
            return False
        self.current_token = next(self.tokenizer.tokenize_token())
        return True

    def try_read_token(self, kind):
        """
        Read the next token and return it if it is of the given kind.

        :param kind: The expected TokenKind.
        :returns: The token, or None if the end of input was reached or the
            token read was of another kind (it is still available as
            current_token).
        """
        if not self.move_next():
            return None
        if self.current_token.kind != kind:
            return None
        return self.current_token

    def current_value(self):
        """
        :returns: The bytes of current_token.
        """
        if self.current_token is None:
            return None
        return self.current_token.get_value(self.stream)
