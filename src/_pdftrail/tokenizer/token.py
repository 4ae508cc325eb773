from dataclasses import dataclass

from _pdftrail.tokenizer.token_kind import TokenKind


@dataclass(frozen=True)
class Token:
    """
    A token in a pdf file, given by its kind and the byte range
    [start, end) it occupies in the file.
    """

    kind: TokenKind
    start: int
    end: int

    def get_value(self, stream):
        """
        :returns: The bytes of the token, e.g. b"startxref" for an operator
            token or b"% a comment" for a comment token. The position of the
            stream is left unchanged.
        """
        go_back = stream.tell()
        stream.seek(self.start)
        value = stream.read(self.end - self.start)
        stream.seek(go_back)
        return value
