from _pdftrail.tokenizer.errors import TokenizationError
from _pdftrail.tokenizer.token import Token

# PDF 1.7, table 1 and table 2.
WHITESPACE = frozenset(b"\x00\t\n\x0c\r ")
DELIMITERS = frozenset(b"()<>[]{}/%")
HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


def is_regular(byte):
    return byte not in WHITESPACE and byte not in DELIMITERS


def tokenize_word(stream, word, kind):
    """
    Token combinator for fixed word tokens, ie. when the stream contains '<<'
    tokenize_word(stream, b'<<', TokenKind.DICTIONARY_START) will yield
    Token(kind=TokenKind.DICTIONARY_START, 0, 2).

    :returns: Tokenizer for the given word, yielding a token
        of the given kind.
    :param word: Any word to be matched by the tokenizer.
    :param kind: The kind of token yielded by the tokenizer.
    """
    word_len = len(word)

    def word_tokenizer():
        start = stream.tell()

        token = stream.read(word_len)
        if token == word:
            end = stream.tell()
            yield Token(kind, end - word_len, end)
        else:
            stream.seek(start)
            raise TokenizationError(f"Token {repr(token)} did not match {word}")

    return word_tokenizer


def read_regular_run(stream):
    """
    Consume the longest run of regular (neither whitespace nor delimiter)
    characters at the start of the stream.

    :returns: The start and end offsets of the run.
    """
    start = stream.tell()
    end = start
    read_char = stream.read(1)
    while read_char and is_regular(read_char[0]):
        end = stream.tell()
        read_char = stream.read(1)
    stream.seek(end)
    return start, end
