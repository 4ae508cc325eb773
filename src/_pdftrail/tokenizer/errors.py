class TokenizationError(Exception):
    """
    Raised by a tokenizer when the stream does not start with the kind of
    token it reads. The stream is left where the tokenizer started.
    """

    pass
