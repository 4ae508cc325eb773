class UnknownFilterError(Exception):
    """
    Raised when a stream names a filter for which no decoder is registered.
    """

    pass


class UnsupportedFilterError(NotImplementedError):
    """
    Raised when decoding with a filter that is known but not implemented.
    The undecoded stream data can still be used as is.
    """

    pass


class FilterDecodeError(Exception):
    """
    Raised when the data of a stream is not valid for its filter.
    """

    pass
