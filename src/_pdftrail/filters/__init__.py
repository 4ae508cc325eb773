"""
Decoding of pdf stream data. Each filter name maps to one Filter, which
either decodes the data completely or raises. Filters which are recognized
but not implemented have is_supported == False and raise
UnsupportedFilterError, in which case the caller can fall back to the
undecoded data.
"""

from .ascii import Ascii85DecodeFilter, AsciiHexDecodeFilter
from .base import Filter, UnsupportedFilter, get_decode_parameters
from .errors import FilterDecodeError, UnknownFilterError, UnsupportedFilterError
from .flate import FlateDecodeFilter
from .lzw import LzwDecodeFilter
from .registry import FilterRegistry
from .run_length import RunLengthDecodeFilter
from .unsupported import (
    CcittFaxDecodeFilter,
    CryptFilter,
    DctDecodeFilter,
    Jbig2DecodeFilter,
    JpxDecodeFilter,
)


def default_filters():
    """
    :returns: Mapping from the standard filter names, and their
        abbreviations in inline images, to filters.
    """
    ascii_hex = AsciiHexDecodeFilter()
    ascii_85 = Ascii85DecodeFilter()
    lzw = LzwDecodeFilter()
    flate = FlateDecodeFilter()
    run_length = RunLengthDecodeFilter()
    ccitt_fax = CcittFaxDecodeFilter()
    dct = DctDecodeFilter()
    return {
        "ASCIIHexDecode": ascii_hex,
        "AHx": ascii_hex,
        "ASCII85Decode": ascii_85,
        "A85": ascii_85,
        "LZWDecode": lzw,
        "LZW": lzw,
        "FlateDecode": flate,
        "Fl": flate,
        "RunLengthDecode": run_length,
        "RL": run_length,
        "CCITTFaxDecode": ccitt_fax,
        "CCF": ccitt_fax,
        "DCTDecode": dct,
        "DCT": dct,
        "JBIG2Decode": Jbig2DecodeFilter(),
        "JPXDecode": JpxDecodeFilter(),
        "Crypt": CryptFilter(),
    }


DEFAULT_REGISTRY = FilterRegistry(default_filters())


def get_filter_names(stream_dictionary):
    """
    :returns: The list of filter names of the stream, in the order they
        are to be applied.
    """
    names = stream_dictionary.get("Filter")
    if names is None:
        return []
    if isinstance(names, str):
        return [names]
    return list(names)


def decode_stream(data, stream_dictionary, registry=DEFAULT_REGISTRY):
    """
    Decode the data of a stream by applying each filter in its filter
    chain.

    :param data: The raw bytes of the stream.
    :param stream_dictionary: The dictionary of the stream, with str keys,
        e.g. {"Filter": ["ASCIIHexDecode", "FlateDecode"]}.
    :param registry: The FilterRegistry to look up filter names in.
    :returns: The decoded bytes, or data unchanged if the stream has
        no filters.
    """
    for filter_index, name in enumerate(get_filter_names(stream_dictionary)):
        data = registry.decode(name, data, stream_dictionary, filter_index)
    return bytes(data)


__all__ = [
    "Ascii85DecodeFilter",
    "AsciiHexDecodeFilter",
    "CcittFaxDecodeFilter",
    "CryptFilter",
    "DEFAULT_REGISTRY",
    "DctDecodeFilter",
    "Filter",
    "FilterDecodeError",
    "FilterRegistry",
    "FlateDecodeFilter",
    "Jbig2DecodeFilter",
    "JpxDecodeFilter",
    "LzwDecodeFilter",
    "RunLengthDecodeFilter",
    "UnknownFilterError",
    "UnsupportedFilter",
    "UnsupportedFilterError",
    "decode_stream",
    "default_filters",
    "get_decode_parameters",
    "get_filter_names",
]
