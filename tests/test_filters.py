import binascii
import zlib

import pytest

from _pdftrail.filters import (
    DEFAULT_REGISTRY,
    FilterRegistry,
    FlateDecodeFilter,
    JpxDecodeFilter,
    UnknownFilterError,
    UnsupportedFilterError,
    decode_stream,
    get_decode_parameters,
    get_filter_names,
)

unsupported_names = [
    name
    for name in DEFAULT_REGISTRY.names()
    if not DEFAULT_REGISTRY.get(name).is_supported
]
supported_names = [
    name for name in DEFAULT_REGISTRY.names() if DEFAULT_REGISTRY.get(name).is_supported
]


def test_jpx_is_not_supported():
    assert not JpxDecodeFilter().is_supported


def test_jpx_decode_fails_with_guidance():
    data = bytearray(b"\x00\x00\x00\x0cjP  \r\n\x87\n")
    with pytest.raises(UnsupportedFilterError, match="JPXDecode") as err:
        JpxDecodeFilter().decode(data, {"Filter": "JPXDecode"}, 0)
    assert "raw compressed data" in str(err.value)
    assert data == bytearray(b"\x00\x00\x00\x0cjP  \r\n\x87\n")


@pytest.mark.parametrize("name", unsupported_names)
def test_unsupported_filters_always_fail(name):
    with pytest.raises(UnsupportedFilterError):
        DEFAULT_REGISTRY.decode(name, b"", {"Filter": name})


def test_unsupported_filters():
    assert set(unsupported_names) == {
        "CCITTFaxDecode",
        "CCF",
        "DCTDecode",
        "DCT",
        "JBIG2Decode",
        "JPXDecode",
        "Crypt",
    }


def test_supported_filters():
    assert set(supported_names) == {
        "ASCIIHexDecode",
        "AHx",
        "ASCII85Decode",
        "A85",
        "LZWDecode",
        "LZW",
        "FlateDecode",
        "Fl",
        "RunLengthDecode",
        "RL",
    }


def test_unsupported_is_not_unknown():
    assert not issubclass(UnsupportedFilterError, UnknownFilterError)
    assert issubclass(UnsupportedFilterError, NotImplementedError)


def test_unknown_filter_name():
    with pytest.raises(UnknownFilterError, match="NoSuchDecode"):
        DEFAULT_REGISTRY.decode("NoSuchDecode", b"", {})


def test_filter_names_are_case_sensitive():
    assert "FlateDecode" in DEFAULT_REGISTRY
    assert "flatedecode" not in DEFAULT_REGISTRY
    with pytest.raises(UnknownFilterError):
        DEFAULT_REGISTRY.get("flatedecode")


def test_abbreviations_share_filter():
    assert DEFAULT_REGISTRY.get("Fl") is DEFAULT_REGISTRY.get("FlateDecode")


def test_custom_registry():
    registry = FilterRegistry({"FlateDecode": FlateDecodeFilter()})
    assert registry.names() == ["FlateDecode"]
    assert registry.decode("FlateDecode", zlib.compress(b"abc"), {}) == b"abc"
    with pytest.raises(UnknownFilterError):
        registry.decode("ASCIIHexDecode", b"", {})


@pytest.mark.parametrize(
    "stream_dictionary, filter_index, expected",
    [
        ({}, 0, {}),
        ({"DecodeParms": {"Columns": 4}}, 0, {"Columns": 4}),
        ({"DecodeParms": [None, {"Columns": 4}]}, 0, {}),
        ({"DecodeParms": [None, {"Columns": 4}]}, 1, {"Columns": 4}),
        ({"DecodeParms": [{"Columns": 4}]}, 1, {}),
        ({"DecodeParms": None}, 0, {}),
    ],
)
def test_get_decode_parameters(stream_dictionary, filter_index, expected):
    assert get_decode_parameters(stream_dictionary, filter_index) == expected


@pytest.mark.parametrize(
    "stream_dictionary, expected",
    [
        ({}, []),
        ({"Filter": "FlateDecode"}, ["FlateDecode"]),
        (
            {"Filter": ["ASCIIHexDecode", "FlateDecode"]},
            ["ASCIIHexDecode", "FlateDecode"],
        ),
    ],
)
def test_get_filter_names(stream_dictionary, expected):
    assert get_filter_names(stream_dictionary) == expected


def test_decode_stream_without_filter():
    assert decode_stream(b"BT /F1 12 Tf ET", {"Length": 15}) == b"BT /F1 12 Tf ET"


def test_decode_stream_single_filter():
    data = zlib.compress(b"BT /F1 12 Tf ET")
    assert decode_stream(data, {"Filter": "FlateDecode"}) == b"BT /F1 12 Tf ET"


def test_decode_stream_chain():
    data = binascii.hexlify(zlib.compress(b"hello")) + b">"
    stream_dictionary = {"Filter": ["ASCIIHexDecode", "FlateDecode"]}
    assert decode_stream(data, stream_dictionary) == b"hello"


def test_decode_stream_uses_parameters_of_filter_index():
    png_rows = b"\x00\x01\x02\x02\x01\x01"
    data = zlib.compress(zlib.compress(png_rows))
    stream_dictionary = {
        "Filter": ["FlateDecode", "FlateDecode"],
        "DecodeParms": [None, {"Predictor": 12, "Columns": 2}],
    }
    assert decode_stream(data, stream_dictionary) == b"\x01\x02\x02\x03"


def test_decode_stream_with_unsupported_filter_in_chain():
    data = binascii.hexlify(b"jpx data") + b">"
    with pytest.raises(UnsupportedFilterError, match="JPXDecode"):
        decode_stream(data, {"Filter": ["ASCIIHexDecode", "JPXDecode"]})


def test_decode_stream_with_custom_registry():
    registry = FilterRegistry({})
    with pytest.raises(UnknownFilterError):
        decode_stream(b"", {"Filter": "FlateDecode"}, registry)
