import base64
import binascii

from _pdftrail.filters.base import Filter
from _pdftrail.filters.errors import FilterDecodeError
from _pdftrail.tokenizer.common import HEX_DIGITS, WHITESPACE


class AsciiHexDecodeFilter(Filter):
    """
    Decodes pairs of hexadecimal digits, ignoring whitespace, up to the
    end-of-data marker '>'. An odd final digit is followed by an implicit 0.
    """

    @property
    def is_supported(self):
        return True

    def decode(self, data, stream_dictionary, filter_index):
        digits = bytearray()
        for position, byte in enumerate(data):
            if byte == ord(">"):
                break
            if byte in WHITESPACE:
                continue
            if byte not in HEX_DIGITS:
                raise FilterDecodeError(
                    f"Invalid character {chr(byte)!r} in ASCIIHexDecode data "
                    f"at {position}"
                )
            digits.append(byte)
        if len(digits) % 2:
            digits.append(ord("0"))
        return binascii.unhexlify(digits)


class Ascii85DecodeFilter(Filter):
    """
    Decodes base-85 data, ignoring whitespace, up to the end-of-data
    marker '~>'.
    """

    @property
    def is_supported(self):
        return True

    def decode(self, data, stream_dictionary, filter_index):
        data = bytes(b for b in data if b not in WHITESPACE)
        if data.startswith(b"<~"):
            data = data[2:]
        end = data.find(b"~>")
        if end != -1:
            data = data[:end]
        try:
            return base64.a85decode(data)
        except ValueError as err:
            raise FilterDecodeError(f"Invalid ASCII85Decode data: {err}") from err
