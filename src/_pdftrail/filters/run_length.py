from _pdftrail.filters.base import Filter
from _pdftrail.filters.errors import FilterDecodeError

END_OF_DATA = 128


def run_length_decode(data):
    """
    A length byte of 0-127 is followed by that many plus one literal bytes,
    a length byte of 129-255 by one byte to be repeated 257 minus length
    times, and 128 ends the data (PDF 1.7, 7.4.5).
    """
    decoded = bytearray()
    position = 0
    while position < len(data):
        length = data[position]
        position += 1
        if length == END_OF_DATA:
            break

        if length < 128:
            run = data[position : position + length + 1]
            if len(run) != length + 1:
                raise FilterDecodeError(
                    f"RunLengthDecode data ended inside a literal run at {position}"
                )
            decoded += run
            position += length + 1
        else:
            if position >= len(data):
                raise FilterDecodeError(
                    f"RunLengthDecode data ended inside a repeated run at {position}"
                )
            decoded += data[position : position + 1] * (257 - length)
            position += 1

    return bytes(decoded)


class RunLengthDecodeFilter(Filter):
    @property
    def is_supported(self):
        return True

    def decode(self, data, stream_dictionary, filter_index):
        return run_length_decode(data)
