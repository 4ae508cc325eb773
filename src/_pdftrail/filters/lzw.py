from _pdftrail.filters.base import Filter, get_decode_parameters
from _pdftrail.filters.errors import FilterDecodeError
from _pdftrail.filters.predictors import apply_predictor

CLEAR_TABLE = 256
END_OF_DATA = 257
MAX_TABLE_SIZE = 4096


def initial_table():
    # CLEAR_TABLE and END_OF_DATA have no entries
    return [bytes([i]) for i in range(256)] + [b"", b""]


def code_length(table_size, early_change):
    next_code = table_size + early_change
    if next_code >= 2048:
        return 12
    if next_code >= 1024:
        return 11
    if next_code >= 512:
        return 10
    return 9


def lzw_decode(data, early_change=1):
    """
    Decode LZW compressed data with variable code lengths of 9 to 12 bits
    (PDF 1.7, 7.4.4.2).

    :param early_change: 1 if the code length is increased one code
        early, 0 otherwise.
    """
    table = initial_table()
    length = 9
    previous = None
    output = bytearray()

    bit_buffer = 0
    bit_count = 0
    for byte in data:
        bit_buffer = (bit_buffer << 8) | byte
        bit_count += 8
        while bit_count >= length:
            bit_count -= length
            code = bit_buffer >> bit_count
            bit_buffer &= (1 << bit_count) - 1

            if code == CLEAR_TABLE:
                table = initial_table()
                length = 9
                previous = None
                continue
            if code == END_OF_DATA:
                return bytes(output)

            if code < len(table):
                entry = table[code]
            elif code == len(table) and previous is not None:
                entry = previous + previous[:1]
            else:
                raise FilterDecodeError(f"Invalid LZW code {code}")

            output += entry
            if previous is not None and len(table) < MAX_TABLE_SIZE:
                table.append(previous + entry[:1])
            previous = entry
            length = code_length(len(table), early_change)
    return bytes(output)


class LzwDecodeFilter(Filter):
    @property
    def is_supported(self):
        return True

    def decode(self, data, stream_dictionary, filter_index):
        parameters = get_decode_parameters(stream_dictionary, filter_index)
        decompressed = lzw_decode(data, parameters.get("EarlyChange", 1))
        return apply_predictor(decompressed, parameters)
