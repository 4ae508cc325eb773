import zlib

from _pdftrail.filters.base import Filter, get_decode_parameters
from _pdftrail.filters.errors import FilterDecodeError
from _pdftrail.filters.predictors import apply_predictor


class FlateDecodeFilter(Filter):
    """
    The zlib/deflate filter, with optional predictor given in the decode
    parameters.
    """

    @property
    def is_supported(self):
        return True

    def decode(self, data, stream_dictionary, filter_index):
        try:
            decompressed = zlib.decompress(data)
        except zlib.error as err:
            raise FilterDecodeError(
                f"Could not inflate FlateDecode data: {err}"
            ) from err
        parameters = get_decode_parameters(stream_dictionary, filter_index)
        return apply_predictor(decompressed, parameters)
