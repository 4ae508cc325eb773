from abc import ABC, abstractmethod

from _pdftrail.filters.errors import UnsupportedFilterError


def get_decode_parameters(stream_dictionary, filter_index):
    """
    Find the decode parameters of one filter in a stream's filter chain.

    :param stream_dictionary: The dictionary of the stream.
    :param filter_index: The position of the filter in the chain.
    :returns: The dictionary of parameters, empty if there are none.
    """
    parameters = stream_dictionary.get("DecodeParms")
    if isinstance(parameters, dict):
        return parameters
    if isinstance(parameters, (list, tuple)) and filter_index < len(parameters):
        if isinstance(parameters[filter_index], dict):
            return parameters[filter_index]
    return {}


class Filter(ABC):
    """
    Decoder for one pdf stream filter (PDF 1.7, 7.4).

    Filters are stateless so one instance is shared by all streams.
    """

    @property
    @abstractmethod
    def is_supported(self):
        """
        Whether decode is implemented for this filter.
        """
        pass

    @abstractmethod
    def decode(self, data, stream_dictionary, filter_index):
        """
        :param data: The encoded bytes of the stream.
        :param stream_dictionary: The dictionary of the stream, used for
            looking up decode parameters.
        :param filter_index: The position of this filter in the filter
            chain of the stream.
        :returns: The decoded bytes.
        """
        pass


class UnsupportedFilter(Filter):
    """
    A filter which is recognized but can not be decoded. decode always
    raises UnsupportedFilterError.
    """

    name = None
    description = None

    @property
    def is_supported(self):
        return False

    def decode(self, data, stream_dictionary, filter_index):
        raise UnsupportedFilterError(
            f"The {self.name} filter ({self.description}) is not currently "
            "supported. Try accessing the raw compressed data directly."
        )
