import logging

from _pdftrail.filters.errors import UnknownFilterError

logger = logging.getLogger(__name__)


class FilterRegistry:
    """
    Maps filter names, as given by the Filter entry of a stream
    dictionary, to the Filter decoding that data. Names are case
    sensitive.

    >>> from _pdftrail.filters.ascii import AsciiHexDecodeFilter
    >>> registry = FilterRegistry({"ASCIIHexDecode": AsciiHexDecodeFilter()})
    >>> registry.decode("ASCIIHexDecode", b"4E6F>", {})
    b'No'

    """

    def __init__(self, filters):
        """
        :param filters: Mapping from filter name to Filter.
        """
        self._filters = dict(filters)

    def __contains__(self, name):
        return name in self._filters

    def names(self):
        return list(self._filters)

    def get(self, name):
        """
        :raises UnknownFilterError: If no filter is registered for name.
        """
        try:
            return self._filters[name]
        except KeyError as err:
            raise UnknownFilterError(f"No filter is registered for {name!r}") from err

    def decode(self, name, data, stream_dictionary, filter_index=0):
        """
        Decode data with the filter registered for name.

        :param name: The name of the filter.
        :param data: The encoded bytes.
        :param stream_dictionary: The dictionary of the stream the data
            belongs to.
        :param filter_index: The position of the filter in the filter chain
            of the stream, used to find its decode parameters.
        :raises UnknownFilterError: If no filter is registered for name.
        :raises UnsupportedFilterError: If the filter can not be decoded.
        :raises FilterDecodeError: If data is not valid for the filter.
        """
        decoder = self.get(name)
        logger.debug("Decoding %d bytes with %s", len(data), name)
        return decoder.decode(data, stream_dictionary, filter_index)
