class InputBytes:
    """
    A seekable, position aware source over the bytes of an entire file.

    The position is the offset of the next byte to be consumed, so after
    move_next() has returned True, current_byte is the byte at
    current_offset - 1.

    >>> source = InputBytes(b"abc")
    >>> source.move_next()
    True
    >>> chr(source.current_byte), source.current_offset
    ('a', 1)

    """

    def __init__(self, data):
        """
        :param data: The contents of the file, as bytes, bytearray or
            memoryview.
        """
        self._data = bytes(data)
        self._position = 0
        self.current_byte = None

    @classmethod
    def from_stream(cls, stream):
        """
        :param stream: A binary file object, read in full from its start.
            Streams that cannot seek are read from their current position.
        """
        if stream.seekable():
            stream.seek(0)
        return cls(stream.read())

    @property
    def length(self):
        return len(self._data)

    @property
    def current_offset(self):
        return self._position

    def tell(self):
        return self._position

    def seek(self, position):
        if position < 0 or position > self.length:
            raise ValueError(
                f"Cannot seek to {position}, file length is {self.length}"
            )
        self._position = position
        self.current_byte = None

    def move_next(self):
        """
        Advance one byte.

        :returns: False at end of input, otherwise True with
            current_byte set to the byte just consumed.
        """
        if self._position >= self.length:
            return False
        self.current_byte = self._data[self._position]
        self._position += 1
        return True

    def peek(self):
        if self._position >= self.length:
            return None
        return self._data[self._position]

    def read(self, size=-1):
        """
        File-like read of at most size bytes (all remaining bytes for a
        negative size).
        """
        start = self._position
        if size < 0:
            end = self.length
        else:
            end = min(self.length, start + size)
        self._position = end
        return self._data[start:end]

    def __len__(self):
        return self.length
