DEFAULT_CHUNK_SIZE = 4096


class ByteBuffer:
    """FIFO of bytes backed by a ``bytearray`` and a read cursor.

    Consumed bytes are not shifted out immediately; the cursor just moves
    forward. They are dropped the next time data is appended, so the cost
    of a refill is proportional to the chunk rather than the whole buffer.
    """

    def __init__(self):
        self._data = bytearray()
        self._pos = 0

    def __len__(self) -> int:
        return len(self._data) - self._pos

    def __bool__(self) -> bool:
        return len(self._data) > self._pos

    def append(self, data: bytes) -> None:
        if self._pos:
            del self._data[:self._pos]
            self._pos = 0
        self._data.extend(data)

    def find(self, byte: int, start: int = 0) -> int:
        """Offset of ``byte`` relative to the cursor, or -1."""
        idx = self._data.find(byte, self._pos + start)
        if idx == -1:
            return -1
        return idx - self._pos

    def read(self, n: int = -1) -> bytes:
        """Consume up to ``n`` bytes (all of them if ``n`` is negative)."""
        if n < 0 or n > len(self):
            n = len(self)
        end = self._pos + n
        data = bytes(self._data[self._pos:end])
        self._pos = end
        if self._pos == len(self._data):
            self.clear()
        return data

    def skip(self, n: int) -> None:
        self._pos = min(self._pos + n, len(self._data))
        if self._pos == len(self._data):
            self.clear()

    def clear(self) -> None:
        self._data.clear()
        self._pos = 0
