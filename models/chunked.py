import io
from typing import Iterable, Protocol

EOF = -1


class ByteSink(Protocol):
    """Anything that accepts raw bytes, e.g. a binary file or BytesIO."""

    def write(self, data: bytes | memoryview, /) -> object: ...


class ChunkedByteReader(io.RawIOBase):
    """File-like object that reads sequentially across a fixed list of chunks.

    The chunks are never joined into one buffer: reads copy straight out of
    the current chunk and `transfer_to` hands each chunk to the sink as a
    memoryview slice. Empty chunks are skipped. Reading only moves forward.
    """

    def __init__(self, chunks: Iterable[bytes]):
        super().__init__()
        self._chunks = tuple(chunks)
        self._index = 0
        self._current: memoryview | None = None
        self._pos = 0
        self._advance()

    def _advance(self) -> None:
        """Move to the next non-empty chunk, or become exhausted."""
        while self._index < len(self._chunks):
            view = memoryview(self._chunks[self._index]).cast("B")
            self._index += 1
            if len(view) > 0:
                self._current = view
                self._pos = 0
                return
        self._current = None

    def readable(self) -> bool:
        return True

    def read_byte(self) -> int:
        """Return the next byte as an int in 0..255, or EOF."""
        if self._current is None:
            return EOF
        value = self._current[self._pos]
        self._pos += 1
        if self._pos >= len(self._current):
            self._advance()
        return value

    def read_into(self, buffer, offset: int, length: int) -> int:
        """Copy up to `length` bytes into `buffer[offset:offset + length]`.

        Returns the number of bytes copied, or EOF when the stream was
        already exhausted. A zero length returns 0 whatever the state.
        """
        if buffer is None:
            raise ValueError("buffer must not be None")
        target = memoryview(buffer).cast("B")
        if offset < 0 or length < 0 or length > len(target) - offset:
            raise ValueError(
                f"offset={offset} length={length} out of range for buffer of size {len(target)}"
            )
        if length == 0:
            return 0

        total = 0
        while self._current is not None and total < length:
            n = min(len(self._current) - self._pos, length - total)
            start = offset + total
            target[start : start + n] = self._current[self._pos : self._pos + n]
            self._pos += n
            total += n
            if self._pos >= len(self._current):
                self._advance()

        return total if total > 0 else EOF

    def readinto(self, b) -> int:
        n = self.read_into(b, 0, len(memoryview(b).cast("B")))
        return 0 if n == EOF else n

    def readall(self) -> bytes:
        parts = []
        if self._current is not None:
            parts.append(self._current[self._pos :])
        parts.extend(self._chunks[self._index :])
        self._exhaust()
        return b"".join(parts)

    def transfer_to(self, sink: ByteSink) -> int:
        """Write every unread byte to `sink`, chunk by chunk.

        The reader is exhausted before the first write, so a failing sink
        leaves nothing to resume; its exception propagates unchanged.
        """
        head = self._current[self._pos :] if self._current is not None else None
        rest = self._chunks[self._index :]
        self._exhaust()

        transferred = 0
        if head is not None and len(head) > 0:
            sink.write(head)
            transferred += len(head)
        for chunk in rest:
            view = memoryview(chunk).cast("B")
            if len(view) > 0:
                sink.write(view)
                transferred += len(view)
        return transferred

    def available(self) -> int:
        """Unread bytes left in the current chunk only."""
        if self._current is None:
            return 0
        return len(self._current) - self._pos

    def skip(self, n: int) -> int:
        if n <= 0:
            return 0

        skipped = 0
        while self._current is not None and skipped < n:
            left = len(self._current) - self._pos
            wanted = n - skipped
            if wanted >= left:
                skipped += left
                self._advance()
            else:
                self._pos += wanted
                skipped = n
        return skipped

    def _exhaust(self) -> None:
        self._current = None
        self._pos = 0
        self._index = len(self._chunks)

    def close(self) -> None:
        self._exhaust()
        super().close()
