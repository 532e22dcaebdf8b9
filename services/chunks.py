"""Helpers that turn files and byte strings into chunk lists."""

from pathlib import Path
from typing import Callable, Sequence

Logger = Callable[[str], None]


def split_bytes(data: bytes, chunk_size: int) -> list[bytes]:
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return [bytes(data[i : i + chunk_size]) for i in range(0, len(data), chunk_size)]


def read_file_chunks(
    path: str | Path, chunk_size: int, log: Logger | None = None
) -> list[bytes]:
    """Read a file into a list of chunks of at most `chunk_size` bytes."""
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    chunks = []
    with open(path, "rb") as fh:
        while True:
            block = fh.read(chunk_size)
            if not block:
                break
            chunks.append(block)

    if log:
        log(f"Read '{path}' as {len(chunks)} chunks ({total_length(chunks)} bytes)")
    return chunks


def total_length(chunks: Sequence[bytes]) -> int:
    return sum(len(chunk) for chunk in chunks)
