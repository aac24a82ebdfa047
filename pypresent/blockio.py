"""Reading keys and blocks from binary streams and writing blocks back."""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

from pypresent.cipher import BLOCK_MASK, KEY_BYTES, Key

BLOCK_BYTES = 8


class KeyFormatError(ValueError):
    """The key stream does not hold exactly 80 bits."""


def _read_up_to(stream: BinaryIO, size: int) -> bytes:
    """Read until ``size`` bytes are gathered or the stream ends."""
    chunks = []
    remaining = size
    while remaining:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_key(stream: BinaryIO) -> Key:
    """Read an 80-bit big-endian key; the stream must hold nothing else."""
    data = _read_up_to(stream, KEY_BYTES)
    if len(data) < KEY_BYTES:
        raise KeyFormatError(f"key must be {KEY_BYTES} bytes, got {len(data)}")
    if stream.read(1):
        raise KeyFormatError(f"key file holds more than {KEY_BYTES} bytes")
    return Key.from_bytes(data)


def read_blocks(stream: BinaryIO) -> Iterator[int]:
    """Yield big-endian 64-bit blocks; a short last block is zero-padded."""
    while True:
        data = _read_up_to(stream, BLOCK_BYTES)
        if not data:
            return
        yield int.from_bytes(data.ljust(BLOCK_BYTES, b"\x00"), "big")
        if len(data) < BLOCK_BYTES:
            return


def write_block(stream: BinaryIO, block: int) -> None:
    """Write one block as eight big-endian bytes."""
    if not 0 <= block <= BLOCK_MASK:
        raise ValueError(f"block must be an unsigned 64-bit integer, got {block!r}")
    stream.write(block.to_bytes(BLOCK_BYTES, "big"))