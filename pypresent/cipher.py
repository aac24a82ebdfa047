"""The PRESENT lightweight block cipher: 64-bit blocks, 80-bit keys."""

from __future__ import annotations

from dataclasses import dataclass

BLOCK_BITS = 64
BLOCK_MASK = (1 << BLOCK_BITS) - 1
KEY_BYTES = 10
ROUND_KEYS = 32

SBOX = (0xC, 0x5, 0x6, 0xB, 0x9, 0x0, 0xA, 0xD, 0x3, 0xE, 0xF, 0x8, 0x4, 0x7, 0x1, 0x2)
INV_SBOX = (0x5, 0xE, 0xF, 0x8, 0xC, 0x1, 0x2, 0xD, 0xB, 0x4, 0x6, 0x3, 0x0, 0x7, 0x9, 0xA)

_H48 = 0xFFFFFFFFFFFF0000
_L16 = 0xFFFF
_L4 = 0xF

# Bit 63 stays in place; every other bit j moves to (j * 16) mod 63.
_PBOX_SPAN = BLOCK_BITS - 1
_PBOX_TARGETS = tuple((j * 16) % _PBOX_SPAN for j in range(_PBOX_SPAN))
_INV_PBOX_TARGETS = tuple((j * 4) % _PBOX_SPAN for j in range(_PBOX_SPAN))


def _check_block(block: int) -> None:
    if not 0 <= block <= BLOCK_MASK:
        raise ValueError(f"block must be an unsigned 64-bit integer, got {block!r}")


@dataclass(frozen=True)
class Key:
    """An 80-bit key: the top 16 bits in ``hi`` and the low 64 bits in ``lo``."""

    hi: int
    lo: int

    def __post_init__(self) -> None:
        if not 0 <= self.hi <= _L16:
            raise ValueError(f"key high part must fit in 16 bits, got {self.hi!r}")
        if not 0 <= self.lo <= BLOCK_MASK:
            raise ValueError(f"key low part must fit in 64 bits, got {self.lo!r}")

    @classmethod
    def from_bytes(cls, data: bytes) -> Key:
        """Build a key from exactly ten big-endian bytes."""
        if len(data) != KEY_BYTES:
            raise ValueError(f"key must be exactly {KEY_BYTES} bytes, got {len(data)}")
        return cls(hi=int.from_bytes(data[:2], "big"), lo=int.from_bytes(data[2:], "big"))


def expand_key(key: Key) -> tuple[int, ...]:
    """Return the 32 round keys derived from ``key``."""
    hi, lo = key.hi, key.lo
    round_keys = []
    for counter in range(1, ROUND_KEYS + 1):
        round_keys.append(((hi & _L16) << 48) | ((lo & _H48) >> 16))

        # rotate the 80-bit register left by 61
        new_hi = (lo >> 3) & _L16
        new_lo = ((lo << 61) | ((hi & _L16) << 45) | (lo >> 19)) & BLOCK_MASK

        # S-box on the top four bits
        new_hi = (new_hi & ~(_L4 << 12)) | (SBOX[new_hi >> 12] << 12)

        # round counter into bits 19..15
        new_lo ^= counter << 15

        hi, lo = new_hi, new_lo
    return tuple(round_keys)


def sbox_layer(block: int, inverse: bool) -> int:
    """Substitute every nibble of ``block`` through the (inverse) S-box."""
    table = INV_SBOX if inverse else SBOX
    return sum(table[(block >> shift) & _L4] << shift for shift in range(0, BLOCK_BITS, 4))


def pbox_layer(block: int, inverse: bool) -> int:
    """Apply the (inverse) bit permutation to ``block``."""
    targets = _INV_PBOX_TARGETS if inverse else _PBOX_TARGETS
    result = block & (1 << _PBOX_SPAN)
    for source, target in enumerate(targets):
        result |= ((block >> source) & 1) << target
    return result


class Present:
    """A PRESENT cipher instance bound to one key."""

    def __init__(self, key: Key) -> None:
        self._round_keys = expand_key(key)

    @property
    def round_keys(self) -> tuple[int, ...]:
        return self._round_keys

    def encrypt_block(self, block: int) -> int:
        """Encrypt one 64-bit block."""
        _check_block(block)
        *rounds, last = self._round_keys
        for round_key in rounds:
            block ^= round_key
            block = sbox_layer(block, False)
            block = pbox_layer(block, False)
        return block ^ last

    def decrypt_block(self, block: int) -> int:
        """Decrypt one 64-bit block."""
        _check_block(block)
        *rounds, last = self._round_keys
        block ^= last
        for round_key in reversed(rounds):
            block = pbox_layer(block, True)
            block = sbox_layer(block, True)
            block ^= round_key
        return block

    def clear(self) -> None:
        """Wipe the round keys."""
        self._round_keys = (0,) * ROUND_KEYS