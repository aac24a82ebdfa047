"""The PRESENT lightweight block cipher (64-bit blocks, 80-bit keys), block I/O and a command line."""

__version__ = "0.1.0"
__all__ = ["cipher", "blockio", "cli"]