# pypresent

An implementation of PRESENT, the lightweight block cipher. PRESENT uses a
64-bit block and an 80-bit key and runs for 31 rounds. The package is a small
library with a command that encrypts or decrypts a file or a stream, one
block at a time (each block on its own, with no chaining between blocks).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
pypresent [-e | -d] [-i FILE] [-o FILE] KEYFILE
```

The same command can be started as `python -m pypresent.cli`.

- `KEYFILE`: a binary file that holds exactly 10 bytes, the 80-bit key in
  big-endian order. The command stops with an error if the file holds any
  other number of bytes.
- `-e`, `--encrypt`: encrypt the input. This is the default.
- `-d`, `--decrypt`: decrypt the input.
- `-i FILE`, `--input FILE`: read from FILE. Without it the command reads
  standard input.
- `-o FILE`, `--output FILE`: write to FILE. Without it the command writes
  standard output.

The input is handled in 8-byte big-endian blocks. If the last block is short,
it is padded with zero bytes, so the output length is always a multiple of 8.
The padding is not removed on decryption.

On success the command exits with status 0. If the key file cannot be opened
or does not hold exactly 10 bytes, or if an input or output file cannot be
opened, read or written, it prints a line starting with `ERROR - ` to
standard error and exits with status 1. Bad command-line arguments are
reported by the argument parser, which exits with status 2.

```
head -c 10 /dev/urandom > demo.key
pypresent -i message.txt -o message.enc demo.key
pypresent -d -i message.enc -o message.out demo.key
```

## Library

```python
from pypresent.cipher import Key, Present

key = Key.from_bytes(bytes(10))          # an all-zero 80-bit key
cipher = Present(key)

ciphertext = cipher.encrypt_block(0)
assert ciphertext == 0x5579C1387B228445
assert cipher.decrypt_block(ciphertext) == 0

cipher.clear()                           # wipe the round keys
```

`pypresent.cipher`:

- `Key(hi, lo)` is a frozen dataclass holding the top 16 bits of the key in
  `hi` and the low 64 bits in `lo`; out-of-range parts raise `ValueError`.
  `Key.from_bytes(data)` builds one from exactly 10 big-endian bytes and
  raises `ValueError` for any other length.
- `Present(key)` expands the key once. `encrypt_block(block)` and
  `decrypt_block(block)` take and return 64-bit unsigned integers and raise
  `ValueError` for anything outside that range. The `round_keys` property
  gives the 32 round keys, and `clear()` overwrites them with zeros.
- `expand_key(key)` returns the 32 round keys as a tuple.
- `sbox_layer(block, inverse)` applies the substitution layer to a block.
- `pbox_layer(block, inverse)` applies the bit permutation to a block.

`pypresent.blockio` reads and writes the binary formats used by the command:

- `read_key(stream)` reads an 80-bit key and raises `KeyFormatError` (a
  subclass of `ValueError`) if the stream does not hold exactly 10 bytes.
- `read_blocks(stream)` yields 64-bit blocks as integers and pads the last
  block with zeros.
- `write_block(stream, block)` writes a block as 8 big-endian bytes.

## What it does not do

Only the 80-bit key size of PRESENT is supported; there is no 128-bit key
variant. The command has no mode of operation other than encrypting each
block independently, does not authenticate data, and does not add or remove
any padding scheme beyond filling the last block with zero bytes.