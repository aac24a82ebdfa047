import io
import sys

import pytest

from pypresent.cli import build_parser, main


@pytest.fixture
def zero_key(tmp_path):
    path = tmp_path / "zero.key"
    path.write_bytes(b"\x00" * 10)
    return path


def test_parser_defaults_to_encrypt():
    args = build_parser().parse_args(["k"])
    assert args.mode == "encrypt"
    assert args.keyfile == "k"
    assert args.input is None and args.output is None


def test_parser_last_mode_wins():
    assert build_parser().parse_args(["-e", "-d", "k"]).mode == "decrypt"
    assert build_parser().parse_args(["-d", "-e", "k"]).mode == "encrypt"


def test_parser_requires_keyfile():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args([])
    assert exc.value.code == 2


def test_parser_rejects_second_positional():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["a", "b"])
    assert exc.value.code == 2


def test_encrypt_file_to_file(tmp_path, zero_key):
    src = tmp_path / "in.bin"
    dst = tmp_path / "out.bin"
    src.write_bytes(b"\x00" * 8)
    assert main([str(zero_key), "-i", str(src), "-o", str(dst)]) == 0
    assert dst.read_bytes() == (0x5579C1387B228445).to_bytes(8, "big")


def test_decrypt_file_to_file(tmp_path, zero_key):
    src = tmp_path / "in.bin"
    dst = tmp_path / "out.bin"
    src.write_bytes((0xA112FFC72F68417B).to_bytes(8, "big"))
    assert main([str(zero_key), "-d", "-i", str(src), "-o", str(dst)]) == 0
    assert dst.read_bytes() == b"\xff" * 8


def test_round_trip_pads_with_zeros(tmp_path, zero_key):
    plain = tmp_path / "plain"
    enc = tmp_path / "enc"
    dec = tmp_path / "dec"
    plain.write_bytes(b"hello, world")
    assert main([str(zero_key), "-i", str(plain), "-o", str(enc)]) == 0
    assert len(enc.read_bytes()) == 16
    assert main([str(zero_key), "-d", "-i", str(enc), "-o", str(dec)]) == 0
    assert dec.read_bytes() == b"hello, world" + b"\x00" * 4


def test_stdin_to_stdout(monkeypatch, capsysbinary, zero_key):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"\x00" * 8)))
    assert main([str(zero_key)]) == 0
    assert capsysbinary.readouterr().out == (0x5579C1387B228445).to_bytes(8, "big")


def test_empty_input_writes_nothing(tmp_path, zero_key):
    src = tmp_path / "empty"
    dst = tmp_path / "out"
    src.write_bytes(b"")
    assert main([str(zero_key), "-i", str(src), "-o", str(dst)]) == 0
    assert dst.read_bytes() == b""


def test_bad_key_length(tmp_path, capsys):
    key = tmp_path / "short.key"
    key.write_bytes(b"\x00" * 9)
    assert main([str(key), "-i", str(key)]) == 1
    assert "ERROR" in capsys.readouterr().err


def test_missing_key_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.key")]) == 1
    assert "ERROR" in capsys.readouterr().err


def test_missing_input_file(tmp_path, zero_key, capsys):
    assert main([str(zero_key), "-i", str(tmp_path / "absent")]) == 1
    assert "fopen in" in capsys.readouterr().err


def test_unwritable_output(tmp_path, zero_key, capsys):
    src = tmp_path / "in.bin"
    src.write_bytes(b"\x00" * 8)
    target = tmp_path / "missing_dir" / "out.bin"
    assert main([str(zero_key), "-i", str(src), "-o", str(target)]) == 1
    assert "fopen out" in capsys.readouterr().err