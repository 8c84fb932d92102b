import logging

import pytest

from quickxorhash import hash_file, quick_xor_hash_bytes
from quickxorhash.__main__ import main

HELLO_HEX = "6828031bd8f00600" + "00" * 4 + "05" + "00" * 7


def test_hash_file_matches_bytes(tmp_path):
    data = bytes(range(256)) * 50
    path = tmp_path / "payload.bin"
    path.write_bytes(data)
    assert hash_file(path) == quick_xor_hash_bytes(data)
    assert hash_file(str(path), chunk_size=3) == quick_xor_hash_bytes(data)


def test_hash_file_empty(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    assert hash_file(path).digest() == bytes(20)


def test_hash_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        hash_file(tmp_path / "missing.bin")


def test_hash_file_logs_debug(tmp_path, caplog):
    path = tmp_path / "hello.txt"
    path.write_bytes(b"hello")
    with caplog.at_level(logging.DEBUG, logger="quickxorhash.files"):
        hash_file(path)
    assert HELLO_HEX in caplog.text


def test_cli_prints_hex(tmp_path, capsys):
    path = tmp_path / "hello.txt"
    path.write_bytes(b"hello")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == HELLO_HEX


def test_cli_prints_base64(tmp_path, capsys):
    path = tmp_path / "hello.txt"
    path.write_bytes(b"hello")
    assert main(["--base64", str(path)]) == 0
    assert capsys.readouterr().out.strip() == quick_xor_hash_bytes(b"hello").base64digest()


def test_cli_multiple_files_and_failure(tmp_path, capsys):
    good = tmp_path / "hello.txt"
    good.write_bytes(b"hello")
    missing = tmp_path / "missing.txt"
    assert main([str(missing), str(good)]) == 2
    out = capsys.readouterr().out.splitlines()
    assert out == [f"{HELLO_HEX}  {good}"]


def test_cli_requires_a_file():
    with pytest.raises(SystemExit):
        main([])


def test_hash_file_rejects_zero_chunk_size(tmp_path):
    path = tmp_path / "hello.txt"
    path.write_bytes(b"hello")
    with pytest.raises(ValueError):
        hash_file(path, chunk_size=0)
