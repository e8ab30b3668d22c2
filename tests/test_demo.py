import pytest

from tinyaes.demo import format_hex, main


def test_format_hex_round_trip():
    data = bytes(range(0, 256, 17))
    assert bytes.fromhex(format_hex(data)) == data


def test_format_hex_lowercase_two_digits():
    text = format_hex(bytearray([0x00, 0x0A, 0xFF]))
    assert text == text.lower()
    assert len(text) == 6
    assert text.startswith("00")


def test_main_succeeds_and_prints_vectors(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Testing AES128" in out
    assert "ECB encrypt: SUCCESS!" in out
    for line in (
        "3ad77bb40d7a3660a89ecaf32466ef97",
        "f5d3d58503b9699de785895a96fdbaaf",
        "43b1cd7f598ece23881b00e3ed030688",
        "7b0c785e27e8ad3f8223207104725dd4",
    ):
        assert line in out.splitlines()


def test_main_prints_key_and_plain_text(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    key_index = lines.index("key:")
    assert lines[key_index + 1] == "2b7e151628aed2a6abf7158809cf4f3c"
    plain_index = lines.index("plain text:")
    assert lines[plain_index + 1] == "6bc1bee22e409f96e93d7e117393172a"
    assert lines.index("ciphertext:") > key_index


def test_main_rejects_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["unexpected"])
    assert excinfo.value.code == 2