"""Command that checks AES-128 against the SP 800-38A ECB vectors."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from tinyaes.cipher import BLOCK_SIZE, Aes128

KEY = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
PLAIN_TEXT = bytes.fromhex(
    "6bc1bee22e409f96e93d7e117393172a"
    "ae2d8a571e03ac9c9eb76fac45af8e51"
    "30c81c46a35ce411e5fbc1191a0a52ef"
    "f69f2445df4f9b17ad2b417be66c3710"
)
EXPECTED_FIRST_BLOCK = bytes.fromhex("3ad77bb40d7a3660a89ecaf32466ef97")


def format_hex(data: bytes | bytearray) -> str:
    """Render bytes as lowercase hexadecimal."""
    return bytes(data).hex()


def _blocks(data: bytes):
    for start in range(0, len(data), BLOCK_SIZE):
        yield data[start:start + BLOCK_SIZE]


def _check_ecb() -> bool:
    result = Aes128(KEY).encrypt_block(PLAIN_TEXT[:BLOCK_SIZE])
    ok = result == EXPECTED_FIRST_BLOCK
    print("ECB encrypt: " + ("SUCCESS!" if ok else "FAILURE!"))
    return ok


def _show_ecb_verbose() -> None:
    print("ECB encrypt verbose:\n")
    print("plain text:")
    for block in _blocks(PLAIN_TEXT):
        print(format_hex(block))
    print()
    print("key:")
    print(format_hex(KEY))
    print()
    print("ciphertext:")
    cipher = Aes128(KEY)
    for block in _blocks(PLAIN_TEXT):
        print(format_hex(cipher.encrypt_block(block)))
    print()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the self-test; return 0 on success and 1 on failure."""
    parser = argparse.ArgumentParser(
        prog="tinyaes",
        description="Check AES-128 encryption against known ECB test vectors.",
    )
    parser.parse_args(argv)

    print("\nTesting AES128\n")
    ok = _check_ecb()
    _show_ecb_verbose()
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())