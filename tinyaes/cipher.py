"""AES-128 block encryption with an on-the-fly key schedule."""

from __future__ import annotations

from collections.abc import Sequence

BLOCK_SIZE = 16
KEY_SIZE = 16
ROUNDS = 10

SBOX: bytes = bytes(
    [
        0x63, 0x7C, 0x77, 0x7B, 0xF2, 0x6B, 0x6F, 0xC5, 0x30, 0x01, 0x67, 0x2B, 0xFE, 0xD7, 0xAB, 0x76,
        0xCA, 0x82, 0xC9, 0x7D, 0xFA, 0x59, 0x47, 0xF0, 0xAD, 0xD4, 0xA2, 0xAF, 0x9C, 0xA4, 0x72, 0xC0,
        0xB7, 0xFD, 0x93, 0x26, 0x36, 0x3F, 0xF7, 0xCC, 0x34, 0xA5, 0xE5, 0xF1, 0x71, 0xD8, 0x31, 0x15,
        0x04, 0xC7, 0x23, 0xC3, 0x18, 0x96, 0x05, 0x9A, 0x07, 0x12, 0x80, 0xE2, 0xEB, 0x27, 0xB2, 0x75,
        0x09, 0x83, 0x2C, 0x1A, 0x1B, 0x6E, 0x5A, 0xA0, 0x52, 0x3B, 0xD6, 0xB3, 0x29, 0xE3, 0x2F, 0x84,
        0x53, 0xD1, 0x00, 0xED, 0x20, 0xFC, 0xB1, 0x5B, 0x6A, 0xCB, 0xBE, 0x39, 0x4A, 0x4C, 0x58, 0xCF,
        0xD0, 0xEF, 0xAA, 0xFB, 0x43, 0x4D, 0x33, 0x85, 0x45, 0xF9, 0x02, 0x7F, 0x50, 0x3C, 0x9F, 0xA8,
        0x51, 0xA3, 0x40, 0x8F, 0x92, 0x9D, 0x38, 0xF5, 0xBC, 0xB6, 0xDA, 0x21, 0x10, 0xFF, 0xF3, 0xD2,
        0xCD, 0x0C, 0x13, 0xEC, 0x5F, 0x97, 0x44, 0x17, 0xC4, 0xA7, 0x7E, 0x3D, 0x64, 0x5D, 0x19, 0x73,
        0x60, 0x81, 0x4F, 0xDC, 0x22, 0x2A, 0x90, 0x88, 0x46, 0xEE, 0xB8, 0x14, 0xDE, 0x5E, 0x0B, 0xDB,
        0xE0, 0x32, 0x3A, 0x0A, 0x49, 0x06, 0x24, 0x5C, 0xC2, 0xD3, 0xAC, 0x62, 0x91, 0x95, 0xE4, 0x79,
        0xE7, 0xC8, 0x37, 0x6D, 0x8D, 0xD5, 0x4E, 0xA9, 0x6C, 0x56, 0xF4, 0xEA, 0x65, 0x7A, 0xAE, 0x08,
        0xBA, 0x78, 0x25, 0x2E, 0x1C, 0xA6, 0xB4, 0xC6, 0xE8, 0xDD, 0x74, 0x1F, 0x4B, 0xBD, 0x8B, 0x8A,
        0x70, 0x3E, 0xB5, 0x66, 0x48, 0x03, 0xF6, 0x0E, 0x61, 0x35, 0x57, 0xB9, 0x86, 0xC1, 0x1D, 0x9E,
        0xE1, 0xF8, 0x98, 0x11, 0x69, 0xD9, 0x8E, 0x94, 0x9B, 0x1E, 0x87, 0xE9, 0xCE, 0x55, 0x28, 0xDF,
        0x8C, 0xA1, 0x89, 0x0D, 0xBF, 0xE6, 0x42, 0x68, 0x41, 0x99, 0x2D, 0x0F, 0xB0, 0x54, 0xBB, 0x16,
    ]
)

# Rcon[i] is x**(i-1) in GF(2^8); entry 0 is never used by AES-128.
RCON: bytes = bytes([0x8D, 0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36])

_REDUCE_BYTE = 0x1B
_INVERSE_CHAIN = (0, 1, 1, 3, 4, 3, 6, 7, 3, 9, 1)


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return value


def xtime(x: int) -> int:
    """Multiply a field element by {02} in GF(2^8)."""
    _check_byte(x)
    return ((x << 1) ^ (((x >> 7) & 1) * _REDUCE_BYTE)) & 0xFF


def gf_multiply(a: int, b: int) -> int:
    """Multiply two elements of GF(2^8) modulo the AES polynomial."""
    _check_byte(a)
    _check_byte(b)
    result = 0
    for _ in range(8):
        if b & 1:
            result ^= a
        a = xtime(a)
        b >>= 1
    return result


def gf_inverse(a: int) -> int:
    """Multiplicative inverse in GF(2^8) via an addition chain; 0 maps to 0."""
    _check_byte(a)
    previous: list[int] = []
    for index in _INVERSE_CHAIN:
        previous.append(a)
        a = gf_multiply(a, previous[index])
    return a


def sbox_value(a: int) -> int:
    """Return the AES S-box substitution of a byte."""
    return SBOX[_check_byte(a)]


def _as_bytes(data: bytes | bytearray | Sequence[int], size: int, what: str) -> bytes:
    raw = bytes(data)
    if len(raw) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(raw)}")
    return raw


def expand_round_key(round_number: int, round_key: bytes | bytearray | Sequence[int]) -> bytes:
    """Derive the round key that follows ``round_key`` in the AES-128 schedule."""
    if not 0 <= round_number < len(RCON):
        raise ValueError(f"round number out of range: {round_number}")
    key = _as_bytes(round_key, KEY_SIZE, "round key")

    temp = [SBOX[key[13]], SBOX[key[14]], SBOX[key[15]], SBOX[key[12]]]
    temp[0] ^= RCON[round_number]

    words = [bytes(k ^ t for k, t in zip(key[0:4], temp))]
    for offset in range(4, KEY_SIZE, 4):
        words.append(bytes(k ^ p for k, p in zip(key[offset:offset + 4], words[-1])))
    return b"".join(words)


def _add_round_key(state: list[int], round_key: bytes) -> list[int]:
    return [s ^ k for s, k in zip(state, round_key)]


def _sub_bytes(state: list[int]) -> list[int]:
    return [SBOX[s] for s in state]


def _shift_rows(state: list[int]) -> list[int]:
    # state[4 * column + row]; row r is rotated left by r columns.
    return [state[((column + row) % 4) * 4 + row] for column in range(4) for row in range(4)]


def _mix_columns(state: list[int]) -> list[int]:
    mixed: list[int] = []
    for start in range(0, BLOCK_SIZE, 4):
        column = state[start:start + 4]
        total = column[0] ^ column[1] ^ column[2] ^ column[3]
        mixed.extend(
            value ^ total ^ xtime(value ^ column[(k + 1) % 4])
            for k, value in enumerate(column)
        )
    return mixed


def _cipher(block: bytes, key: bytes) -> bytes:
    state = _add_round_key(list(block), key)
    round_key = key
    for round_number in range(1, ROUNDS + 1):
        state = _shift_rows(_sub_bytes(state))
        if round_number != ROUNDS:
            state = _mix_columns(state)
        round_key = expand_round_key(round_number, round_key)
        state = _add_round_key(state, round_key)
    return bytes(state)


def encrypt_block(key: bytes | bytearray | Sequence[int], block: bytes | bytearray | Sequence[int]) -> bytes:
    """Encrypt one 16-byte block with a 16-byte key."""
    return _cipher(_as_bytes(block, BLOCK_SIZE, "block"), _as_bytes(key, KEY_SIZE, "key"))


class Aes128:
    """AES-128 encryptor bound to a single key."""

    def __init__(self, key: bytes | bytearray | Sequence[int]) -> None:
        self._key = _as_bytes(key, KEY_SIZE, "key")

    def encrypt_block(self, block: bytes | bytearray | Sequence[int]) -> bytes:
        """Encrypt one 16-byte block."""
        return _cipher(_as_bytes(block, BLOCK_SIZE, "block"), self._key)

    def encrypt_ecb(self, data: bytes | bytearray | Sequence[int]) -> bytes:
        """Encrypt data whose length is a multiple of 16 in ECB mode."""
        raw = bytes(data)
        if len(raw) % BLOCK_SIZE:
            raise ValueError(f"data length must be a multiple of {BLOCK_SIZE}, got {len(raw)}")
        return b"".join(
            _cipher(raw[start:start + BLOCK_SIZE], self._key)
            for start in range(0, len(raw), BLOCK_SIZE)
        )