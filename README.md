# tinyaes

This is a small AES-128 encryptor written in pure Python. It has no dependencies.
It encrypts 16-byte blocks. It derives each round key from the previous one during encryption, so it never stores the whole key schedule.

## Installation

```
pip install .
```

## Usage

```python
from tinyaes.cipher import Aes128, encrypt_block

key = bytes(range(16))
block = bytes.fromhex("00112233445566778899aabbccddeeff")

cipher = Aes128(key)
print(cipher.encrypt_block(block).hex())
# 69c4e0d86a7b0430d8cdb78070b4c55a

# One-shot helper
assert encrypt_block(key, block) == cipher.encrypt_block(block)

# ECB over several blocks; the input length must be a multiple of 16
ciphertext = cipher.encrypt_ecb(block * 4)
```

Keys, blocks and data can be given as `bytes`, `bytearray` or any sequence of ints.

The following inputs raise `ValueError`:

- a key that is not exactly 16 bytes long
- a block that is not exactly 16 bytes long
- ECB data whose length is not a multiple of 16

## Field arithmetic

`tinyaes.cipher` also exposes the building blocks of the cipher:

- `xtime(x)` multiplies by `{02}` in GF(2^8).
- `gf_multiply(a, b)` multiplies two field elements.
- `gf_inverse(a)` gives the multiplicative inverse. It maps 0 to 0.
- `sbox_value(a)` gives the S-box substitution of a byte.
- `expand_round_key(round_number, round_key)` derives the next 16-byte round key. Valid round numbers are 0 to 10.

A byte argument outside 0–255 raises `ValueError`. So does a round number outside 0–10.

The module also exposes the constants `SBOX`, `RCON`, `BLOCK_SIZE`, `KEY_SIZE` and `ROUNDS`.

## Demo

```
tinyaes-demo
```

The command does the following:

1. It encrypts the first block of the NIST SP 800-38A ECB-AES128 test vectors.
2. It prints `SUCCESS!` or `FAILURE!`, depending on whether the result matches the expected ciphertext.
3. It prints the four plaintext blocks, the key and the resulting ciphertext blocks in hex.

The exit status is 0 on success and 1 on failure. You can also run the demo with `python -m tinyaes.demo`.

## What it does not do

- Decryption
- Key sizes other than 128 bits
- Any mode other than ECB
- Padding: ECB input must already be a multiple of 16 bytes. Pad it yourself, for example with zero bytes.

## Tests

```
pip install .[test]
pytest
```