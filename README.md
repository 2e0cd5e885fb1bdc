# cipherkit

A small toolbox of the arithmetic and table lookups that sit underneath
classical ciphers and block ciphers. Each piece is a library function, and
most of them are also a small command-line tool.

| Module                | What it does                                                          |
|-----------------------|-----------------------------------------------------------------------|
| `cipherkit.numtheory` | Extended Euclid and modular inverses                                  |
| `cipherkit.blocks`    | Split text into fixed-size blocks, padding the last one               |
| `cipherkit.gf256`     | Addition, multiplication, inversion and division in GF(2^8) (AES)     |
| `cipherkit.sm4`       | The SM4 S-box                                                         |
| `cipherkit.des`       | DES S-box substitution and the initial / inverse initial permutation  |
| `cipherkit.bignum`    | `Natural`, an immutable non-negative integer of any size              |
| `cipherkit.vigenere`  | Vigenere encryption of upper-case letters in a text or a file         |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

### Modular inverses

```python
from cipherkit.numtheory import extended_gcd, mod_inverse

mod_inverse(3, 11)      # 4, since 3 * 4 == 12 == 1 (mod 11)
extended_gcd(240, 46)   # (g, x, y) with 240 * x + 46 * y == g
```

`mod_inverse` raises `ValueError` when the two numbers are not coprime.
Division inside `extended_gcd` truncates toward zero.

### Blocks

```python
from cipherkit.blocks import split_blocks

split_blocks("abcdefg", 3)        # ['abc', 'def', 'g##']
split_blocks("abcdefg", 3, "*")   # ['abc', 'def', 'g**']
```

Every block has the requested size; the last one is filled on the right
with the fill character (`#` by default). An empty text gives one block of
padding. A size below one, or a fill that is not a single character,
raises `ValueError`.

### GF(2^8)

Arithmetic modulo the AES polynomial x^8 + x^4 + x^3 + x + 1:

```python
from cipherkit.gf256 import gf_add, gf_mul, gf_inv, gf_div, table_inverse

gf_add(0x57, 0x83)   # 0xd4, addition is XOR
gf_mul(0x57, 0x83)   # 0xc1
gf_inv(0x53)         # 0xca
table_inverse(0x53)  # the same inverse, read from a precomputed table
gf_div(0x57, 0x83)   # 0x57 times the inverse of 0x83
```

The inverse of zero, and division by zero, give zero. Arguments outside
0..255 raise `ValueError`.

### SM4 and DES

```python
from cipherkit.sm4 import sbox_transform
from cipherkit.des import (
    to_bits, sbox_substitute, permute, IP,
    initial_permutation, inverse_initial_permutation,
)

sbox_transform(0x00)                      # 0xd6

block = 0x0123456789ABCDEF
scrambled = initial_permutation(block)
inverse_initial_permutation(scrambled) == block   # True
permute(block, IP) == scrambled                   # True

to_bits(5, 8)                             # '00000101'
```

`sbox_substitute` runs a 48-bit value through the eight DES S-boxes and
returns the 32-bit result. `permute` applies any permutation table whose
bit positions count from 1 at the most significant end to a 64-bit value.
Values that do not fit raise `ValueError`.

### Big naturals

```python
from cipherkit.bignum import Natural, isqrt

a = Natural("971790371510213572206403344357204247802069781131")
b = Natural(200)
str(a * b)
a // b, a % b
a + 1, 3 * b      # plain non-negative ints mix in freely
a.sqrt()          # integer square root, rounded down, as a Natural
isqrt(10 ** 40)   # Natural(10 ** 20)
```

`Natural` accepts an int, a decimal string or another `Natural`, and
supports `+`, `-`, `*`, `//`, `%`, comparisons, hashing, `int()` and
`str()`. Values never go below zero: a negative input or subtracting a
larger number raises `ValueError`, and dividing by zero raises
`ZeroDivisionError`.

### Vigenere

```python
from cipherkit.vigenere import encrypt, encrypt_file

encrypt("HELLO WORLD", "KEY")
encrypt_file("KEY", "encrypt.txt", "output.txt")
```

`encrypt(text, key)` shifts each letter A-Z of `text` by the matching
letter of an upper-case `key`; other characters are copied unchanged.
Every character of the text, shifted or not, moves one step along the key.
An empty key raises `ValueError`. `encrypt_file(key, source, destination)`
does the same for a whole file, reading and writing one character per byte;
the paths default to `encrypt.txt` and `output.txt`.

## Command-line tools

Arguments may be given on the command line; when they are left out, the
tool reads them from standard input.

```
cipherkit-modinv A M          # inverse of A modulo M, or "inverse does not exist"
cipherkit-blocks TEXT SIZE    # TEXT in SIZE-character blocks, one per line, '#'-padded
cipherkit-gf256 A             # table inverse of hex byte A, as 0xNN
cipherkit-gf256 A B           # inverse of A, A + B and A / B for hex bytes A and B
cipherkit-sm4 HEXBYTE         # SM4 S-box lookup, as 0xNN
cipherkit-des sbox VALUE      # 32-bit S-box output of a 48-bit decimal VALUE
cipherkit-des ip VALUE        # IP of a 64-bit decimal VALUE, then IP^-1 of that
cipherkit-vigenere KEY [-i INPUT] [-o OUTPUT]
```

`cipherkit-vigenere` encrypts `encrypt.txt` into `output.txt` unless
`-i`/`-o` say otherwise, and uses at most the first 256 characters of the
key. `cipherkit-des` and `cipherkit-vigenere` also take `--help`.

## What it does not do

These are single steps, not ciphers: there is no complete DES, SM4 or AES
encryption or decryption, no key schedule, and no Vigenere decryption.