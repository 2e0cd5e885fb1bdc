"""Building blocks for classical and block ciphers: modular inverses, blocks, GF(2^8), DES, SM4, Vigenere, big naturals."""

__version__ = "0.1.0"

__all__ = ["bignum", "blocks", "des", "gf256", "numtheory", "sm4", "vigenere"]