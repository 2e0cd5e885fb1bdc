[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipherkit"
version = "0.1.0"
description = "Building blocks for classical and block ciphers: modular inverses, block splitting, GF(2^8) arithmetic, DES and SM4 tables, Vigenere and big naturals."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "des",
    "sm4",
    "aes",
    "galois-field",
    "vigenere",
    "modular-inverse",
    "bignum",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cipherkit-modinv = "cipherkit.numtheory:main"
cipherkit-blocks = "cipherkit.blocks:main"
cipherkit-gf256 = "cipherkit.gf256:main"
cipherkit-sm4 = "cipherkit.sm4:main"
cipherkit-des = "cipherkit.des:main"
cipherkit-vigenere = "cipherkit.vigenere:main"

[tool.hatch.build.targets.wheel]
packages = ["cipherkit"]

[tool.hatch.build.targets.sdist]
include = ["cipherkit", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["cipherkit"]
