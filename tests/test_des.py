import pytest

from cipherkit.des import (
    IP,
    IP_INV,
    S_BOXES,
    initial_permutation,
    inverse_initial_permutation,
    main,
    permute,
    sbox_substitute,
    to_bits,
)

SAMPLES = [0, 1, 0x0123456789ABCDEF, (1 << 64) - 1, 0x8000000000000000, 0xDEADBEEFCAFEBABE]


@pytest.mark.parametrize("value,width", [(0, 4), (5, 8), (255, 8), (300, 4), (1 << 40, 48)])
def test_to_bits_round_trip(value, width):
    bits = to_bits(value, width)
    assert int(bits, 2) == value
    assert len(bits) >= width
    assert set(bits) <= {"0", "1"}


def test_to_bits_does_not_truncate():
    assert to_bits(300, 4) == "100101100"


def test_to_bits_negative_raises():
    with pytest.raises(ValueError):
        to_bits(-1, 8)


def test_sbox_of_zero_uses_first_entries():
    expected = 0
    for box in S_BOXES:
        expected = (expected << 4) | box[0][0]
    assert sbox_substitute(0) == expected


def test_sbox_of_all_ones_uses_last_entries():
    result = sbox_substitute((1 << 48) - 1)
    nibbles = [(result >> (28 - 4 * i)) & 0xF for i in range(8)]
    assert nibbles == [box[3][15] for box in S_BOXES]


def test_sbox_row_comes_from_outer_bits():
    # first 6-bit group 100000: row 2, column 0
    result = sbox_substitute(0b100000 << 42)
    assert result >> 28 == S_BOXES[0][2][0]


def test_sbox_output_fits_32_bits():
    for value in (0x123456789ABC, 0xFFFF00000000, 0x0000FFFFFFFF):
        assert 0 <= sbox_substitute(value) < 1 << 32


@pytest.mark.parametrize("value", [-1, 1 << 48])
def test_sbox_out_of_range(value):
    with pytest.raises(ValueError):
        sbox_substitute(value)


@pytest.mark.parametrize("value", SAMPLES)
def test_ip_round_trip(value):
    assert inverse_initial_permutation(initial_permutation(value)) == value
    assert initial_permutation(inverse_initial_permutation(value)) == value


@pytest.mark.parametrize("value", SAMPLES)
def test_ip_keeps_bit_count(value):
    assert bin(initial_permutation(value)).count("1") == bin(value).count("1")


def test_ip_moves_bit_58_to_front():
    assert initial_permutation(1 << (64 - IP[0])) == 1 << 63


def test_permute_identity_table():
    identity = tuple(range(1, 65))
    for value in SAMPLES:
        assert permute(value, identity) == value


def test_permute_rejects_bad_position():
    with pytest.raises(ValueError):
        permute(1, (0,))


def test_permute_rejects_wide_value():
    with pytest.raises(ValueError):
        permute(1 << 64, IP)


@pytest.mark.parametrize("table", [IP, IP_INV])
def test_tables_are_permutations(table):
    images = {permute(1 << (64 - position), table) for position in range(1, 65)}
    assert images == {1 << bit for bit in range(64)}


def test_main_sbox(capsys):
    assert main(["sbox", "0"]) == 0
    assert capsys.readouterr().out == to_bits(sbox_substitute(0), 32) + "\n"


def test_main_ip(capsys):
    value = 0x0123456789ABCDEF
    assert main(["ip", str(value)]) == 0
    first, second = capsys.readouterr().out.splitlines()
    assert first == to_bits(initial_permutation(value), 64)
    assert second == to_bits(value, 64)