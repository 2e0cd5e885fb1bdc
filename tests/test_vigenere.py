import io

import pytest

from cipherkit.vigenere import encrypt, encrypt_file, main


def test_key_of_a_is_identity():
    text = "HELLO, WORLD!\nXYZ"
    assert encrypt(text, "A") == text


def test_wraps_around_alphabet():
    assert encrypt("Z", "B") == "A"


def test_non_uppercase_is_unchanged():
    text = "abc 123 !?\n"
    assert encrypt(text, "QRS") == text


def test_key_advances_over_other_characters():
    result = encrypt("xyB", "AAC")
    assert result[:2] == "xy"
    assert result[2] == encrypt("B", "C")


def test_lowercase_key_shift_matches_offset():
    # 'a' lies 32 past 'A'; 32 mod 26 is the shift of 'G'.
    assert encrypt("ABCXYZ", "a") == encrypt("ABCXYZ", "G")


def test_output_length_matches_input():
    text = "THE QUICK BROWN FOX"
    assert len(encrypt(text, "KEY")) == len(text)


def test_letters_stay_uppercase():
    result = encrypt("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "LEMON")
    assert all("A" <= ch <= "Z" for ch in result)


def test_empty_key_raises():
    with pytest.raises(ValueError):
        encrypt("ABC", "")


def test_encrypt_file(tmp_path):
    source = tmp_path / "in.txt"
    destination = tmp_path / "out.txt"
    source.write_text("ATTACK AT DAWN\n", encoding="latin-1", newline="")
    encrypt_file("LEMON", source, destination)
    assert destination.read_text(encoding="latin-1") == encrypt("ATTACK AT DAWN\n", "LEMON")


def test_main_uses_default_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "encrypt.txt").write_text("HELLO", encoding="latin-1")
    assert main(["KEY"]) == 0
    assert (tmp_path / "output.txt").read_text(encoding="latin-1") == encrypt("HELLO", "KEY")


def test_main_reads_key_from_stdin(tmp_path, monkeypatch):
    source = tmp_path / "a.txt"
    destination = tmp_path / "b.txt"
    source.write_text("ABC", encoding="latin-1")
    monkeypatch.setattr("sys.stdin", io.StringIO("BBB\n"))
    assert main(["-i", str(source), "-o", str(destination)]) == 0
    assert destination.read_text(encoding="latin-1") == encrypt("ABC", "BBB")


def test_main_without_key_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert "Invalid input." in capsys.readouterr().err
    assert not (tmp_path / "output.txt").exists()