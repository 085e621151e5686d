"""Tests for the command-line front end."""

import pytest

from cipher_suite.cli import main, parse_key


class TestCli:
    """Test argument handling and output of the CLI."""

    def test_caesar_encrypt(self, capsys):
        exit_code = main(["-a", "caesar", "-d", "encrypt", "-k", "13", "test"])

        assert exit_code == 0
        assert capsys.readouterr().out == "Algorithm: Caesar\nDirection: Encrypt\nOutput: grfg\n"

    def test_short_aliases(self, capsys):
        exit_code = main(["-a", "p", "-d", "d", "-k", "keyword", "NORDKU"])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "Algorithm: Playfair" in out
        assert "Direction: Decrypt" in out
        assert "Output: SECRET" in out

    def test_long_options(self, capsys):
        exit_code = main(["--algorithm", "vigenere", "--direction", "e", "--key", "key", "secret"])

        assert exit_code == 0
        assert "Output: ciabir" in capsys.readouterr().out

    def test_negative_caesar_key(self, capsys):
        exit_code = main(["-a", "c", "-d", "e", "--key=-3", "def"])

        assert exit_code == 0
        assert "Output: abc" in capsys.readouterr().out

    def test_brute_force_with_encrypt_rejected(self, capsys):
        exit_code = main(["-a", "c", "-d", "e", "-k", "3", "-b", "abc"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Error: Brute force mode cannot be used with encryption." in captured.err

    def test_brute_force_with_decrypt_uses_key(self, capsys):
        exit_code = main(["-a", "c", "-d", "d", "-k", "13", "--brute-force", "grfg"])

        assert exit_code == 0
        assert "Output: test" in capsys.readouterr().out

    def test_text_key_for_caesar_rejected(self, capsys):
        exit_code = main(["-a", "caesar", "-d", "encrypt", "-k", "abc", "test"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.err.startswith("Error: Caesar key must be integer")

    def test_integer_key_for_vigenere_rejected(self, capsys):
        exit_code = main(["-a", "v", "-d", "encrypt", "-k", "42", "test"])

        assert exit_code == 1
        assert "Vigenere key must be text" in capsys.readouterr().err

    def test_playfair_non_letters_reported(self, capsys):
        exit_code = main(["-a", "p", "-d", "e", "-k", "keyword", "hello world"])

        assert exit_code == 1
        assert "cannot process character ' '" in capsys.readouterr().err

    def test_unknown_algorithm(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["-a", "enigma", "-d", "e", "-k", "1", "text"])

        assert exc_info.value.code == 2
        assert "invalid algorithm 'enigma'" in capsys.readouterr().err

    def test_missing_key(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["-a", "c", "-d", "e", "text"])

        assert exc_info.value.code == 2


class TestParseKey:
    """Test key parsing."""

    def test_integer(self):
        assert parse_key("13") == 13
        assert parse_key("-7") == -7

    def test_text(self):
        assert parse_key("keyword") == "keyword"
        assert parse_key("3a") == "3a"
