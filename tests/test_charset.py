import pytest

from petsciiview import charset


def test_tables_cover_every_screen_code_once() -> None:
    for table in (charset.UPPERCASE, charset.LOWERCASE):
        assert len(table) == 256
        assert len(set(table)) == 256


def test_uppercase_bank_layout() -> None:
    assert charset.UPPERCASE[0x00] == "@"
    assert charset.UPPERCASE[0x01] == "A"
    assert charset.UPPERCASE[0x1A] == "Z"
    assert charset.UPPERCASE[0x1C] == "£"
    assert charset.UPPERCASE[0x20] == " "
    assert charset.UPPERCASE[0x31] == "1"
    assert charset.UPPERCASE[0xA0] == "\ue0a0"


def test_lowercase_bank_layout() -> None:
    assert charset.LOWERCASE[0x01] == "a"
    assert charset.LOWERCASE[0x41] == "A"
    assert charset.LOWERCASE[0x20] == " "
    assert charset.LOWERCASE[0x81] == "\ue181"


def test_reverse_char_rotates_within_uppercase_bank_first() -> None:
    index = charset.UPPERCASE.index("A")
    assert charset.reverse_char("A") == charset.UPPERCASE[(index + 128) % 256]


def test_reverse_char_falls_back_to_lowercase_bank() -> None:
    index = charset.LOWERCASE.index("a")
    assert "a" not in charset.UPPERCASE
    assert charset.reverse_char("a") == charset.LOWERCASE[(index + 128) % 256]


@pytest.mark.parametrize("char", ["A", "z", " ", "7", "£", "\ue0a0", "\ue19a"])
def test_reverse_char_is_an_involution(char: str) -> None:
    assert charset.reverse_char(charset.reverse_char(char)) == char


def test_reverse_char_leaves_unknown_characters() -> None:
    assert charset.reverse_char("é") == "é"
    assert charset.reverse_char("\t") == "\t"


def test_screen_code_and_is_reversed() -> None:
    assert charset.screen_code("A") == 0x01
    assert charset.screen_code("a") == 0x01
    assert charset.screen_code("é") is None
    assert charset.is_reversed(charset.reverse_char("A"))
    assert not charset.is_reversed("A")
    assert not charset.is_reversed("é")
