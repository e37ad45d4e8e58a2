import pytest

from labworks.magic import FIRST, SECOND, magic_word, main, say_hello


def test_magic_word_of_builtin_pair():
    assert magic_word(FIRST, SECOND) == "DEADBEEF"


def test_magic_word_is_upper_case_hex():
    word = magic_word(FIRST, SECOND)
    assert word == word.upper()
    assert int(word, 16) >= 0


@pytest.mark.parametrize("a, b", [(1, 2), (0, 0), (100, 200)])
def test_magic_word_is_symmetric(a, b):
    assert magic_word(a, b) == magic_word(b, a)


def test_magic_word_wraps_to_32_bits():
    assert magic_word(2**32, 7) == magic_word(0, 7)
    assert len(magic_word(-1, 0)) == 8


def test_say_hello_prints_and_returns_line(capsys):
    line = say_hello(FIRST, SECOND)
    out = capsys.readouterr().out
    assert out == line + "\n"
    assert line.endswith(magic_word(FIRST, SECOND))
    assert line.startswith("The magic word is: ")


def test_main_prints_magic_word(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert magic_word(FIRST, SECOND) in out