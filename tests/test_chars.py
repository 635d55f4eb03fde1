import string

import pytest

from cubmap.ft import chars


@pytest.mark.parametrize("code", range(128))
def test_isalpha_matches_ascii_letters(code):
    assert chars.isalpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", range(128))
def test_isdigit_matches_ascii_digits(code):
    assert chars.isdigit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", range(128))
def test_isalnum_is_letter_or_digit(code):
    assert chars.isalnum(code) == (chars.isalpha(code) or chars.isdigit(code))


@pytest.mark.parametrize("code", range(128))
def test_isspace_matches_c_whitespace(code):
    assert chars.isspace(code) == (chr(code) in string.whitespace)


@pytest.mark.parametrize("code", range(128))
def test_isprint_matches_printable(code):
    assert chars.isprint(code) == chr(code).isprintable()


@pytest.mark.parametrize("code", [-1, 0, 127, 128, 255, 1000])
def test_isascii_range(code):
    assert chars.isascii(code) == (0 <= code <= 127)


def test_string_arguments_are_accepted():
    assert chars.isalpha("q") is True
    assert chars.isdigit("q") is False
    assert chars.isspace("\t") is True


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        chars.isalpha("ab")


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_toupper_and_tolower_round_trip(letter):
    upper = chars.toupper(letter)
    assert upper == letter.upper()
    assert chars.tolower(upper) == letter


@pytest.mark.parametrize("code", range(128))
def test_case_conversion_on_codes_matches_str_methods(code):
    assert chars.toupper(code) == ord(chr(code).upper())
    assert chars.tolower(code) == ord(chr(code).lower())


@pytest.mark.parametrize("c", ["1", " ", "@", "[", "`", "{"])
def test_non_letters_are_unchanged(c):
    assert chars.toupper(c) == c
    assert chars.tolower(c) == c


def test_out_of_range_codes_are_unchanged():
    assert chars.tolower(-1) == -1
    assert chars.toupper(300) == 300