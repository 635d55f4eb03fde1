import pytest

from cubmap.xpm import (
    XpmError,
    parse_xpm,
    str_str,
    str_str_quoted,
    str_to_wordtab,
    strip_comments,
    text_to_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = ["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"]


def test_wordtab_splits_on_blanks():
    assert str_to_wordtab("  40 40\t2 1 ") == ["40", "40", "2", "1"]


def test_str_str_found_and_missing():
    text = "abcabc"
    index = str_str(text, "ca")
    assert text[index:index + 2] == "ca"
    assert str_str(text, "zz") is None


def test_str_str_quoted_skips_strings():
    text = '"/*" /* x */'
    index = str_str_quoted(text, "/*")
    assert index > text.index('"', 1)
    assert text.startswith("/*", index)


def test_strip_comments_block():
    text = 'a /* b */ "c /* d */"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert " b " not in result
    assert '"c /* d */"' in result


def test_strip_comments_line():
    result = strip_comments("x // note\ny")
    assert "note" not in result
    assert result.endswith("y")


def test_unterminated_comment():
    with pytest.raises(XpmError):
        strip_comments("/* open")


def test_text_to_rgb():
    assert text_to_rgb("#FF0000") == 0xFF0000
    assert text_to_rgb("red") == 0xFF0000
    assert text_to_rgb("dark", "red") == 0x8B0000
    assert text_to_rgb("None") == -1
    assert text_to_rgb("nosuchcolour") == 0


def test_parse_xpm_pixels():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c #0000FF", "a"])
    assert image.get_pixel(0, 0) == 0x0000FF


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c red", "abc c #0000FF", "abc"])
    assert image.get_pixel(0, 0) == 0xFF0000


@pytest.mark.parametrize(
    "lines",
    [
        ["2 2 1"],
        ["0 2 1 1", "a c red", "aa", "aa"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_xpm_file(tmp_path):
    path = tmp_path / "tex.xpm"
    path.write_text(
        "/* XPM */\nstatic char *tex[] = {\n"
        + ",\n".join(f'"{line}"' for line in SAMPLE)
        + "\n};\n// end\n"
    )
    image = xpm_file_to_image(path)
    assert image.data_addr().data == parse_xpm(SAMPLE).data_addr().data


def test_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        xpm_file_to_image(tmp_path / "absent.xpm")


def test_xpm_to_image_matches_parse():
    assert xpm_to_image(tuple(SAMPLE)).data_addr().data == parse_xpm(SAMPLE).data_addr().data