import pytest

from cubraycaster.xpm import (
    XpmError,
    find_unquoted,
    load_xpm,
    parse_xpm,
    quoted_lines,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = [
    "2 2 3 1",
    "a c #FF0000",
    "b c white",
    ". c None",
    "ab",
    ".a",
]


def test_split_words():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]
    assert split_words("") == []


def test_find_unquoted_skips_strings():
    assert find_unquoted('"/*" /*', "/*") == 5
    assert find_unquoted('"/*"', "/*") == -1
    assert find_unquoted("ab", "abc") == -1


def test_strip_comments_keeps_length_and_strings():
    text = 'a /* gone */ "keep /* this */" b // tail\nc'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "gone" not in stripped
    assert "tail" not in stripped
    assert '"keep /* this */"' in stripped
    assert stripped.endswith("c")


def test_quoted_lines():
    assert list(quoted_lines('x "ab" y "cd" "unfinished')) == ["ab", "cd"]


def test_text_to_rgb():
    assert text_to_rgb("#FF0000", None) == 0xFF0000
    assert text_to_rgb("red", None) == 0xFF0000
    assert text_to_rgb("WHITE", None) == 0xFFFFFF
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0
    assert text_to_rgb("#", None) == 0


def test_text_to_rgb_two_words():
    assert text_to_rgb("light", "pink") == 0xFFB6C1
    assert text_to_rgb("red", "s") == 0


def test_parse_xpm_pixels():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFFFFFF
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(1, 1) == 0xFF0000


def test_parse_xpm_three_chars_per_pixel():
    lines = ["2 1 2 3", "aaa c #00FF00", "bbb c black", "bbbaaa"]
    image = parse_xpm(lines)
    assert image.get_pixel(0, 0) == 0
    assert image.get_pixel(1, 0) == 0x00FF00


@pytest.mark.parametrize(
    "lines",
    [
        ["0 2 1 1", "a c red", "aa", "aa"],
        ["2 2 1"],
        ["2 1 1 1", "a red"],
        ["2 1 1 1", "a c"],
        ["2 2 1 1", "a c red", "aa"],
        [],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_xpm_round_trip(tmp_path):
    body = ",\n".join(f'"{line}"' for line in SAMPLE)
    text = f"/* XPM */\nstatic char *sample[] = {{\n// header follows\n{body}\n}};\n"
    path = tmp_path / "sample.xpm"
    path.write_text(text)
    image = load_xpm(path)
    expected = parse_xpm(SAMPLE)
    assert list(image.pixels) == list(expected.pixels)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")