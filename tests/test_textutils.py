import io

import pytest

from lcftools.textutils import (
    escape,
    get_filename,
    has_ext,
    join,
    lower_case,
    read_lines,
    remove_control_chars,
    split,
    trim_whitespace,
)


def test_get_filename_strips_directory_and_extension():
    assert get_filename("game/Map0001.lmu") == "Map0001"


def test_get_filename_without_directory_or_extension():
    assert get_filename("RPG_RT") == "RPG_RT"


def test_get_filename_plain_name_with_extension():
    assert get_filename("RPG_RT.lmt") == "RPG_RT"


@pytest.mark.parametrize(
    "path, ext, expected",
    [
        ("Map0001.LMU", ".lmu", True),
        ("map0001.lmu", ".lmu", True),
        ("map0001.lmt", ".lmu", False),
        ("mu", ".lmu", False),
        ("map0001.lmu", ".LMU", False),
        ("anything", "", True),
    ],
)
def test_has_ext(path, ext, expected):
    assert has_ext(path, ext) is expected


def test_join_default_newline():
    assert join(["a", "b", "c"]) == "a\nb\nc"


def test_join_empty_list():
    assert join([]) == ""


def test_join_custom_char():
    assert join(["x", "y"], "\x01") == "x\x01y"


def test_split_keeps_empty_tokens():
    assert split("a\n\nb\n") == ["a", "", "b", ""]


def test_split_empty_string():
    assert split("") == [""]


@pytest.mark.parametrize("lines", [["one"], ["a", "", "b"], [""], ["x", "y", "z"]])
def test_split_join_round_trip(lines):
    assert split(join(lines)) == lines


def test_split_custom_char():
    assert split("a\x01b\x01c", "\x01") == ["a", "b", "c"]


def test_lower_case_only_ascii():
    assert lower_case("RPG_RT.LDB") == "rpg_rt.ldb"
    assert lower_case("ÄÖ") == "ÄÖ"


def test_remove_control_chars():
    assert remove_control_chars("a\x01b\x7fc\n\x1f") == "abc"
    assert remove_control_chars("plain") == "plain"


def test_read_lines_mixed_endings():
    stream = io.StringIO("a\r\nb\rc\n\nd", newline="")
    assert list(read_lines(stream)) == ["a", "b", "c", "", "d"]


def test_read_lines_trailing_newline_gives_no_extra_line():
    stream = io.StringIO("a\nb\n", newline="")
    assert list(read_lines(stream)) == ["a", "b"]


def test_read_lines_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []


def test_trim_whitespace():
    assert trim_whitespace(" \t msgid \"x\" \r\n") == 'msgid "x"'
    assert trim_whitespace("   ") == ""


def test_escape_quotes_and_backslashes():
    assert escape('say "hi" \\ now') == 'say \\"hi\\" \\\\ now'
    assert escape("plain") == "plain"