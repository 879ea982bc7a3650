import io

import pytest

from lcftools.entry import Entry


def _render(entry):
    out = io.StringIO()
    entry.write(out)
    return out.getvalue()


def test_single_line_entry():
    entry = Entry(original=["Hello"], translation=["Hallo"])
    assert _render(entry) == 'msgid "Hello"\nmsgstr "Hallo"\n'


def test_empty_translation_writes_empty_msgstr():
    entry = Entry(original=["Hello"])
    assert _render(entry) == 'msgid "Hello"\nmsgstr ""\n'


def test_context_is_written_first():
    entry = Entry(original=["Alex"], context="actors.name")
    text = _render(entry)
    assert text.splitlines()[0] == 'msgctxt "actors.name"'
    assert text.splitlines()[1] == 'msgid "Alex"'


def test_multi_line_entry():
    entry = Entry(original=["a", "b"], translation=["c"])
    assert _render(entry) == 'msgid ""\n"a\\n"\n"b"\nmsgstr "c"\n'


def test_lines_are_escaped():
    entry = Entry(original=['say "hi"'], translation=["x\\y"])
    assert _render(entry) == 'msgid "say \\"hi\\""\nmsgstr "x\\\\y"\n'


def test_info_and_fuzzy_are_not_written_by_entry():
    entry = Entry(original=["a"], info=["ID 1"], fuzzy=True)
    assert "#" not in _render(entry)


@pytest.mark.parametrize(
    "translation, expected",
    [
        ([], False),
        ([""], False),
        (["x"], True),
        (["", ""], True),
        (["", "x"], True),
    ],
)
def test_has_translation(translation, expected):
    assert Entry(original=["a"], translation=translation).has_translation() is expected


def test_defaults_are_independent():
    first = Entry()
    second = Entry()
    first.original.append("a")
    assert second.original == []
    assert second.fuzzy is False