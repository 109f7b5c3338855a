# tests/test_stringx_edit.py
from __future__ import annotations

import pytest

# Module under test
from stdx.stringx import edit as E


# ─────────────────────────────────────────────────────────────────────────────
# Comparison
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("foo", "foo", 0),
        ("foo", "food", -1),
        ("food", "foo", 1),
        ("foo", "FOO", 0),
        ("FOO", "foo", 0),
        ("foo", "fod", 1),
        ("fod", "foo", -1),
        ("foo", "foO", 0),
        ("Straße", "STRASSE", 0),
    ],
)
def test_casecmp(a, b, expected):
    assert E.casecmp(a, b) == expected


def test_is_ascii():
    assert E.is_ascii("hello")
    assert E.is_ascii("")
    assert not E.is_ascii("héllo")


# ─────────────────────────────────────────────────────────────────────────────
# Padding & trimming
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "text,width,pad,expected",
    [
        ("hello", 4, " ", "hello"),
        ("hello", 20, " ", "       hello        "),
        ("hello", 20, "123", "1231231hello12312312"),
        ("", 3, "ab", "aab"),
    ],
)
def test_center(text, width, pad, expected):
    assert E.center(text, width, pad) == expected


def test_center_rejects_empty_pad():
    with pytest.raises(ValueError):
        E.center("hello", 10, "")


@pytest.mark.parametrize(
    "text,separator,expected",
    [
        ("hello", None, "hello"),
        ("hello\n", None, "hello"),
        ("hello\r\n", None, "hello"),
        ("hello\n\r", None, "hello\n"),
        ("hello\r", None, "hello"),
        ("hello \n there", None, "hello \n there"),
        ("hello\r\n", "\n", "hello"),
        ("hello", "llo", "he"),
        ("hello", "xyz", "hello"),
        ("hello\r\n\r\n", "", "hello"),
        ("hello\r\n\r\r\n", "", "hello\r\n\r"),
        ("", None, ""),
    ],
)
def test_chomp(text, separator, expected):
    assert E.chomp(text, separator) == expected


def test_chr():
    assert E.chr("hello") == "h"
    assert E.chr("") == ""


# ─────────────────────────────────────────────────────────────────────────────
# Insertion & deletion
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "index,expected",
    [
        (1, "fbaroo"),
        (-2, "fobaro"),
        (0, "barfoo"),
        (-1, "foobar"),
        (3, "foobar"),
        (99, "foobar"),
        (-5, "foo"),
    ],
)
def test_insert(index, expected):
    assert E.insert("foo", index, "bar") == expected


@pytest.mark.parametrize(
    "text,char,pos,expected",
    [
        ("helloworld", " ", 5, "hello world"),
        ("helloworld", "!", 10, "helloworld!"),
        ("abc", "!", 99, "abc!"),
        ("abc", "!", -1, "abc!"),
        ("abc", "!", -2, "ab!c"),
        ("", "x", 0, "x"),
    ],
)
def test_insert_char(text, char, pos, expected):
    assert E.insert_char(text, char, pos) == expected


def test_insert_chars():
    assert E.insert_chars("helloworld", 5, ",", " ") == "hello, world"
    assert E.insert_chars("abc", 1) == "abc"


@pytest.mark.parametrize(
    "index,expected",
    [
        (3, "helo world"),
        (0, "ello world"),
        (11, "hello world"),
        (-1, "hello world"),
    ],
)
def test_delete_char(index, expected):
    assert E.delete_char("hello world", index) == expected


def test_delete_matching_chars():
    assert E.delete_matching_chars("hello world", "l") == "heo word"


# ─────────────────────────────────────────────────────────────────────────────
# Iteration & rendering
# ─────────────────────────────────────────────────────────────────────────────

def test_each_char_with_block():
    out = ""

    def collect(ch):
        nonlocal out
        out = E.insert_char(out, ch, -1)

    assert E.each_char("hello", collect) is None
    assert out == "hello"


def test_each_char_without_block_iterates():
    assert list(E.each_char("héllo")) == ["h", "é", "l", "l", "o"]


def test_format_strings():
    assert E.format_strings(["a", "", "b c"]) == '["a", "", "b c"]'
    assert E.format_strings([]) == "[]"
