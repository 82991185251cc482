import pytest

from violetkit.stringref import StringRef


def test_basic_functionality():
    abc = StringRef("abc")
    assert len(abc) == 3
    assert str(abc) == "abc"
    assert abc.starts_with("a")
    assert abc.starts_with("ab")
    assert abc.first()
    assert abc.last()
    assert abc.first().value() == "a"
    assert abc.last().value() == "c"

    empty = StringRef()
    assert len(empty) == 0
    assert not empty.starts_with("a")
    assert not empty.starts_with("ab")
    assert not empty.first()
    assert not empty.last()
    assert empty.is_empty()
    assert not empty


def test_trimming():
    hello = StringRef("  \t\nhello world \r\n")
    assert hello.trim_start().starts_with("hello")
    assert hello.trim_end() == "  \t\nhello world"
    assert hello.trim() == "hello world"


def test_trim_only_ascii_whitespace():
    text = StringRef("\u00a0abc\u00a0")
    assert text.trim() == "\u00a0abc\u00a0"


def test_strip_prefix():
    text = StringRef("hello world")
    stripped = text.strip_prefix("hello ")
    assert stripped
    assert stripped.value() == "world"
    assert not text.strip_prefix("world")


def test_split_single_char():
    parts = StringRef("a,b,,c").split(",")
    assert [str(p) for p in parts] == ["a", "b", "", "c"]


def test_split_multi_char():
    parts = StringRef("a::b::c").split("::")
    assert parts == [StringRef("a"), StringRef("b"), StringRef("c")]


def test_split_empty_delimiter_returns_whole():
    assert StringRef("abc").split("") == [StringRef("abc")]


def test_split_without_delimiter_present():
    assert StringRef("abc").split(";") == ["abc"]


def test_equality_and_hash():
    assert StringRef("abc") == "abc"
    assert StringRef("abc") == StringRef("abc")
    assert not (StringRef("abc") == "abd")
    assert hash(StringRef("abc")) == hash(StringRef("abc"))


def test_indexing():
    text = StringRef("abc")
    assert text[1] == "b"
    with pytest.raises(IndexError):
        text[3]
    with pytest.raises(IndexError):
        text[-1]


def test_as_bytes():
    assert StringRef("abc").as_bytes() == b"abc"


def test_none_rejected():
    with pytest.raises(TypeError):
        StringRef(None)


def test_copy_from_stringref():
    original = StringRef("xyz")
    assert StringRef(original) == original