import pytest

from genengine.fixed_string import FIXED_STRING_CAPACITY, FixedString


def test_hello_world_view():
    assert FixedString("hello world").view() == "hello world"


def test_default_is_empty():
    fs = FixedString()
    assert fs.view() == ""
    assert len(fs) == 0
    assert fs.capacity == FIXED_STRING_CAPACITY


def test_truncates_to_capacity():
    fs = FixedString("abcdef", capacity=3)
    assert fs.view() == "abc"
    assert len(fs) == 3


def test_long_text_truncated_to_default_capacity():
    text = "x" * (FIXED_STRING_CAPACITY + 10)
    fs = FixedString(text)
    assert len(fs) == FIXED_STRING_CAPACITY
    assert text.startswith(fs.view())


def test_text_exactly_capacity_kept():
    fs = FixedString("abcd", capacity=4)
    assert fs.view() == "abcd"


def test_str_and_equality():
    fs = FixedString("hello")
    assert str(fs) == "hello"
    assert fs == "hello"
    assert fs == FixedString("hello")
    assert hash(fs) == hash(FixedString("hello"))


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        FixedString("abc", capacity=-1)