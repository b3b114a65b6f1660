import io

import pytest

from dstructs.scanner import scan


def test_reads_two_integers():
    assert scan(io.StringIO("12 34"), "%d%d") == [12, 34]


def test_skips_non_ascii_text_before_number():
    assert scan(io.StringIO("数据：-7"), "%d") == [-7]


def test_skips_letters_before_number():
    assert scan(io.StringIO("abc42"), "%d") == [42]


def test_reads_float_then_int():
    assert scan(io.StringIO("3.5 7"), "%f%d") == [3.5, 7]


def test_float_with_exponent():
    assert scan(io.StringIO("1e3"), "%f") == [float("1e3")]


def test_float_without_exponent_digits_leaves_letter():
    stream = io.StringIO("2.5e x")
    assert scan(stream, "%f") == [2.5]
    assert scan(stream, "%c") == ["e"]


def test_reads_characters():
    assert scan(io.StringIO("ab"), "%c%c") == ["a", "b"]


def test_reads_words():
    assert scan(io.StringIO("  hello world"), "%s%s") == ["hello", "world"]


def test_word_at_end_of_blank_input_is_empty():
    assert scan(io.StringIO("   "), "%s") == [""]


def test_empty_stream_yields_nothing():
    assert scan(io.StringIO(""), "%d") == []


def test_stream_shorter_than_format():
    assert scan(io.StringIO("5"), "%d%d") == [5]


def test_successive_calls_continue_where_previous_stopped():
    stream = io.StringIO("1 2 3")
    assert [scan(stream, "%d") for _ in range(3)] == [[1], [2], [3]]
    assert scan(stream, "%d") == []


def test_unsupported_format_raises():
    with pytest.raises(ValueError):
        scan(io.StringIO("1"), "%x")