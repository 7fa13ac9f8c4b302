"""
Tests for argument parsing helpers.
"""
import pytest
from mama.errors import CommandSyntaxError, CommandValidationError
from mama.parsers import (
    parse_int,
    parse_positive_int,
    parse_non_negative_int,
    parse_int_in_range,
    split_markers,
    parse_fields,
    check_text,
)


def test_parse_int():
    """Test integer parsing."""
    assert parse_int("45", "duration") == 45
    assert parse_int(" -3 ", "duration") == -3


def test_parse_int_errors():
    """Test missing, trailing and non-numeric input."""
    with pytest.raises(CommandSyntaxError, match="Missing duration"):
        parse_int("  ", "duration")
    with pytest.raises(CommandSyntaxError, match="Unexpected text after duration"):
        parse_int("45 mins", "duration")
    with pytest.raises(CommandSyntaxError, match="must be a whole number"):
        parse_int("4.5", "duration")
    with pytest.raises(CommandSyntaxError, match="must be a whole number"):
        parse_int("abc", "duration")
    with pytest.raises(CommandSyntaxError, match="must be a whole number"):
        parse_int("\u0664\u0665", "duration")


def test_positive_and_non_negative():
    """Test zero handling differs between the two checks."""
    assert parse_non_negative_int("0", "volume") == 0
    with pytest.raises(CommandValidationError):
        parse_positive_int("0", "weight")
    with pytest.raises(CommandValidationError):
        parse_positive_int("-2", "weight")
    with pytest.raises(CommandValidationError):
        parse_non_negative_int("-1", "volume")


def test_int_in_range():
    """Test inclusive range check."""
    assert parse_int_in_range("1", "feel", 1, 5) == 1
    assert parse_int_in_range("5", "feel", 1, 5) == 5
    with pytest.raises(CommandValidationError, match="between 1 and 5"):
        parse_int_in_range("6", "feel", 1, 5)


def test_split_markers_spaced_and_compact():
    """Test both marker styles give the same result."""
    expected = ("yoga", {"/dur": "45", "/feel": "4"})
    assert split_markers("yoga /dur 45 /feel 4", ("/dur", "/feel")) == expected
    assert split_markers("yoga /dur45/feel4", ("/dur", "/feel")) == expected
    assert split_markers("yoga /feel 4 /dur 45", ("/dur", "/feel")) == expected


def test_split_markers_errors():
    """Test missing and repeated markers."""
    with pytest.raises(CommandSyntaxError, match="Missing /feel"):
        split_markers("yoga /dur 45", ("/dur", "/feel"))
    with pytest.raises(CommandSyntaxError, match="exactly once"):
        split_markers("yoga /dur 45 /dur 30 /feel 4", ("/dur", "/feel"))


def test_split_markers_word_boundaries():
    """Test markers inside a word are part of the text."""
    assert split_markers("/durable run /dur 30 /feel 3", ("/dur", "/feel")) == (
        "/durable run", {"/dur": "30", "/feel": "3"}
    )
    assert split_markers("soup/cal 5 /cal 300", ("/cal",)) == ("soup/cal 5", {"/cal": "300"})
    assert split_markers("/tmilk", ("/t",), numeric=False) == ("", {"/t": "milk"})


def test_parse_fields():
    """Test name/value tokens."""
    assert parse_fields("waist/70 HIPS/95", ("waist", "hips")) == {"waist": "70", "hips": "95"}


def test_parse_fields_errors():
    """Test unknown, repeated and malformed fields."""
    with pytest.raises(CommandSyntaxError, match="Unknown field"):
        parse_fields("neck/30", ("waist",))
    with pytest.raises(CommandSyntaxError, match="more than once"):
        parse_fields("waist/70 waist/71", ("waist",))
    with pytest.raises(CommandSyntaxError, match="FIELD/VALUE"):
        parse_fields("waist 70", ("waist",))


def test_check_text():
    """Test free text is stripped and rejects the separator."""
    assert check_text("  chicken rice ", "meal name") == "chicken rice"
    with pytest.raises(CommandSyntaxError):
        check_text("", "meal name")
    with pytest.raises(CommandValidationError):
        check_text("a|b", "meal name")
