"""
Argument parsing helpers shared by the command parsers.

Handles the small grammar used by journal commands:
- Numbers: "45", "0", "-3" (sign accepted syntactically, rejected by range checks)
- Markers: "yoga /dur 45 /feel 4" or compact "yoga /dur45/feel4"
- Fields: "waist/70 hips/95"
"""
import re
from typing import Dict, Iterable, Tuple

from mama.errors import CommandSyntaxError, CommandValidationError

INT_RE = re.compile(r"^[+-]?[0-9]+$")
FIELD_RE = re.compile(r"^([A-Za-z]+)/(.*)$")
# Marker boundaries: start of text, whitespace, or a digit ending a compact value
MARKER_START = r"(?:^|(?<=\s)|(?<=[0-9]))"
MARKER_END_NUMERIC = r"(?![A-Za-z])"

FORBIDDEN_TEXT_CHARS = "|"


def parse_int(text: str, what: str) -> int:
    """
    Parse a single integer token.

    Raises:
        CommandSyntaxError: If text is empty, has extra tokens or is not numeric
    """
    value = text.strip()
    if not value:
        raise CommandSyntaxError(f"Missing {what}.")
    tokens = value.split()
    if len(tokens) > 1 and INT_RE.match(tokens[0]):
        raise CommandSyntaxError(f"Unexpected text after {what}: '{' '.join(tokens[1:])}'.")
    if not INT_RE.match(value):
        raise CommandSyntaxError(f"{what.capitalize()} must be a whole number.")
    return int(value)


def parse_positive_int(text: str, what: str) -> int:
    """Parse an integer that must be greater than 0."""
    number = parse_int(text, what)
    if number <= 0:
        raise CommandValidationError(f"{what.capitalize()} must be greater than 0.")
    return number


def parse_non_negative_int(text: str, what: str) -> int:
    """Parse an integer that may be 0 but not negative."""
    number = parse_int(text, what)
    if number < 0:
        raise CommandValidationError(f"{what.capitalize()} cannot be negative.")
    return number


def parse_int_in_range(text: str, what: str, low: int, high: int) -> int:
    """Parse an integer within [low, high]."""
    number = parse_int(text, what)
    if not low <= number <= high:
        raise CommandValidationError(f"{what.capitalize()} must be between {low} and {high}.")
    return number


def split_markers(
    args: str, markers: Iterable[str], numeric: bool = True
) -> Tuple[str, Dict[str, str]]:
    """
    Split arguments into leading text and marker values.

    Each marker must appear exactly once, matched case-insensitively,
    with or without a space before its value. A marker only counts where a
    word starts, or straight after a number in the compact form. With
    numeric=True it must also not run into a letter, so "/durable" is not
    "/dur".

    Args:
        args: Raw arguments, e.g. "yoga /dur 45 /feel 4"
        markers: Markers to extract, e.g. ("/dur", "/feel")
        numeric: True when every marker takes a number

    Returns:
        (head, values) where head is the text before the first marker

    Example:
        >>> split_markers("yoga /dur45/feel 4", ("/dur", "/feel"))
        ('yoga', {'/dur': '45', '/feel': '4'})
    """
    positions = []
    tail = MARKER_END_NUMERIC if numeric else ""
    for marker in markers:
        pattern = MARKER_START + re.escape(marker) + tail
        hits = list(re.finditer(pattern, args, re.IGNORECASE))
        if not hits:
            raise CommandSyntaxError(f"Missing {marker}.")
        if len(hits) > 1:
            raise CommandSyntaxError(f"{marker} must appear exactly once.")
        positions.append((hits[0].start(), hits[0].end(), marker))

    positions.sort()
    head = args[:positions[0][0]].strip()
    values = {}
    for i, (_, end, marker) in enumerate(positions):
        stop = positions[i + 1][0] if i + 1 < len(positions) else len(args)
        values[marker] = args[end:stop].strip()
    return head, values


def parse_fields(args: str, allowed: Iterable[str]) -> Dict[str, str]:
    """
    Parse "name/value" tokens.

    Raises:
        CommandSyntaxError: On a token without "/", an unknown or a repeated field
    """
    allowed = tuple(allowed)
    result: Dict[str, str] = {}
    for token in args.split():
        match = FIELD_RE.match(token)
        if not match:
            raise CommandSyntaxError(f"Expected FIELD/VALUE but got '{token}'.")
        name = match.group(1).lower()
        if name not in allowed:
            raise CommandSyntaxError(f"Unknown field '{match.group(1)}'.")
        if name in result:
            raise CommandSyntaxError(f"Field '{name}' given more than once.")
        result[name] = match.group(2)
    return result


def check_text(text: str, what: str) -> str:
    """
    Validate a free-text field.

    Returns:
        The stripped text

    Raises:
        CommandSyntaxError: If empty
        CommandValidationError: If it contains the storage separator
    """
    value = text.strip()
    if not value:
        raise CommandSyntaxError(f"Missing {what}.")
    if any(ch in value for ch in FORBIDDEN_TEXT_CHARS):
        raise CommandValidationError(f"{what.capitalize()} cannot contain '|'.")
    return value
